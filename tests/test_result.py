"""Tests for market_dashboard.result."""

import pytest

from market_dashboard.result import Failure, Success, partition


class TestFailure:
    def test_to_detail(self):
        f = Failure(ticker="AAPL", company_name="Apple Inc.", error="boom")
        assert f.to_detail() == {"ticker": "AAPL", "error": "boom"}

    def test_to_warning_hides_error_text(self):
        f = Failure(ticker="AAPL", company_name="Apple Inc.", error="boom")
        assert f.to_warning() == {
            "ticker": "AAPL",
            "companyName": "Apple Inc.",
            "message": "Failed to fetch data",
        }


class TestPartition:
    def test_splits_and_keeps_order(self):
        results = [
            Success(1),
            Failure("B", "Bee", "err b"),
            Success(3),
            Failure("D", "Dee", "err d"),
        ]
        successes, failures = partition(results)
        assert [s.value for s in successes] == [1, 3]
        assert [f.ticker for f in failures] == ["B", "D"]

    def test_empty(self):
        assert partition([]) == ([], [])

    def test_all_failures(self):
        successes, failures = partition([Failure("A", "Ay", "x")])
        assert successes == []
        assert len(failures) == 1

    def test_rejects_untagged_values(self):
        with pytest.raises(TypeError):
            partition([{"success": True}])
