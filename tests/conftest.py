"""Shared fixtures for market_dashboard tests."""

import pytest

from market_dashboard.config import DashboardConfig


@pytest.fixture
def config() -> DashboardConfig:
    """DashboardConfig with a key and a non-routable upstream."""
    return DashboardConfig(api_key="test-key", base_url="https://upstream.invalid/v1")


@pytest.fixture
def unconfigured() -> DashboardConfig:
    return DashboardConfig(api_key="", base_url="https://upstream.invalid/v1")
