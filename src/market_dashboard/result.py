"""Tagged per-ticker outcome: Success(payload) or Failure(reason)."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    ticker: str
    company_name: str
    error: str

    def to_detail(self) -> dict:
        return {"ticker": self.ticker, "error": self.error}

    def to_warning(self) -> dict:
        return {
            "ticker": self.ticker,
            "companyName": self.company_name,
            "message": "Failed to fetch data",
        }


Result = Union[Success[T], Failure]


def partition(results) -> tuple[list[Success], list[Failure]]:
    """Split results into (successes, failures), preserving order."""
    successes: list[Success] = []
    failures: list[Failure] = []
    for r in results:
        if isinstance(r, Success):
            successes.append(r)
        elif isinstance(r, Failure):
            failures.append(r)
        else:
            raise TypeError(f"Expected Success or Failure, got {type(r).__name__}")
    return successes, failures
