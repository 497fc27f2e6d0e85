"""Tracked competitor tickers."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class TickerRecord:
    ticker: str
    company_name: str


COMPANIES = MappingProxyType({
    "AAPL": "Apple Inc.",
    "MSFT": "Microsoft Corporation",
    "GOOGL": "Alphabet Inc. (Google)",
    "META": "Meta Platforms Inc.",
    "AMZN": "Amazon.com Inc.",
})

TRACKED = tuple(TickerRecord(ticker, name) for ticker, name in COMPANIES.items())


def available_tickers() -> list[str]:
    return list(COMPANIES)


def company_name(ticker: str) -> str:
    return COMPANIES.get(ticker, "")


def resolve_ticker(raw: str) -> TickerRecord | None:
    """Case-insensitive lookup of a caller-supplied symbol; None if unsupported."""
    symbol = raw.upper()
    if symbol not in COMPANIES:
        return None
    return TickerRecord(symbol, COMPANIES[symbol])
