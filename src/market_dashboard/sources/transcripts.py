"""Earnings call transcript source (API Ninjas ``/earningstranscript``)."""

import logging
from dataclasses import dataclass, field

from ..companies import company_name
from ..fetch.client import UpstreamClient
from ..result import Failure, Result, Success

logger = logging.getLogger(__name__)

_ENDPOINT = "earningstranscript"


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class EarningsTranscript:
    """Latest earnings call transcript for one ticker."""
    ticker: str
    company_name: str
    transcript: str
    date: str | None = None
    timestamp: int | str | None = None
    year: int | str | None = None
    quarter: int | str | None = None
    earnings_timing: str | None = None
    participants: list = field(default_factory=list)
    transcript_split: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "ticker": self.ticker,
            "companyName": self.company_name,
            "date": self.date,
            "timestamp": self.timestamp,
            "year": self.year,
            "quarter": self.quarter,
            "earningsTiming": self.earnings_timing,
            "transcript": self.transcript,
            "participants": self.participants,
            "transcriptSplit": self.transcript_split,
        }


async def fetch_earnings_transcript(client: UpstreamClient, ticker: str) -> Result[EarningsTranscript]:
    """Fetch the latest transcript for one ticker. Never raises."""
    name = company_name(ticker)
    try:
        data = await client.get_json(_ENDPOINT, ticker)
        if not isinstance(data, dict) or not data.get("transcript"):
            raise ValueError(f"No transcript data available for {ticker}")
        return Success(EarningsTranscript(
            ticker=ticker,
            company_name=name,
            transcript=data["transcript"],
            date=data.get("date"),
            timestamp=data.get("timestamp"),
            year=data.get("year"),
            quarter=data.get("quarter"),
            earnings_timing=data.get("earnings_timing"),
            participants=_as_list(data.get("participants")),
            transcript_split=_as_list(data.get("transcript_split")),
        ))
    except Exception as e:
        logger.warning(f"Error fetching transcript for {ticker}: {e}")
        return Failure(ticker=ticker, company_name=name, error=str(e))
