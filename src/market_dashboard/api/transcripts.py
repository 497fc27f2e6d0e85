"""GET /api/transcripts?ticker=SYMBOL: latest earnings call transcript."""

import logging

from aiohttp import web

from ..companies import available_tickers, resolve_ticker
from ..config import DashboardConfig
from ..fetch.client import UpstreamClient
from ..result import Failure
from ..sources.transcripts import fetch_earnings_transcript
from .common import (
    CONFIG_KEY,
    check_config,
    check_method,
    internal_error,
    json_response,
)

logger = logging.getLogger(__name__)

EXAMPLE_PATH = "/api/transcripts?ticker=MSFT"


async def build_transcript_envelope(config: DashboardConfig, raw_ticker: str | None) -> tuple[int, dict]:
    """Validate the requested ticker, fetch it, and build (status, body)."""
    if not raw_ticker:
        return 200, {
            "message": "Provide a ticker parameter to fetch transcript",
            "availableTickers": available_tickers(),
            "example": EXAMPLE_PATH,
        }

    record = resolve_ticker(raw_ticker)
    if record is None:
        return 400, {
            "error": "Invalid ticker",
            "message": f"Ticker '{raw_ticker}' is not supported",
            "availableTickers": available_tickers(),
        }

    async with UpstreamClient(config) as client:
        result = await fetch_earnings_transcript(client, record.ticker)

    if isinstance(result, Failure):
        return 503, {
            "error": "Service unavailable",
            "message": f"Unable to fetch transcript for {record.ticker}",
            "details": result.error,
        }
    return 200, {"success": True, "data": result.value.to_dict()}


async def transcripts_handler(request: web.Request) -> web.Response:
    early = check_method(request)
    if early is not None:
        return early

    try:
        config = request.app[CONFIG_KEY]
        misconfigured = check_config(config)
        if misconfigured is not None:
            return misconfigured

        status, body = await build_transcript_envelope(config, request.query.get("ticker"))
        return json_response(body, status=status)
    except Exception:
        logger.exception("Unexpected error in transcripts API")
        return internal_error("An unexpected error occurred while fetching transcript data")
