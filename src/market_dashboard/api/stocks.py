"""GET /api/stocks: latest price for every tracked competitor."""

import logging
from datetime import datetime, timezone

from aiohttp import web

from ..companies import TRACKED
from ..config import DashboardConfig
from ..fetch.client import UpstreamClient
from ..result import partition
from ..sources.stocks import fetch_all_prices
from .common import (
    CONFIG_KEY,
    check_config,
    check_method,
    internal_error,
    json_response,
)

logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def build_stocks_envelope(config: DashboardConfig) -> tuple[int, dict]:
    """Fan out over all tracked tickers and build (status, body).

    Zero successes is the only failing outcome (503); any partial result is
    a 200 with the failed tickers listed under ``warnings``.
    """
    tickers = [record.ticker for record in TRACKED]
    async with UpstreamClient(config) as client:
        results = await fetch_all_prices(client, tickers)

    successes, failures = partition(results)
    logger.info(f"Stocks: {len(successes)}/{len(tickers)} fetched")

    if not successes:
        return 503, {
            "error": "Service unavailable",
            "message": "Unable to fetch stock data from API",
            "details": [f.to_detail() for f in failures],
        }

    body = {
        "timestamp": _utc_timestamp(),
        "stocks": [s.value.to_dict() for s in successes],
        "metadata": {
            "total": len(tickers),
            "successful": len(successes),
            "failed": len(failures),
        },
    }
    if failures:
        body["warnings"] = [f.to_warning() for f in failures]
    return 200, body


async def stocks_handler(request: web.Request) -> web.Response:
    early = check_method(request)
    if early is not None:
        return early

    try:
        config = request.app[CONFIG_KEY]
        misconfigured = check_config(config)
        if misconfigured is not None:
            return misconfigured

        status, body = await build_stocks_envelope(config)
        return json_response(body, status=status)
    except Exception:
        logger.exception("Unexpected error in stocks API")
        return internal_error("An unexpected error occurred while fetching stock data")
