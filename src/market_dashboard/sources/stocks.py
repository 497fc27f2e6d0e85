"""Stock price source (API Ninjas ``/stockprice``)."""

import asyncio
import logging
import math
from dataclasses import dataclass

from ..companies import company_name
from ..fetch.client import UpstreamClient
from ..result import Failure, Result, Success

logger = logging.getLogger(__name__)

_ENDPOINT = "stockprice"


@dataclass(frozen=True)
class PriceQuote:
    ticker: str
    company_name: str
    price: float

    def to_dict(self) -> dict:
        return {
            "ticker": self.ticker,
            "companyName": self.company_name,
            "price": self.price,
        }


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


async def fetch_stock_price(client: UpstreamClient, ticker: str) -> Result[PriceQuote]:
    """Fetch the latest price for one ticker. Never raises."""
    name = company_name(ticker)
    try:
        data = await client.get_json(_ENDPOINT, ticker)
        if not isinstance(data, dict) or not _is_number(data.get("price")):
            raise ValueError(f"Invalid data received for {ticker}")
        return Success(PriceQuote(ticker=ticker, company_name=name, price=data["price"]))
    except Exception as e:
        logger.warning(f"Error fetching {ticker}: {e}")
        return Failure(ticker=ticker, company_name=name, error=str(e))


async def fetch_all_prices(client: UpstreamClient, tickers) -> list[Result[PriceQuote]]:
    """Fetch every ticker concurrently and wait for all of them, in input order."""
    tasks = [asyncio.create_task(fetch_stock_price(client, t)) for t in tickers]
    return list(await asyncio.gather(*tasks))
