"""Async HTTP client for the API Ninjas endpoints."""

import asyncio
import logging

import aiohttp

from ..config import DashboardConfig

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """An upstream call that produced no usable JSON body."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class UpstreamClient:
    """One aiohttp session per handler invocation, keyed with the API key header."""

    def __init__(self, config: DashboardConfig):
        self._config = config
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self):
        self._session = aiohttp.ClientSession(
            headers={
                "X-Api-Key": self._config.api_key,
                "Content-Type": "application/json",
            },
        )
        return self

    async def __aexit__(self, *exc):
        if self._session:
            await self._session.close()

    async def get_json(self, endpoint: str, ticker: str):
        """GET ``{base_url}/{endpoint}?ticker=...`` and return the decoded body.

        Raises UpstreamError on transport errors, non-2xx statuses and
        bodies that are not JSON.
        """
        url = f"{self._config.base_url.rstrip('/')}/{endpoint}"
        try:
            async with self._session.get(url, params={"ticker": ticker}) as resp:
                if not 200 <= resp.status < 300:
                    raise UpstreamError(
                        f"API request failed for {ticker}: {resp.status} {resp.reason or ''}".rstrip(),
                        status=resp.status,
                    )
                try:
                    return await resp.json(content_type=None)
                except ValueError:
                    raise UpstreamError(f"Invalid data received for {ticker}", status=resp.status)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamError(f"Request error for {ticker}: {str(e) or type(e).__name__}") from e
