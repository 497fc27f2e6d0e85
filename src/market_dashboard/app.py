"""aiohttp application factory."""

from aiohttp import web

from .api.common import CONFIG_KEY
from .api.stocks import stocks_handler
from .api.transcripts import transcripts_handler
from .config import DashboardConfig


def create_app(config: DashboardConfig | None = None) -> web.Application:
    """Build the application with both endpoints mounted under /api.

    Routes accept any method so the handlers answer OPTIONS preflight and
    405 themselves, with CORS headers on every response.
    """
    app = web.Application()
    app[CONFIG_KEY] = config if config is not None else DashboardConfig.from_env()
    app.router.add_route("*", "/api/stocks", stocks_handler)
    app.router.add_route("*", "/api/transcripts", transcripts_handler)
    return app
