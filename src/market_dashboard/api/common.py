"""Response helpers shared by the stocks and transcripts handlers."""

import logging

from aiohttp import web

from ..config import DashboardConfig

logger = logging.getLogger(__name__)

CONFIG_KEY = web.AppKey("config", DashboardConfig)

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def json_response(body: dict, status: int = 200) -> web.Response:
    return web.json_response(body, status=status, headers=CORS_HEADERS)


def preflight_response() -> web.Response:
    return web.Response(status=200, headers=CORS_HEADERS)


def method_not_allowed() -> web.Response:
    return json_response(
        {"error": "Method not allowed", "message": "Only GET requests are supported"},
        status=405,
    )


def check_method(request: web.Request) -> web.Response | None:
    """Return the early response for non-GET methods, or None to proceed."""
    if request.method == "OPTIONS":
        return preflight_response()
    if request.method != "GET":
        return method_not_allowed()
    return None


def check_config(config: DashboardConfig) -> web.Response | None:
    """Return a 500 response when the upstream API key is missing."""
    if config.configured:
        return None
    logger.error("API_KEY environment variable is not configured")
    return json_response(
        {
            "error": "Server configuration error",
            "message": "API key not configured. Please set API_KEY environment variable.",
        },
        status=500,
    )


def internal_error(message: str) -> web.Response:
    return json_response({"error": "Internal server error", "message": message}, status=500)
