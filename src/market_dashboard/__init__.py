"""Market Dashboard - competitor stock prices and earnings call transcripts."""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DashboardConfig",
    "create_app",
]

from market_dashboard.config import DashboardConfig


def __getattr__(name):
    """Lazy import for create_app so the sources can be used without aiohttp.web."""
    if name == "create_app":
        from market_dashboard.app import create_app
        return create_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
