"""CLI entry point."""

import argparse
import asyncio
import json
import logging
import sys

from .config import DashboardConfig

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s",
    datefmt="%H:%M:%S",
)

# Suppress noisy loggers
for noisy in ["asyncio", "aiohttp.access"]:
    logging.getLogger(noisy).setLevel(logging.ERROR)

logger = logging.getLogger(__name__)


def build_config(args) -> DashboardConfig:
    """Build DashboardConfig from the environment plus CLI overrides."""
    return DashboardConfig.from_env(
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        base_url=getattr(args, "base_url", None),
    )


def _print_envelope(status: int, body: dict) -> int:
    print(json.dumps(body, indent=2))
    return 0 if status < 400 else 1


def _run_serve(args) -> int:
    from aiohttp import web

    from .app import create_app

    config = build_config(args)
    if args.access_log:
        logging.getLogger("aiohttp.access").setLevel(logging.INFO)
    if not config.configured:
        logger.warning("API_KEY is not set; endpoints will answer 500 until it is configured")

    web.run_app(create_app(config), host=config.host, port=config.port, print=None)
    return 0


def _run_stocks(args) -> int:
    from .api.stocks import build_stocks_envelope

    config = build_config(args)
    if not config.configured:
        logger.error("API_KEY environment variable is not configured")
        return 1
    status, body = asyncio.run(build_stocks_envelope(config))
    return _print_envelope(status, body)


def _run_transcript(args) -> int:
    from .api.transcripts import build_transcript_envelope

    config = build_config(args)
    if not config.configured:
        logger.error("API_KEY environment variable is not configured")
        return 1
    status, body = asyncio.run(build_transcript_envelope(config, args.ticker))
    return _print_envelope(status, body)


def _add_upstream_args(p: argparse.ArgumentParser):
    p.add_argument("--base-url", default=None,
                   help="Upstream API base URL (default: UPSTREAM_BASE_URL or API Ninjas)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Competitor stock prices and earnings call transcripts",
    )
    subparsers = p.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default: PORT or 8000)")
    serve_parser.add_argument("--access-log", action="store_true", help="Log every request")
    _add_upstream_args(serve_parser)

    stocks_parser = subparsers.add_parser("stocks", help="Fetch all tracked prices once and print JSON")
    _add_upstream_args(stocks_parser)

    transcript_parser = subparsers.add_parser("transcript", help="Fetch one transcript and print JSON")
    transcript_parser.add_argument("ticker", nargs="?", default=None,
                                   help="Ticker symbol; omit to list supported tickers")
    _add_upstream_args(transcript_parser)

    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(sys.argv[1:] if argv is None else argv)

    if not args.command:
        p.print_help()
        sys.exit(1)

    if args.command == "serve":
        code = _run_serve(args)
    elif args.command == "stocks":
        code = _run_stocks(args)
    else:
        code = _run_transcript(args)
    sys.exit(code)


if __name__ == "__main__":
    main()
