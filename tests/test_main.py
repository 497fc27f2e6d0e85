"""Tests for the CLI entry point."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from market_dashboard.main import build_config, build_parser, main


class TestParser:
    def test_serve_args(self):
        args = build_parser().parse_args(["serve", "--host", "127.0.0.1", "--port", "9000"])
        assert args.command == "serve"
        assert args.host == "127.0.0.1"
        assert args.port == 9000
        assert args.access_log is False

    def test_transcript_ticker_optional(self):
        args = build_parser().parse_args(["transcript"])
        assert args.ticker is None

    def test_stocks_base_url(self):
        args = build_parser().parse_args(["stocks", "--base-url", "http://localhost:9000/v1"])
        assert args.base_url == "http://localhost:9000/v1"


class TestBuildConfig:
    def test_cli_overrides_env(self):
        args = build_parser().parse_args(["serve", "--port", "9100"])
        with patch.dict("os.environ", {"API_KEY": "k", "PORT": "8100"}, clear=True):
            cfg = build_config(args)
        assert cfg.port == 9100
        assert cfg.api_key == "k"

    def test_env_used_when_flag_absent(self):
        args = build_parser().parse_args(["stocks"])
        with patch.dict("os.environ", {"API_KEY": "k", "PORT": "8100"}, clear=True):
            cfg = build_config(args)
        assert cfg.port == 8100


class TestMain:
    def test_no_command_exits_1(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1

    def test_stocks_without_key_exits_1(self):
        with patch.dict("os.environ", {}, clear=True):
            with patch("market_dashboard.api.stocks.build_stocks_envelope") as build:
                with pytest.raises(SystemExit) as exc_info:
                    main(["stocks"])
        assert exc_info.value.code == 1
        build.assert_not_called()

    def test_stocks_prints_envelope(self, capsys):
        envelope = {"stocks": [], "metadata": {"total": 5, "successful": 1, "failed": 4}}
        with patch.dict("os.environ", {"API_KEY": "k"}, clear=True):
            with patch("market_dashboard.api.stocks.build_stocks_envelope",
                       AsyncMock(return_value=(200, envelope))):
                with pytest.raises(SystemExit) as exc_info:
                    main(["stocks"])
        assert exc_info.value.code == 0
        assert json.loads(capsys.readouterr().out) == envelope

    def test_transcript_failure_exits_1(self, capsys):
        with patch.dict("os.environ", {"API_KEY": "k"}, clear=True):
            with patch("market_dashboard.api.transcripts.build_transcript_envelope",
                       AsyncMock(return_value=(400, {"error": "Invalid ticker"}))) as build:
                with pytest.raises(SystemExit) as exc_info:
                    main(["transcript", "xyz"])
        assert exc_info.value.code == 1
        assert build.await_args[0][1] == "xyz"
        assert json.loads(capsys.readouterr().out)["error"] == "Invalid ticker"

    def test_serve_runs_app(self):
        with patch.dict("os.environ", {"API_KEY": "k"}, clear=True):
            with patch("aiohttp.web.run_app") as run_app:
                with pytest.raises(SystemExit) as exc_info:
                    main(["serve", "--port", "9200"])
        assert exc_info.value.code == 0
        _, kwargs = run_app.call_args
        assert kwargs["port"] == 9200
        assert kwargs["host"] == "0.0.0.0"
