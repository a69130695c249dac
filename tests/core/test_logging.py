"""Tests for oranpy.core.logging module."""

import json

import pytest
import structlog

from oranpy.core.errors import WrappedError
from oranpy.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from oranpy.core.tries import run_or_fail, run_or_recover


class TestConfigureLogging:
    """Test configure_logging output."""

    def test_json_output_goes_to_stderr(self, capsys):
        configure_logging(level="INFO", json_format=True, service="test-svc")
        get_logger("tests").info("event_happened", count=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "event_happened"
        assert record["logger"] == "tests"
        assert record["count"] == 42
        assert record["service.name"] == "test-svc"
        assert record["log.level"] == "info"
        assert "@timestamp" in record

    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("tests").debug("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_without_timestamp(self, capsys):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger("tests").info("plain")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert "@timestamp" not in record

    def test_recovery_logged_at_debug(self, capsys):
        configure_logging(level="DEBUG", json_format=True)
        assert run_or_recover(lambda: 1 // 0, lambda ex: -1) == -1

        lines = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        events = [line for line in lines if line["event"] == "primary_failed"]
        assert events
        assert events[0]["error_type"] == "ZeroDivisionError"

    def test_reconfiguring_does_not_duplicate_lines(self, capsys):
        configure_logging(level="INFO", json_format=True)
        configure_logging(level="INFO", json_format=True)
        get_logger("tests").info("once")
        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["once"]


class TestUnconfigured:
    """Library loggers before any configure_logging call."""

    def test_executor_prints_nothing(self, capsys):
        assert run_or_recover(lambda: 1 // 0, lambda ex: -1) == -1
        with pytest.raises(WrappedError):
            run_or_fail(lambda: 1 // 0)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_debug_falls_under_stdlib_default(self, capsys):
        get_logger("tests").debug("hidden")
        get_logger().info("hidden")
        assert capsys.readouterr().out == ""


class TestContext:
    """Test bound logging context."""

    def test_bind_and_unbind(self):
        bind_context(command="demo")
        assert structlog.contextvars.get_contextvars() == {"command": "demo"}
        unbind_context("command")
        assert structlog.contextvars.get_contextvars() == {}

    def test_clear_context(self):
        bind_context(a=1, b=2)
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_log_context_is_scoped(self):
        with LogContext(command="demo.tries") as ctx:
            assert isinstance(ctx, LogContext)
            assert structlog.contextvars.get_contextvars()["command"] == "demo.tries"
        assert "command" not in structlog.contextvars.get_contextvars()
