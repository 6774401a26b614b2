"""Tests for the unified logging format.

Target format: 2026-01-06T14:05:52Z [source] LEVEL message
"""

from __future__ import annotations

import io
import logging
import re
import sys
from datetime import datetime

from crossing.logging_config import TRACE, ISO8601Formatter, configure_logging, get_logger, level_from_name


def make_record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestISO8601Formatter:
    """Test the custom ISO8601 formatter produces correct output."""

    def test_format_matches_target(self):
        """Verify output matches: 2026-01-06T14:05:52Z [source] LEVEL message"""
        output = ISO8601Formatter(source="test").format(make_record())

        pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z \[test\] INFO Test message$"
        assert re.match(pattern, output), f"Output '{output}' doesn't match expected format"

    def test_timestamp_is_utc(self):
        output = ISO8601Formatter(source="crossing").format(make_record("Test"))
        timestamp_str = output.split(" ")[0]

        assert timestamp_str.endswith("Z"), f"Timestamp '{timestamp_str}' should end with Z"
        parsed = datetime.fromisoformat(timestamp_str.replace("Z", "+00:00"))
        assert parsed is not None

    def test_different_log_levels(self):
        formatter = ISO8601Formatter(source="test")

        for level, level_name in [
            (logging.DEBUG, "DEBUG"),
            (logging.INFO, "INFO"),
            (logging.WARNING, "WARNING"),
            (logging.ERROR, "ERROR"),
            (TRACE, "TRACE"),
        ]:
            output = formatter.format(make_record("Message", level))
            assert f"] {level_name} " in output, f"Level {level_name} not found in output"

    def test_exception_text_appended(self):
        formatter = ISO8601Formatter(source="test")
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record("failed", logging.ERROR)
            record.exc_info = sys.exc_info()
        output = formatter.format(record)
        assert "failed\nTraceback" in output
        assert "ValueError: boom" in output


class TestConfigureLogging:
    def test_single_handler_installed(self):
        configure_logging(source="crossing")
        configure_logging(source="crossing")
        assert len(logging.getLogger().handlers) == 1

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert configure_logging().level == logging.DEBUG

    def test_trace_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "trace")
        assert configure_logging().level == TRACE

    def test_debug_flag_overrides_level(self):
        assert configure_logging(level=logging.WARNING, debug=True).level == logging.DEBUG

    def test_source_in_output(self):
        root = configure_logging(source="unit")
        stream = io.StringIO()
        root.handlers[0].setStream(stream)  # type: ignore[attr-defined]
        get_logger("crossing.test").info("hello")
        assert "[unit] INFO hello" in stream.getvalue()

    def test_trace_method(self):
        root = configure_logging(level=TRACE)
        stream = io.StringIO()
        root.handlers[0].setStream(stream)  # type: ignore[attr-defined]
        get_logger("crossing.test").trace("very detailed")  # type: ignore[attr-defined]
        assert "TRACE very detailed" in stream.getvalue()


class TestLevelFromName:
    def test_known_levels(self):
        assert level_from_name("warning") == logging.WARNING
        assert level_from_name("TRACE") == TRACE

    def test_unknown_falls_back_to_info(self):
        assert level_from_name("chatty") == logging.INFO
        assert level_from_name(None) == logging.INFO
