"""
Centralized logging configuration for the crossing tools.

Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: Set to "DEBUG", "TRACE", or "INFO" (default)
               - INFO: Normal operation logs
               - DEBUG: Every phase and trip of the strategy
               - TRACE: Very verbose low-level diagnostics

Usage:
    from crossing.logging_config import configure_logging, get_logger

    configure_logging(source="crossing")
    logger = get_logger(__name__)
    logger.info("Crossing started")
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime

# Custom TRACE level for very verbose diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


# Add trace method to Logger class
logging.Logger.trace = _trace  # type: ignore[attr-defined]


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 timestamps in UTC.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "crossing"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            exception_text = self.formatException(record.exc_info)
            message = f"{message}\n{exception_text}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


def level_from_name(name: str | None) -> int:
    """Map a level name such as "DEBUG" or "TRACE" to its number, INFO if unknown."""
    name = (name or "").upper()
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    source: str = "crossing",
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure logging for a crossing tool.

    Args:
        source: Source identifier for log messages
        level: Logging level (defaults to INFO, or DEBUG/TRACE from LOG_LEVEL env var)
        debug: Enable debug mode (overrides level to DEBUG)

    Returns:
        Configured root logger
    """
    if debug:
        level = logging.DEBUG
    elif level is None:
        level = level_from_name(os.getenv("LOG_LEVEL"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Logs go to stderr so the rendered crossing on stdout stays clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
