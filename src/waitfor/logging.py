"""Logging utilities for waitfor.

This module provides:
- A custom TRACE level for per-attempt probe output
- Quiet/verbose flag mapping to logging levels
- Timestamped lines on stderr, leaving stdout to the handed-off command
- Structured logging with context
"""

import logging
import sys
from typing import Any, TextIO

# Timestamped line format: 2024-05-01T12:00:00+0200 message
DEFAULT_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Custom TRACE level (more detailed than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def get_level(quiet: bool = False, verbose: bool = False) -> int:
    """Convert the quiet/verbose flags to a logging level.

    Quiet wins over verbose: only errors are printed.

    Args:
        quiet: Suppress info and trace output
        verbose: Include trace output

    Returns:
        Logging level constant
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return TRACE
    return logging.INFO


def configure_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure logging for waitfor.

    Installs a single handler on the root logger writing to stderr.

    Args:
        level: Logging level for console output
        format_string: Custom format string (uses default if None)
        stream: Stream to write to (defaults to sys.stderr)

    Example:
        >>> configure_logging(level=get_level(verbose=True))
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)


class StructuredLogger:
    """Logger with structured logging capabilities.

    Wraps a standard Python logger, appends key=value pairs given with a
    message, and exposes the info/trace/error severities the wait engine
    emits.

    Attributes:
        logger: Underlying Python logger

    Example:
        >>> logger = StructuredLogger("waitfor.poll")
        >>> logger.info("Waiting", target="db:5432")
        2024-05-01T12:00:00+0200 Waiting (target=db:5432)
    """

    def __init__(self, name: str) -> None:
        self.logger = logging.getLogger(name)

    def _format_message(self, message: str, **extra: Any) -> str:
        if not extra:
            return message

        context_str = ", ".join(f"{k}={v}" for k, v in extra.items())
        return f"{message} ({context_str})"

    def trace(self, message: str, **extra: Any) -> None:
        """Log trace message with context."""
        self.logger.log(TRACE, self._format_message(message, **extra))

    def info(self, message: str, **extra: Any) -> None:
        """Log info message with context."""
        self.logger.info(self._format_message(message, **extra))

    def error(self, message: str, **extra: Any) -> None:
        """Log error message with context."""
        self.logger.error(self._format_message(message, **extra))


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
