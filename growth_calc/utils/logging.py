"""
Logging configuration for the growth calculator.

Diagnostics (warnings, errors, configuration echo) use a conventional
level-tagged format on stderr. Calculation output uses the session format,
a millisecond timestamp in brackets followed by the message.
"""

import logging
import sys
from typing import Optional, TextIO


DIAGNOSTIC_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
SESSION_FORMAT = "[%(asctime)s.%(msecs)03d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    name: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure diagnostic logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger name (defaults to root logger)
        stream: Output stream (defaults to sys.stderr)

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=DIAGNOSTIC_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger


def session_formatter() -> logging.Formatter:
    """Formatter for calculation output, e.g. ``[2024-01-31 12:00:00.123] Step 1: ...``."""
    return logging.Formatter(fmt=SESSION_FORMAT, datefmt=DATE_FORMAT)
