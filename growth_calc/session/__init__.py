"""Session output to the console and the optional log file."""

from .log import SEPARATOR, SessionLog

__all__ = ["SEPARATOR", "SessionLog"]
