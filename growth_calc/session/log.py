"""
Session output for a calculation run.

Every message goes to the console and, when file logging is enabled, is
appended to the log file. Both outputs share the same timestamped format.
"""

import logging
import os
import sys
from typing import List, Optional, TextIO

from ..utils.logging import session_formatter


logger = logging.getLogger(__name__)

SEPARATOR = "=" * 40
LOGGER_NAME = "growth_calc.session.output"


class SessionLog:
    """
    Timestamped writer for calculation output.

    A failure to open the log file is not fatal: a warning is emitted and the
    session continues with console output only. All sessions share one
    logger, so only the most recently created session is active.

    Example:
        >>> with SessionLog("logs/growth_calc.log") as log:
        ...     log.banner("NEW CALCULATION SESSION STARTED")
        ...     log("Step 1: 2 = 2.000000")

    Attributes:
        log_file: Path of the log file, or None for console only
    """

    def __init__(self, log_file: Optional[str] = None, stream: Optional[TextIO] = None):
        """
        Initialize the session log.

        Args:
            log_file: File to append to (None disables file logging)
            stream: Console stream (default: sys.stdout)
        """
        self.log_file = log_file
        self._file_handler: Optional[logging.FileHandler] = None
        self._handlers: List[logging.Handler] = []

        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._logger.handlers.clear()

        formatter = session_formatter()

        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)
        self._handlers.append(console_handler)

        if log_file:
            self._open_file(log_file, formatter)

    def _open_file(self, log_file: str, formatter: logging.Formatter) -> None:
        try:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not open log file: {log_file} ({e})")
            logger.warning("Continuing without file logging...")
            return

        handler.setFormatter(formatter)
        self._logger.addHandler(handler)
        self._handlers.append(handler)
        self._file_handler = handler

    @property
    def file_enabled(self) -> bool:
        """True while output is also being appended to the log file."""
        return self._file_handler is not None

    def __call__(self, message: str = "") -> None:
        self.log(message)

    def log(self, message: str = "") -> None:
        """Write one line to the console and, if enabled, the log file."""
        self._logger.info(message)
        for handler in self._handlers:
            handler.flush()

    def banner(self, title: str) -> None:
        """Write a title framed by separator lines."""
        self.log(SEPARATOR)
        self.log(title)
        self.log(SEPARATOR)

    def close(self) -> None:
        """Detach and close this session's handlers. Safe to call more than once."""
        while self._handlers:
            handler = self._handlers.pop()
            self._logger.removeHandler(handler)
            handler.close()
        self._file_handler = None

    def __enter__(self) -> "SessionLog":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SessionLog(log_file={self.log_file!r}, file_enabled={self.file_enabled})"
