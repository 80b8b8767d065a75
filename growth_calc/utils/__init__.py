"""Utility modules for configuration and logging."""

from .config import Config, ConfigError, ConfigFileNotFound
from .logging import setup_logging

__all__ = ["Config", "ConfigError", "ConfigFileNotFound", "setup_logging"]
