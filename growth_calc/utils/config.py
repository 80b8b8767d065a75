"""
Configuration management for the growth calculator.

Configuration comes from command-line arguments or a flat ``key=value`` text
file. Missing values fall back to the defaults declared on ``Config``.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import List, Optional

from dotenv import dotenv_values


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.txt"
LARGE_EXPONENT = 100

TRUE_VALUES = ("true", "1")


class ConfigError(ValueError):
    """Raised when a configuration value is malformed or out of range."""


class ConfigFileNotFound(ConfigError):
    """Raised when a configuration file cannot be opened."""


def parse_base(value: str) -> float:
    """Parse a base value, raising ConfigError on malformed input."""
    try:
        return float(value.strip())
    except ValueError:
        raise ConfigError(f"Invalid base value: {value!r}") from None


def parse_exponent(value: str) -> int:
    """Parse an integer exponent, raising ConfigError on malformed input."""
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigError(f"Invalid exponent value: {value!r}") from None


@dataclass
class Config:
    """
    Calculation configuration.

    Attributes:
        base: Base value B of both sequences
        exponent: Number of steps E (at least 1)
        log_file: Path of the file that session output is appended to
        enable_logging: Whether session output is also written to log_file
    """

    base: float = 2.0
    exponent: int = 5
    log_file: str = "logs/growth_calc.log"
    enable_logging: bool = True

    @classmethod
    def from_args(
        cls,
        base: str,
        exponent: str,
        log_file: Optional[str] = None,
    ) -> "Config":
        """
        Build configuration from positional command-line arguments.

        Args:
            base: Base value as given on the command line
            exponent: Exponent as given on the command line
            log_file: Optional log file path override

        Returns:
            Config instance with the parsed values

        Raises:
            ConfigError: If base or exponent is not a valid number
        """
        config = cls(base=parse_base(base), exponent=parse_exponent(exponent))
        if log_file is not None:
            config.log_file = log_file
        return config

    @classmethod
    def from_file(cls, path: str, defaults: Optional["Config"] = None) -> "Config":
        """
        Load configuration from a ``key=value`` text file.

        Recognized keys are ``base``, ``exponent`` (or ``expo``), ``logfile``
        and ``enable_logging``. Unknown keys are ignored, keys absent from the
        file keep their default value.

        Args:
            path: Path to the configuration file
            defaults: Starting values (default: ``Config()``)

        Returns:
            Config instance with values from the file applied

        Raises:
            ConfigFileNotFound: If the file does not exist or cannot be read
            ConfigError: If a numeric value is malformed
        """
        if not os.path.isfile(path):
            raise ConfigFileNotFound(f"Could not open config file: {path}")

        # Undecodable bytes pass through unchanged; values are taken literally.
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as stream:
                values = dotenv_values(stream=stream, interpolate=False)
        except OSError as e:
            raise ConfigFileNotFound(f"Could not open config file: {path} ({e})") from e

        config = replace(defaults) if defaults is not None else cls()

        for key, value in values.items():
            if value is None:
                logger.debug(f"Ignoring line without value: {key}")
                continue

            if key == "base":
                config.base = parse_base(value)
            elif key in ("exponent", "expo"):
                config.exponent = parse_exponent(value)
            elif key == "logfile":
                config.log_file = value.strip()
            elif key == "enable_logging":
                config.enable_logging = value.strip() in TRUE_VALUES
            else:
                logger.debug(f"Ignoring unknown config key: {key}")

        return config

    def validate(self) -> List[str]:
        """
        Check that the configuration can be run.

        Returns:
            Warnings about settings that are valid but unusual

        Raises:
            ConfigError: If the exponent is below 1
        """
        if self.exponent < 1:
            raise ConfigError("Exponent must be at least 1")

        warnings = []
        if self.exponent > LARGE_EXPONENT:
            warnings.append(
                f"Large exponent ({self.exponent}) may take a long time! "
                f"Estimated time: {self.estimated_seconds()} seconds"
            )
        return warnings

    def estimated_seconds(self) -> int:
        """Rough wall-clock duration: one paced step per sequence per exponent."""
        return self.exponent * 2

    def log_config(self, logger) -> None:
        """
        Log configuration values.

        Args:
            logger: Logger instance to use for output
        """
        logger.info("Configuration loaded:")
        logger.info(f"  Base = {self.base:g}")
        logger.info(f"  Exponent = {self.exponent}")
        logger.info(f"  Log file = {self.log_file}")
        logger.info(f"  File logging: {'ENABLED' if self.enable_logging else 'DISABLED'}")
