"""
Growth Pattern Calculator - command-line entry point.

Usage:
    growth-calc <base> <exponent> [logfile]
    growth-calc --config <config_file>
    growth-calc                         (reads config.txt)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from .growth import SequenceRunner
from .session import SessionLog
from .utils import Config, ConfigError, ConfigFileNotFound, setup_logging
from .utils.config import DEFAULT_CONFIG_FILE


logger = logging.getLogger("growth_calc")

PROGRAM_NAME = "growth-calc"
LOG_LEVEL_VAR = "GROWTH_CALC_LOG_LEVEL"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

HELP_TEXT = f"""\
Growth Pattern Calculator

Usage:
  1. With command-line arguments:
     {PROGRAM_NAME} <base> <exponent> [logfile]
     Example: {PROGRAM_NAME} 2 5

  2. With config file:
     {PROGRAM_NAME} --config <config_file>
     Example: {PROGRAM_NAME} --config config.txt

  3. Default config file:
     {PROGRAM_NAME}
     (Uses {DEFAULT_CONFIG_FILE} in current directory)

Options:
  --help, -h     Show this help message
  --config FILE  Specify config file path

Config file keys (key=value, # starts a comment):
  base, exponent (or expo), logfile, enable_logging (true/1)

Output:
  - Results are displayed on terminal with 1-second delay between steps
  - Logs are written to file specified in config (if enabled)
  - Linear Growth: B × 1, B × 2, B × 3, ..., B × E
  - Exponential Growth: B^1, B^2, B^3, ..., B^E
"""


class UsageError(Exception):
    """Raised when the command line cannot be interpreted."""


@dataclass
class Invocation:
    """
    What the command line asked for.

    Exactly one of ``show_help``, ``config_path`` or ``config`` is set.
    """

    show_help: bool = False
    config_path: Optional[str] = None
    config: Optional[Config] = None


def print_help() -> None:
    """Print static usage text to stdout."""
    print(HELP_TEXT)


def parse_args(args: Sequence[str]) -> Invocation:
    """
    Interpret command-line arguments.

    Args:
        args: Arguments without the program name

    Returns:
        Invocation describing the requested action

    Raises:
        UsageError: If the arguments match no supported form
    """
    if not args:
        return Invocation(config_path=DEFAULT_CONFIG_FILE)

    first = args[0]
    if first in ("--help", "-h"):
        return Invocation(show_help=True)

    if first == "--config":
        if len(args) < 2:
            raise UsageError("--config requires a file path")
        if len(args) > 2:
            logger.debug(f"Ignoring extra arguments: {args[2:]}")
        return Invocation(config_path=args[1])

    if len(args) >= 2:
        if len(args) > 3:
            logger.debug(f"Ignoring extra arguments: {args[3:]}")
        try:
            config = Config.from_args(*args[:3])
        except ConfigError:
            raise UsageError(
                "Invalid arguments. Expected: <base> <exponent> [logfile]"
            ) from None
        return Invocation(config=config)

    raise UsageError("Invalid arguments")


def read_config_file(path: str) -> Config:
    """
    Load configuration from ``path``, falling back to defaults if unreadable.

    Raises:
        ConfigError: If the file exists but holds a malformed number
    """
    print(f"Reading configuration from: {path}")
    try:
        config = Config.from_file(path)
    except ConfigFileNotFound as e:
        defaults = Config()
        logger.warning(str(e))
        logger.warning("Failed to read config file. Using default values.")
        logger.warning(f"Default: base={defaults.base:g}, exponent={defaults.exponent}")
        print(f"\nTo create a config file, run: {PROGRAM_NAME} --help")
        return defaults

    config.log_config(logger)
    return config


def run(config: Config) -> int:
    """
    Validate ``config`` and run a full calculation session.

    Returns:
        Process exit status
    """
    try:
        warnings = config.validate()
    except ConfigError as e:
        logger.error(f"Error: {e}")
        return EXIT_FAILURE

    for warning in warnings:
        logger.warning(warning)

    log_file = config.log_file if config.enable_logging else None

    with SessionLog(log_file) as session_log:
        file_logging = session_log.file_enabled
        if file_logging:
            print(f"Logging to: {config.log_file}\n")

        try:
            SequenceRunner(config, session_log).run()
        except KeyboardInterrupt:
            logger.warning("Calculation interrupted")
            return EXIT_INTERRUPTED

    print("Calculation completed!")
    if file_logging:
        print(f"Logs saved to: {config.log_file}")
    return EXIT_OK


def configure_logging() -> logging.Logger:
    """Load ``.env`` and set up diagnostics at the level it requests."""
    load_dotenv(".env")
    level = os.getenv(LOG_LEVEL_VAR, "INFO")
    try:
        return setup_logging(level=level, name="growth_calc")
    except ValueError:
        configured = setup_logging(level="INFO", name="growth_calc")
        configured.warning(f"Ignoring invalid {LOG_LEVEL_VAR}: {level}")
        return configured


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the calculator.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status (0 on success or help, non-zero on error)
    """
    configure_logging()
    args = sys.argv[1:] if argv is None else argv

    try:
        invocation = parse_args(args)
    except UsageError as e:
        logger.error(f"Error: {e}")
        print_help()
        return EXIT_FAILURE

    if invocation.show_help:
        print_help()
        return EXIT_OK

    if invocation.config is not None:
        config = invocation.config
        print("Using command-line parameters:")
        config.log_config(logger)
    else:
        try:
            config = read_config_file(invocation.config_path)
        except ConfigError as e:
            logger.error(f"Error: {e}")
            return EXIT_FAILURE

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
