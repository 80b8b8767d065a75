"""
Paced execution of the growth sequences.

The runner sleeps before every step so the output advances at a fixed pace,
then writes the formatted step to the session log.
"""

import logging
import time
from typing import Callable, Optional, Tuple

from ..session import SessionLog
from ..utils.config import Config
from .formatting import format_final, format_parameters, format_step
from .sequences import SequenceKind, steps_for


logger = logging.getLogger(__name__)

STEP_DELAY_SECONDS = 1.0


class SequenceRunner:
    """
    Runs the linear and exponential sequences for one configuration.

    Example:
        >>> with SessionLog(config.log_file) as log:
        ...     linear, exponential = SequenceRunner(config, log).run()
    """

    def __init__(
        self,
        config: Config,
        session_log: SessionLog,
        delay: float = STEP_DELAY_SECONDS,
        sleep: Optional[Callable[[float], None]] = None,
        echo: Callable[[str], None] = print,
    ):
        """
        Args:
            config: Validated configuration (base and exponent are used)
            session_log: Destination for step output
            delay: Seconds to wait before each step
            sleep: Sleep function (default: time.sleep)
            echo: Console-only output for section titles
        """
        self.config = config
        self.log = session_log
        self.delay = delay
        self._sleep = sleep or time.sleep
        self._echo = echo

    def run_sequence(self, kind: SequenceKind) -> float:
        """
        Run one sequence and return its final value.

        Args:
            kind: Which sequence to run

        Returns:
            Value at the last step (step ``exponent``)
        """
        base, exponent = self.config.base, self.config.exponent

        self._echo(f"=== {kind.title} ===")
        self.log(f"Starting {kind.label} Growth Calculation")
        self.log(format_parameters(base, exponent))

        result = base
        for step in steps_for(kind, base, exponent):
            self._sleep(self.delay)
            result = step.value
            self.log(format_step(step))

        self.log(format_final(kind, result))
        self._echo("")
        logger.debug(f"{kind.label} sequence finished after {exponent} steps")
        return result

    def run_linear(self) -> float:
        self._echo("")
        return self.run_sequence(SequenceKind.LINEAR)

    def run_exponential(self) -> float:
        return self.run_sequence(SequenceKind.EXPONENTIAL)

    def run(self) -> Tuple[float, float]:
        """
        Run a full calculation session.

        Returns:
            Tuple of (final linear value, final exponential value)
        """
        self.log.banner("NEW CALCULATION SESSION STARTED")
        linear = self.run_linear()
        exponential = self.run_exponential()
        self.log.banner("CALCULATION SESSION COMPLETED")
        return linear, exponential
