"""Growth sequence computation, formatting and paced execution."""

from .formatting import format_operand, format_step, format_value
from .runner import SequenceRunner
from .sequences import (
    SequenceKind,
    Step,
    exponential_steps,
    exponential_value,
    linear_steps,
    linear_value,
)

__all__ = [
    "SequenceKind",
    "SequenceRunner",
    "Step",
    "exponential_steps",
    "exponential_value",
    "format_operand",
    "format_step",
    "format_value",
    "linear_steps",
    "linear_value",
]
