"""
Linear and exponential growth sequences.

Both sequences are indexed from 1 to the exponent inclusive:
linear yields ``base * i`` and exponential yields ``base ** i``.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class SequenceKind(Enum):
    """The two growth patterns and their display titles."""

    LINEAR = "linear"
    EXPONENTIAL = "exponential"

    @property
    def title(self) -> str:
        if self is SequenceKind.LINEAR:
            return "LINEAR GROWTH (Incremental Multiplication: B * E)"
        return "EXPONENTIAL GROWTH (Incremental Exponentiation: B^E)"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Step:
    """
    A single computed step of a sequence.

    Attributes:
        kind: Which sequence the step belongs to
        index: 1-based position in the sequence
        base: Base value the step was computed from
        value: Result at this step
    """

    kind: SequenceKind
    index: int
    base: float
    value: float


def linear_value(base: float, step: int) -> float:
    """Value of the linear sequence at ``step``; step 1 is the base itself."""
    if step == 1:
        return float(base)
    return float(base) * step


def exponential_value(base: float, step: int) -> float:
    """
    Value of the exponential sequence at ``step``.

    Results beyond the float range become a signed infinity, matching IEEE
    ``pow``, instead of raising OverflowError.
    """
    try:
        return float(base) ** step
    except OverflowError:
        negative = base < 0 and step % 2 == 1
        return -math.inf if negative else math.inf


def linear_steps(base: float, exponent: int) -> Iterator[Step]:
    """Yield the linear sequence ``base*1 .. base*exponent``."""
    for i in range(1, exponent + 1):
        yield Step(SequenceKind.LINEAR, i, base, linear_value(base, i))


def exponential_steps(base: float, exponent: int) -> Iterator[Step]:
    """Yield the exponential sequence ``base**1 .. base**exponent``."""
    for i in range(1, exponent + 1):
        yield Step(SequenceKind.EXPONENTIAL, i, base, exponential_value(base, i))


def steps_for(kind: SequenceKind, base: float, exponent: int) -> Iterator[Step]:
    """Dispatch to the step generator for ``kind``."""
    if kind is SequenceKind.LINEAR:
        return linear_steps(base, exponent)
    return exponential_steps(base, exponent)
