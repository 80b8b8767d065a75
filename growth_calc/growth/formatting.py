"""Text rendering of sequence steps and results."""

from .sequences import SequenceKind, Step


SCIENTIFIC_UPPER = 1e6
SCIENTIFIC_LOWER = 1e-6


def format_value(value: float) -> str:
    """
    Render a result with 6 decimal digits.

    Fixed-point is used unless ``|value| > 1e6`` or ``0 < |value| < 1e-6``,
    in which case scientific notation is used.

    Example:
        >>> format_value(32)
        '32.000000'
        >>> format_value(1e7)
        '1.000000e+07'
    """
    magnitude = abs(value)
    if magnitude > SCIENTIFIC_UPPER or (value != 0 and magnitude < SCIENTIFIC_LOWER):
        return f"{value:.6e}"
    return f"{value:.6f}"


def format_operand(value: float) -> str:
    """Render an operand in shortest general form: ``2``, ``2.5``, ``1e+07``."""
    return f"{value:g}"


def format_step(step: Step) -> str:
    """
    Render one step line.

    Linear step 1 shows only the base, later linear steps show the
    multiplication, and exponential steps always show the power.
    """
    base = format_operand(step.base)
    result = format_value(step.value)
    if step.kind is SequenceKind.LINEAR:
        if step.index == 1:
            return f"Step 1: {base} = {result}"
        return f"Step {step.index}: {base} × {step.index} = {result}"
    return f"Step {step.index}: {base}^{step.index} = {result}"


def format_parameters(base: float, exponent: int) -> str:
    return f"Base = {format_operand(base)}, Exponent = {exponent}"


def format_final(kind: SequenceKind, value: float) -> str:
    return f"Final {kind.label} Result: {format_value(value)}"
