"""Integer arithmetic shared by the range constructs."""

from __future__ import annotations

from intrange.types.errors import ZeroStepError


def ceil_div(numerator: int, denominator: int) -> int:
    """Divide rounding the quotient toward positive infinity.

    Exact for a non-negative numerator and a positive denominator, which is
    how range lengths call it.

    Raises:
        ZeroStepError: If denominator is zero ("divide by zero")
    """
    if denominator == 0:
        raise ZeroStepError()
    return (numerator + denominator - 1) // denominator


def sign_of(value: int) -> int:
    """Return -1, 0 or 1 according to the sign of value."""
    return (value > 0) - (value < 0)
