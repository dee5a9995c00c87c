"""Range construction by argument count.

Three entry points share one dispatch:

- range_(...): arguments already are integers (anything with __index__).
- checked_range(...): arguments go through to_int() and a failed
  conversion raises ConversionError before any range is built.
- try_range(...): same as checked_range but reports the failure in a
  RangeResult instead of raising.

One argument gives a ZeroStartRange, two a SequentialRange and three a
StridedRange, mirroring the builtin range signatures.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from intrange.ranges import SequentialRange, StridedRange, ZeroStartRange
from intrange.types.errors import ConversionError, ErrorContext
from intrange.utils.logger import logger

AnyRange = Union[ZeroStartRange, SequentialRange, StridedRange]

_ARG_NAMES: dict[int, tuple[str, ...]] = {
    1: ("end",),
    2: ("start", "end"),
    3: ("start", "end", "step"),
}


@dataclass
class RangeResult:
    """Outcome of try_range()."""

    success: bool
    range: Optional[AnyRange] = None
    error: Optional[ConversionError] = None

    def unwrap(self) -> AnyRange:
        """Return the range, re-raising the conversion error on failure."""
        if self.error is not None:
            raise self.error
        if self.range is None:
            raise ValueError("RangeResult holds neither a range nor an error")
        return self.range

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "range": repr(self.range) if self.range is not None else None,
            "error": self.error.to_dict() if self.error else None,
        }


def to_int(value: Any, name: str = "value") -> int:
    """
    Convert a range argument to a plain integer.

    Values with __index__ are taken exactly; anything else goes through
    int(), so numeric strings and objects defining __int__ are accepted.

    Args:
        value: Argument to convert
        name: Argument name used in the error context

    Returns:
        The integer value

    Raises:
        ConversionError: If the value cannot be converted. A ConversionError
            raised by the value's own conversion hook propagates unchanged.
    """
    if hasattr(type(value), "__index__"):
        return operator.index(value)
    try:
        return int(value)
    except ConversionError:
        raise
    except (TypeError, ValueError, OverflowError) as e:
        raise ConversionError(
            f"cannot convert {name}={value!r} to int: {e}",
            context=ErrorContext(operation="range", argument=name),
            original_error=e,
        ) from e


def _build(values: tuple[int, ...]) -> AnyRange:
    if len(values) == 1:
        return ZeroStartRange(values[0])
    if len(values) == 2:
        return SequentialRange(values[0], values[1])
    return StridedRange(values[0], values[1], values[2])


def _check_arity(args: tuple[Any, ...]) -> tuple[str, ...]:
    names = _ARG_NAMES.get(len(args))
    if names is None:
        raise TypeError(f"range expected 1 to 3 arguments, got {len(args)}")
    return names


def _convert_all(args: tuple[Any, ...], convert: Callable[[Any, str], int]) -> tuple[int, ...]:
    names = _check_arity(args)
    return tuple(convert(value, name) for value, name in zip(args, names))


def range_(*args: Any) -> AnyRange:
    """
    Build a range from 1-3 integer arguments.

    Raises:
        TypeError: On a wrong argument count or a non-integer argument
    """
    return _build(_convert_all(args, lambda value, _name: operator.index(value)))


def checked_range(*args: Any) -> AnyRange:
    """
    Build a range from 1-3 arguments convertible to integers.

    Every argument is converted before a range is constructed.

    Raises:
        TypeError: On a wrong argument count
        ConversionError: If an argument cannot be converted
    """
    try:
        values = _convert_all(args, to_int)
    except ConversionError as e:
        logger.debug("Range argument conversion failed: {}", e)
        raise
    return _build(values)


def try_range(*args: Any) -> RangeResult:
    """Like checked_range(), but returns the conversion failure in a RangeResult."""
    try:
        return RangeResult(success=True, range=checked_range(*args))
    except ConversionError as e:
        return RangeResult(success=False, error=e)
