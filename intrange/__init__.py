"""
intrange - Value-typed integer ranges.

Models [start, end) integer sequences with an optional stride:
- range_(end), range_(start, end), range_(start, end, step)
- forward iteration with the length known up front
- reversal into a raw strided cursor
- O(1) indexing

Ranges are small mutable values: iterating one hands out a separate
cursor, and calling the next() method consumes the range in place.
"""

__version__ = "0.1.0"

from .construct import AnyRange, RangeResult, checked_range, range_, to_int, try_range
from .ranges import (
    IndexableRange,
    RangeCursor,
    SequentialRange,
    StridedIterator,
    StridedRange,
    ZeroStartRange,
)
from .types import ConversionError, IntRangeError, PreconditionError, ZeroStepError

__all__ = [
    "__version__",
    "AnyRange",
    "RangeResult",
    "checked_range",
    "range_",
    "to_int",
    "try_range",
    "IndexableRange",
    "RangeCursor",
    "SequentialRange",
    "StridedIterator",
    "StridedRange",
    "ZeroStartRange",
    "ConversionError",
    "IntRangeError",
    "PreconditionError",
    "ZeroStepError",
]
