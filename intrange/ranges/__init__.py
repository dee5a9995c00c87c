"""
Range and iterator value types.

- ZeroStartRange: [0, end), step 1
- SequentialRange: [start, end), step 1
- StridedRange: [start, end), any non-zero step
- StridedIterator: raw (start, end, step) cursor returned by reversed()
"""

from .iterator import StridedIterator
from .protocols import IndexableRange, RangeCursor
from .sequential import SequentialRange
from .strided import StridedRange
from .zero_start import ZeroStartRange

__all__ = [
    "StridedIterator",
    "ZeroStartRange",
    "SequentialRange",
    "StridedRange",
    "RangeCursor",
    "IndexableRange",
]
