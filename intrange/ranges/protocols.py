"""Protocols satisfied by the range constructs.

RangeCursor is the minimum a loop construct needs: a length known up
front and an advance-and-return step. IndexableRange adds random access
and reversal, which every range type except StridedIterator provides.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from intrange.ranges.iterator import StridedIterator


@runtime_checkable
class RangeCursor(Protocol):
    """Anything that can be iterated by repeated next() calls."""

    def next(self) -> int:
        """Return the current value and advance."""
        ...

    def length(self) -> int:
        """Remaining length; 0 once exhausted."""
        ...

    def has_next(self) -> bool:
        ...


@runtime_checkable
class IndexableRange(RangeCursor, Protocol):
    """A range that also supports O(1) indexing and reversal."""

    def indexed_get(self, idx: int) -> int:
        ...

    def checked_get(self, idx: int) -> int:
        ...

    def reversed(self) -> StridedIterator:
        ...
