"""The general `[start, end)` range with an arbitrary non-zero step."""

from __future__ import annotations

from dataclasses import dataclass

from intrange.arith import ceil_div, sign_of
from intrange.ranges.iterator import StridedIterator


@dataclass(slots=True, init=False)
class StridedRange:
    """Range over start, start + step, ... stopping before end.

    Constructed like the builtin: ``StridedRange(end)``,
    ``StridedRange(start, end)`` or ``StridedRange(start, end, step)``.

    ``step`` must be non-zero. The check happens where length() divides,
    which raises ZeroStepError ("divide by zero").

    length() does not look at whether ``step`` points from ``start`` toward
    ``end``: ``StridedRange(10, 0, 1).length()`` is 10 even though iterating
    it yields nothing. element_count() is the direction-aware count, and it
    is what len() and the bounds of checked_get() use.
    """

    start: int
    end: int
    step: int

    def __init__(self, start: int, end: int | None = None, step: int = 1) -> None:
        if end is None:
            start, end = 0, start
        self.start = start
        self.end = end
        self.step = step

    def next(self) -> int:
        result = self.start
        self.start += self.step
        return result

    def length(self) -> int:
        return ceil_div(abs(self.start - self.end), abs(self.step))

    def element_count(self) -> int:
        """Elements left to visit; 0 when step points away from end."""
        count = self.length()
        if self.step > 0 and self.start < self.end:
            return count
        if self.step < 0 and self.start > self.end:
            return count
        return 0

    def has_next(self) -> bool:
        return self.element_count() > 0

    def indexed_get(self, idx: int) -> int:
        """Element at idx. Unchecked; idx must lie in [0, length())."""
        return self.start + idx * self.step

    def checked_get(self, idx: int) -> int:
        """Element at idx, raising IndexError outside [0, element_count())."""
        count = self.element_count()
        if not 0 <= idx < count:
            raise IndexError(f"range index {idx} out of range for length {count}")
        return self.indexed_get(idx)

    def reversed(self) -> StridedIterator:
        """Cursor over the same elements, last first, stepping by -step.

        The new start is the last element actually visited, which is not
        ``end - step`` when (end - start) is not a multiple of step.
        """
        shifted_end = self.end - sign_of(self.step)
        start = shifted_end - ((shifted_end - self.start) % self.step)
        end = self.start - self.step
        return StridedIterator(start, end, -self.step)

    def copy(self) -> StridedRange:
        return StridedRange(self.start, self.end, self.step)

    def __len__(self) -> int:
        return self.element_count()

    def __iter__(self) -> StridedIterator:
        return StridedIterator(self.start, self.end, self.step)

    def __reversed__(self) -> StridedIterator:
        return self.reversed()

    def __getitem__(self, idx: int) -> int:
        if idx < 0:
            idx += self.element_count()
        return self.checked_get(idx)
