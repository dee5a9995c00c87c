"""The `[start, end)` unit-step range produced by the two-argument constructor."""

from __future__ import annotations

from dataclasses import dataclass

from intrange.ranges.iterator import StridedIterator


@dataclass(slots=True)
class SequentialRange:
    """Range over start, start + 1, ..., end - 1.

    Both bounds are stored as given. ``start`` moves up as the range is
    consumed, so every query below reflects what is left.
    """

    start: int
    end: int

    def next(self) -> int:
        result = self.start
        self.start += 1
        return result

    def length(self) -> int:
        # Inverted or exhausted ranges report 0, never a negative count.
        if self.start < self.end:
            return self.end - self.start
        return 0

    def has_next(self) -> bool:
        return self.start < self.end

    def indexed_get(self, idx: int) -> int:
        """Element at idx. Unchecked; idx must lie in [0, length())."""
        return self.start + idx

    def checked_get(self, idx: int) -> int:
        """Element at idx, raising IndexError outside [0, length())."""
        if not 0 <= idx < self.length():
            raise IndexError(f"range index {idx} out of range for length {self.length()}")
        return self.indexed_get(idx)

    def reversed(self) -> StridedIterator:
        return StridedIterator(self.end - 1, self.start - 1, -1)

    def copy(self) -> SequentialRange:
        return SequentialRange(self.start, self.end)

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> StridedIterator:
        return StridedIterator(self.start, self.end, 1)

    def __reversed__(self) -> StridedIterator:
        return self.reversed()

    def __getitem__(self, idx: int) -> int:
        if idx < 0:
            idx += self.length()
        return self.checked_get(idx)
