"""The `[0, end)` range produced by the one-argument constructor."""

from __future__ import annotations

from dataclasses import dataclass, field

from intrange.ranges.iterator import StridedIterator


@dataclass(slots=True)
class ZeroStartRange:
    """Range over 0, 1, ..., end - 1.

    Counts down internally: ``curr`` is the number of elements left, so
    length() needs no arithmetic and a negative ``end`` is clamped once at
    construction.
    """

    end: int
    curr: int = field(init=False)

    def __post_init__(self) -> None:
        self.curr = max(0, self.end)

    def next(self) -> int:
        """Return the next ascending value and consume it."""
        curr = self.curr
        self.curr -= 1
        return self.end - curr

    def length(self) -> int:
        return self.curr

    def has_next(self) -> bool:
        return self.curr > 0

    def indexed_get(self, idx: int) -> int:
        """Element at idx. Unchecked; idx must lie in [0, length())."""
        return idx

    def checked_get(self, idx: int) -> int:
        """Element at idx, raising IndexError outside [0, length())."""
        if not 0 <= idx < self.length():
            raise IndexError(f"range index {idx} out of range for length {self.length()}")
        return self.indexed_get(idx)

    def reversed(self) -> StridedIterator:
        """Cursor over end - 1, end - 2, ..., 0."""
        return StridedIterator(self.end - 1, -1, -1)

    def copy(self) -> ZeroStartRange:
        clone = ZeroStartRange(self.end)
        clone.curr = self.curr
        return clone

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> StridedIterator:
        return StridedIterator(self.end - self.curr, self.end, 1)

    def __reversed__(self) -> StridedIterator:
        return self.reversed()

    def __getitem__(self, idx: int) -> int:
        if idx < 0:
            idx += self.length()
        return self.checked_get(idx)
