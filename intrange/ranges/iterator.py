"""Raw strided cursor.

StridedIterator is what every range hands out from reversed(), and what
StridedRange hands out for bare iteration. It carries no random access.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StridedIterator:
    """Forward cursor over start, start + step, ... stopping before end.

    next() does no bounds check; callers consult has_next()/length() first.
    length() is a distance to end, not an element count, once |step| > 1,
    which is why the cursor defines no __len__.
    """

    start: int
    end: int
    step: int

    def next(self) -> int:
        """Return the current value and advance by step."""
        result = self.start
        self.start += self.step
        return result

    def length(self) -> int:
        if self.step > 0 and self.start < self.end:
            return self.end - self.start
        if self.step < 0 and self.start > self.end:
            return self.start - self.end
        return 0

    def has_next(self) -> bool:
        return self.length() > 0

    def copy(self) -> StridedIterator:
        return StridedIterator(self.start, self.end, self.step)

    def __iter__(self) -> StridedIterator:
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()
