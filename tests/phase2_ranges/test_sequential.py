"""Tests for SequentialRange."""

from itertools import islice

import pytest

from intrange.ranges import IndexableRange, SequentialRange, StridedIterator


class TestSequentialRange:
    """Tests for the [start, end) unit-step range."""

    def test_creation_stores_bounds_verbatim(self):
        """Bounds are not clamped, even when inverted."""
        rng = SequentialRange(7, 3)
        assert rng.start == 7
        assert rng.end == 3

    def test_length(self):
        assert SequentialRange(2, 5).length() == 3
        assert SequentialRange(-3, 3).length() == 6

    def test_inverted_length_is_zero(self):
        """An inverted range reports 0, never a negative length."""
        rng = SequentialRange(7, 3)
        assert rng.length() == 0
        assert rng.has_next() is False

    def test_next(self):
        rng = SequentialRange(2, 5)
        assert rng.next() == 2
        assert rng.start == 3
        assert rng.length() == 2

    def test_drain(self, drain):
        assert drain(SequentialRange(2, 5)) == [2, 3, 4]

    def test_length_after_exhaustion(self):
        """length stays at 0 when next() is called past the end."""
        rng = SequentialRange(0, 1)
        rng.next()
        rng.next()
        assert rng.length() == 0

    def test_indexed_get(self):
        rng = SequentialRange(10, 20)
        assert rng.indexed_get(0) == 10
        assert rng.indexed_get(9) == 19

    def test_indexed_get_is_unchecked(self):
        """indexed_get does no bounds checking."""
        assert SequentialRange(10, 20).indexed_get(50) == 60

    def test_checked_get(self):
        rng = SequentialRange(10, 12)
        assert rng.checked_get(1) == 11
        with pytest.raises(IndexError, match="out of range"):
            rng.checked_get(2)

    def test_getitem(self):
        rng = SequentialRange(10, 20)
        assert rng[3] == 13
        assert rng[-1] == 19
        with pytest.raises(IndexError):
            rng[10]

    def test_reversed(self, drain):
        """reversed() walks end - 1 down to start."""
        cursor = SequentialRange(2, 5).reversed()
        assert cursor == StridedIterator(4, 1, -1)
        assert drain(cursor) == [4, 3, 2]

    def test_reversed_inverted_is_empty(self):
        assert list(reversed(SequentialRange(7, 3))) == []

    def test_reversed_is_exact_opposite(self):
        rng = SequentialRange(-4, 6)
        assert list(reversed(rng)) == list(rng)[::-1]

    def test_iteration_does_not_consume(self):
        rng = SequentialRange(0, 3)
        assert list(rng) == [0, 1, 2]
        assert rng.start == 0

    def test_iter_is_a_single_pass_cursor(self):
        cursor = iter(SequentialRange(3, 9))
        assert list(islice(cursor, 2)) == [3, 4]
        assert next(cursor) == 5

    @pytest.mark.parametrize("start,end", [(0, 5), (5, 0), (-3, 3), (4, 4)])
    def test_len_matches_elements(self, start, end):
        rng = SequentialRange(start, end)
        assert len(rng) == len(list(rng)) == len(list(reversed(rng)))

    def test_satisfies_protocol(self):
        assert isinstance(SequentialRange(0, 1), IndexableRange)
