"""Tests for the ceil_div and sign_of helpers."""

import pytest

from intrange.arith import ceil_div, sign_of
from intrange.types import ZeroStepError


class TestCeilDiv:
    """Tests for ceil_div."""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (0, 1, 0),
            (0, 5, 0),
            (10, 3, 4),
            (9, 3, 3),
            (1, 7, 1),
            (7, 1, 7),
            (11, 2, 6),
        ],
    )
    def test_rounds_up(self, numerator, denominator, expected):
        """Quotients round toward positive infinity."""
        assert ceil_div(numerator, denominator) == expected

    def test_zero_denominator(self):
        """A zero denominator fails with 'divide by zero'."""
        with pytest.raises(ZeroStepError, match="divide by zero"):
            ceil_div(10, 0)


class TestSignOf:
    """Tests for sign_of."""

    def test_signs(self):
        assert sign_of(42) == 1
        assert sign_of(-3) == -1
        assert sign_of(0) == 0
