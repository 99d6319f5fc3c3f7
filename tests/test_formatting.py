"""Tests for percentage and number formatting helpers."""

import pytest

from consultlens.utils.formatting import format_compact, format_signed, percent_of, round_half_up


class TestPercentOf:
    """Test percent_of rounding and zero handling."""

    @pytest.mark.parametrize("n", [0, 1, 57, 10_000])
    def test_zero_denominator(self, n):
        assert percent_of(n, 0) == 0

    def test_negative_denominator(self):
        assert percent_of(5, -3) == 0

    @pytest.mark.parametrize("d", [1, 3, 1260])
    def test_zero_numerator(self, d):
        assert percent_of(0, d) == 0

    @pytest.mark.parametrize("d", [1, 7, 1260])
    def test_whole(self, d):
        assert percent_of(d, d) == 100

    def test_rounds_half_up(self):
        assert percent_of(1, 8) == 13  # 12.5
        assert percent_of(1, 3) == 33
        assert percent_of(2, 3) == 67

    def test_exact_half_with_integers(self):
        assert percent_of(29, 200) == 15

    def test_float_inputs(self):
        assert percent_of(0.5, 2.0) == 25

    def test_quarter(self):
        assert percent_of(1, 4) == 25


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(-2.5) == -2


class TestFormatCompact:
    """Test compact number display."""

    def test_below_threshold_is_verbatim(self):
        assert format_compact(0) == "0"
        assert format_compact(999) == "999"

    def test_thousands(self):
        assert format_compact(1000) == "1.0k"
        assert format_compact(12345) == "12.3k"
        assert format_compact(1260) == "1.3k"


def test_format_signed():
    assert format_signed(700) == "+700"
    assert format_signed(0) == "+0"
    assert format_signed(-12) == "-12"
