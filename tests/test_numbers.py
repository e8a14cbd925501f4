"""Tests for utils/numbers.py — safe_number and round_half_away."""
import math

import pytest

from utils.numbers import round_half_away, safe_number


class TestSafeNumber:
    @pytest.mark.parametrize("value,expected", [
        (6371, 6371.0),
        (1188.3, 1188.3),
        (0, 0.0),
        (-4.5, -4.5),
        ("149598000", 149598000.0),
        (" 1000.5 ", 1000.5),
    ])
    def test_numbers(self, value, expected):
        assert safe_number(value) == expected

    @pytest.mark.parametrize("value", [
        None, "", "   ", "n/a", True, False, [], {}, float("nan"), float("inf"), "-inf",
        "1,5", "1,000.5", "1_000",
    ])
    def test_non_numbers(self, value):
        assert safe_number(value) is None

    def test_returns_float(self):
        assert isinstance(safe_number(12), float)


class TestRoundHalfAway:
    @pytest.mark.parametrize("value,places,expected", [
        (0.125, 2, 0.13),
        (-0.125, 2, -0.13),
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (1.00000015, 2, 1.0),
        (1.005, 2, 1.01),
        (27109.843333, 2, 27109.84),
        (5000, 2, 5000.0),
    ])
    def test_rounding(self, value, places, expected):
        assert round_half_away(value, places) == expected

    def test_default_two_places(self):
        assert round_half_away(2.765346) == 2.77

    def test_huge_values_pass_through(self):
        result = round_half_away(1e40)
        assert math.isclose(result, 1e40)
