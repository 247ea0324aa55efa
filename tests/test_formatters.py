"""
Tests des fonctions de formatage
"""

import math

import pytest

from riskcalc.utils.formatters import (
    format_to_two_decimals,
    format_to_eight_decimals,
    convert_to_decimal,
    is_raw_percentage,
    normalize_percentage
)


class TestFormatToTwoDecimals:

    @pytest.mark.parametrize("value, expected", [
        (1.234, 1.23),
        (1.235, 1.24),
        (0, 0),
        (-1.236, -1.24),
        (92.45283018867924, 92.45),
        (2.675, 2.68),
    ])
    def test_rounding(self, value, expected):
        assert format_to_two_decimals(value) == expected

    def test_very_large_amount(self):
        assert format_to_two_decimals(1e30) == 1e30
        assert format_to_two_decimals(9.007199254740993e26) == pytest.approx(9.007199254740993e26)

    def test_non_finite_returned_unchanged(self):
        assert format_to_two_decimals(float('inf')) == float('inf')
        assert math.isnan(format_to_two_decimals(float('nan')))


class TestFormatToEightDecimals:

    @pytest.mark.parametrize("value, expected", [
        (0, "0"),
        (0.00001234, "0.00001234"),
        (1.5, "1.5"),
        (2.0, "2"),
        (1.23456789123, "1.23456789"),
        (3245, "3245"),
        (0.000000001, "0"),
    ])
    def test_formatting(self, value, expected):
        assert format_to_eight_decimals(value) == expected


class TestPercentages:

    def test_convert_to_decimal(self):
        assert convert_to_decimal(25) == 0.25
        assert convert_to_decimal(1) == 0.01
        assert convert_to_decimal(0) == 0

    def test_is_raw_percentage(self):
        assert is_raw_percentage(50)
        assert not is_raw_percentage(1)
        assert not is_raw_percentage(0.5)

    def test_normalize_raw_percentage(self):
        assert normalize_percentage(50) == 0.5

    def test_normalize_keeps_decimal(self):
        assert normalize_percentage(0.5) == 0.5

    def test_one_is_read_as_decimal(self):
        # 1 reste ambigu: il est lu comme 100%
        assert normalize_percentage(1) == 1

    def test_just_above_one_is_raw(self):
        assert normalize_percentage(1.1) == pytest.approx(0.011)
