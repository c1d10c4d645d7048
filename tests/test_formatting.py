"""
Tests for display formatting.
"""
import pytest

from pocketcalc.formatting import format_number, format_operator
from pocketcalc.operators import Operator


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize("value,expected", [
        (7.0, "7"),
        (-12.0, "-12"),
        (0.5, "0.5"),
        (-0.0, "0"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (float("nan"), "NaN"),
    ])
    def test_values(self, value, expected):
        assert format_number(value) == expected


def test_format_operator():
    assert format_operator(Operator.DIVIDE) == "/"
