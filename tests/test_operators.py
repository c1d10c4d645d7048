"""
Tests for operator precedence and arithmetic.
"""
import math

from pocketcalc.operators import LOWEST_PRECEDENCE, Operator


class TestOperator:
    """Tests for the Operator enum."""

    def test_precedence(self):
        assert Operator.ADD.precedence == Operator.SUBTRACT.precedence == LOWEST_PRECEDENCE
        assert Operator.MULTIPLY.precedence == Operator.DIVIDE.precedence == 1

    def test_apply(self):
        assert Operator.ADD.apply(2, 3) == 5
        assert Operator.SUBTRACT.apply(2, 3) == -1
        assert Operator.MULTIPLY.apply(2, 3) == 6
        assert Operator.DIVIDE.apply(3, 2) == 1.5
        assert isinstance(Operator.ADD.apply(2, 3), float)

    def test_divide_by_zero_does_not_raise(self):
        assert Operator.DIVIDE.apply(1, 0) == math.inf
        assert Operator.DIVIDE.apply(-1, 0) == -math.inf
        assert math.isnan(Operator.DIVIDE.apply(0, 0))

    def test_overflow(self):
        assert Operator.MULTIPLY.apply(1e308, 10) == math.inf
