"""
Tests for the key enum.
"""
import pytest

from pocketcalc.keys import DIGIT_KEYS, OPERATOR_KEYS, Key, UnknownKeyError
from pocketcalc.operators import Operator


class TestKey:
    """Tests for Key lookups."""

    def test_from_id(self):
        assert Key.from_id("num7") is Key.NUM7
        assert Key.from_id("clear-entry") is Key.CLEAR_ENTRY

    def test_from_id_unknown(self):
        with pytest.raises(UnknownKeyError):
            Key.from_id("backspace")
        assert issubclass(UnknownKeyError, ValueError)

    def test_digits(self):
        assert [k.digit for k in DIGIT_KEYS] == list(range(10))
        assert Key.DECIMAL.digit is None

    def test_operators(self):
        assert Key.ADD.operator is Operator.ADD
        assert Key.DIVIDE.operator is Operator.DIVIDE
        assert Key.PERCENT.operator is None
        assert len(OPERATOR_KEYS) == 4
