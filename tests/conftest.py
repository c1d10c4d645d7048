"""
Pytest configuration and fixtures.
"""
import pytest
import sys
import os

# Add the parent directory to path so we can import the packages
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pocketcalc.engine import CalculatorEngine
from pocketcalc.keys import Key


@pytest.fixture
def engine():
    """A freshly initialised engine."""
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Feed a sequence of key ids such as "4+3=" to the engine."""
    symbols = {
        ".": Key.DECIMAL, "+": Key.ADD, "-": Key.SUBTRACT, "*": Key.MULTIPLY,
        "/": Key.DIVIDE, "%": Key.PERCENT, "=": Key.EQUAL,
        "C": Key.CLEAR, "E": Key.CLEAR_ENTRY,
    }

    def _press(sequence):
        for ch in sequence:
            if ch.isdigit():
                engine.press(Key.from_id("num" + ch))
            else:
                engine.press(symbols[ch])
        return engine

    return _press
