"""
Tests for the keypad layout of the GUI.
"""
import pytest

pytest.importorskip("tkinter")

from pocketcalc.keys import Key
from pocketcalc_gui.gui import BTN_BG, EQ_BG, KEYPAD, OP_BG, tile_colour


class TestKeypad:
    """Tests for KEYPAD."""

    def test_every_key_has_one_tile(self):
        keys = [key for row in KEYPAD for _, key in row if key is not None]
        assert sorted(k.value for k in keys) == sorted(k.value for k in Key)

    def test_rows_are_uniform(self):
        assert len({len(row) for row in KEYPAD}) == 1

    def test_tile_colour(self):
        assert tile_colour(Key.EQUAL) == EQ_BG
        assert tile_colour(Key.NUM5) == BTN_BG
        assert tile_colour(Key.ADD) == OP_BG
