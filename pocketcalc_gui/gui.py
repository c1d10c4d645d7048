#!/usr/bin/env python3
"""
Pocket calculator GUI

Thin Tkinter front end over pocketcalc.engine.CalculatorEngine. Each keypad
tile is bound to one logical Key; after every press the three read-outs
(expression line, repeat hint, main display) are re-read from the engine.
The window holds no calculator state of its own.
"""

import logging
import tkinter as tk
from typing import List, Optional, Tuple

from pocketcalc.engine import CalculatorEngine
from pocketcalc.keys import Key

logger = logging.getLogger(__name__)


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_WIDTH = 320
WINDOW_HEIGHT = 460

BG = "#0f1113"          # main app background
PANEL_BG = "#17181A"    # display panel background
BTN_BG = "#2b2d30"      # digit tile background
OP_BG = "#3a3d42"       # operator tile background
EQ_BG = "#2D8A58"       # equals tile background
FG = "#E6EEF3"          # foreground text (light)
SUBTLE_FG = "#8a949c"   # expression line / repeat hint

DISPLAY_FONT = ("Consolas", 28)
EXPR_FONT = ("Consolas", 12)
BUTTON_FONT = ("Segoe UI", 14)

# Keypad layout: rows of (label, key). A None label leaves a spacer.
KEYPAD: List[List[Tuple[Optional[str], Optional[Key]]]] = [
    [("C", Key.CLEAR), ("CE", Key.CLEAR_ENTRY), ("%", Key.PERCENT), ("÷", Key.DIVIDE)],
    [("7", Key.NUM7), ("8", Key.NUM8), ("9", Key.NUM9), ("×", Key.MULTIPLY)],
    [("4", Key.NUM4), ("5", Key.NUM5), ("6", Key.NUM6), ("−", Key.SUBTRACT)],
    [("1", Key.NUM1), ("2", Key.NUM2), ("3", Key.NUM3), ("+", Key.ADD)],
    [("0", Key.NUM0), (".", Key.DECIMAL), (None, None), ("=", Key.EQUAL)],
]


def tile_colour(key: Key) -> str:
    """Background for a keypad tile."""
    if key is Key.EQUAL:
        return EQ_BG
    if key.digit is not None or key is Key.DECIMAL:
        return BTN_BG
    return OP_BG


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self, engine: Optional[CalculatorEngine] = None):
        super().__init__()

        # Window setup
        self.title("Calculator")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.minsize(260, 380)
        self.configure(bg=BG)

        # Backend engine instance
        self.engine = engine if engine is not None else CalculatorEngine()

        self._build_display()
        self._build_keypad()
        self.refresh_display()

    # -------------------------
    # Display
    # -------------------------
    def _build_display(self):
        """Expression line and repeat hint above the main read-out."""
        disp = tk.Frame(self, bg=PANEL_BG)
        disp.pack(fill="x", padx=8, pady=(8, 4))

        hints = tk.Frame(disp, bg=PANEL_BG)
        hints.pack(fill="x")
        self.repeat_var = tk.StringVar()
        tk.Label(hints, textvariable=self.repeat_var, bg=PANEL_BG, fg=SUBTLE_FG,
                 anchor="w", font=EXPR_FONT).pack(side="left", padx=6, pady=(6, 0))
        self.expr_var = tk.StringVar()
        tk.Label(hints, textvariable=self.expr_var, bg=PANEL_BG, fg=SUBTLE_FG,
                 anchor="e", font=EXPR_FONT).pack(side="right", padx=6, pady=(6, 0))

        self.display_var = tk.StringVar()
        tk.Label(disp, textvariable=self.display_var, bg=PANEL_BG, fg=FG,
                 anchor="e", font=DISPLAY_FONT).pack(fill="x", padx=6, pady=(2, 8))

    def refresh_display(self):
        """Re-read the derived displays after a key press."""
        self.display_var.set(self.engine.primary_display())
        self.expr_var.set(self.engine.full_expression_display())
        self.repeat_var.set(self.engine.repeat_indicator())

    # -------------------------
    # Keypad
    # -------------------------
    def _build_keypad(self):
        """Uniform grid of tiles built from KEYPAD."""
        tile_container = tk.Frame(self, bg=BG)
        tile_container.pack(fill="both", expand=True, padx=8, pady=(4, 8))
        for r, row in enumerate(KEYPAD):
            for c, (label, key) in enumerate(row):
                if key is None:
                    spacer = tk.Frame(tile_container, bg=BG)
                    spacer.grid(row=r, column=c, sticky="nsew", padx=3, pady=3)
                else:
                    btn = tk.Button(tile_container, text=label, bg=tile_colour(key), fg=FG,
                                    relief="flat", font=BUTTON_FONT,
                                    command=self._map_button(key))
                    btn.grid(row=r, column=c, sticky="nsew", padx=3, pady=3)
                tile_container.grid_columnconfigure(c, weight=1)
            tile_container.grid_rowconfigure(r, weight=1)

    def _map_button(self, key: Key):
        return lambda k=key: self.on_key(k)

    def on_key(self, key: Key):
        self.engine.press(key)
        self.refresh_display()


# -------------------------
# Run the application
# -------------------------
def main(engine: Optional[CalculatorEngine] = None):
    app = CalculatorGUI(engine)
    app.mainloop()


if __name__ == "__main__":
    main()
