"""
Key-driven evaluation engine for a pocket calculator.

The engine keeps an entry buffer (the number being typed), a stack of operands
and a stack of pending operators. Operators are folded as soon as precedence
allows, so ``2 + 3 *`` keeps both operators pending while ``2 * 3 +`` folds the
product immediately. Pressing ``=`` again repeats the last evaluated step.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pocketcalc import config
from pocketcalc.formatting import format_number, format_operator
from pocketcalc.keys import Key, UnknownKeyError
from pocketcalc.operators import LOWEST_PRECEDENCE, Operator

logger = logging.getLogger(__name__)


@dataclass
class EngineState:
    """Everything the calculator remembers between key presses."""
    entry: Optional[str] = None  # None: nothing typed yet
    entry_visible: bool = True
    values: List[float] = field(default_factory=list)
    ops: List[Operator] = field(default_factory=list)
    last_operator: Optional[Operator] = None
    last_operand: Optional[float] = None

    def clear_entry(self):
        self.entry = None
        self.entry_visible = True

    def reset(self):
        self.clear_entry()
        self.values = []
        self.ops = []
        self.last_operator = None
        self.last_operand = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "entry": self.entry,
            "entry_visible": self.entry_visible,
            "values": list(self.values),
            "ops": [op.value for op in self.ops],
            "last_operator": self.last_operator.value if self.last_operator else None,
            "last_operand": self.last_operand,
        }


class CalculatorEngine:
    def __init__(self, state: Optional[EngineState] = None):
        self.state = state if state is not None else EngineState()

    # -------------------------
    # Derived reads
    # -------------------------
    def current_entry_text(self) -> Optional[str]:
        """The entry as displayed, or None while the stack top is shown instead."""
        if not self.state.entry_visible:
            return None
        return self.state.entry if self.state.entry else "0"

    def current_entry_value(self) -> Optional[float]:
        text = self.current_entry_text()
        return float(text) if text is not None else None

    def primary_display(self) -> str:
        text = self.current_entry_text()
        if text is not None:
            return text
        if self.state.values:
            return format_number(self.state.values[-1])
        return "0"

    def full_expression_display(self) -> str:
        """Rebuild the pending expression as typed, e.g. ``3+4*`` or ``3+4*5``."""
        values, ops = self.state.values, self.state.ops
        parts = []
        for i in range(max(len(values), len(ops))):
            if i < len(values):
                parts.append(format_number(values[i]))
            if i < len(ops):
                parts.append(format_operator(ops[i]))
        text = self.current_entry_text()
        if text is not None:
            parts.append(text)
        return "".join(parts)

    def repeat_indicator(self) -> str:
        """What another ``=`` would apply to the result (``+3``), or ``""``."""
        s = self.state
        if (len(s.values) <= 1 and not s.ops
                and s.last_operator is not None and s.last_operand is not None):
            return format_operator(s.last_operator) + format_number(s.last_operand)
        return ""

    # -------------------------
    # Key handlers
    # -------------------------
    def press_digit(self, d: int):
        if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 9:
            raise ValueError(f"Not a digit: {d!r}")
        s = self.state
        if not s.entry and not s.ops:
            # a finished result is discarded when a new number starts
            s.values = []
        s.entry_visible = True
        s.entry = (s.entry or "") + str(d)

    def press_decimal(self):
        s = self.state
        s.entry_visible = True
        if not s.entry:
            s.entry = "0"
        if "." not in s.entry:
            s.entry += "."

    def press_operator(self, op: Operator):
        value = self.current_entry_value()
        if value is None:
            # no new operand: the new operator replaces the pending one
            if self.state.ops:
                self.state.ops.pop()
        else:
            self._push_operand(value)
        self._reduce(op.precedence)
        self.state.ops.append(op)

    def press_percent(self):
        s = self.state
        value = self.current_entry_value()
        if value is not None:
            self._push_operand(value)
        if not s.values:
            return
        percent = s.values.pop()
        # "X% of Y" with a second operand, otherwise a bare X/100
        base = s.values[-1] if s.values else 1.0
        self._push_operand(percent / 100 * base)

    def press_equal(self):
        s = self.state
        if not s.ops and s.last_operator is not None:
            s.ops.append(s.last_operator)
        if not s.ops:
            return

        value = self.current_entry_value()
        if value is not None:
            if not s.values and s.last_operand is not None:
                # `4+3=` then `123=` gives 126: keep the remembered operand
                s.values.append(value)
            else:
                self._push_operand(value)
        if len(s.values) == 1 and s.last_operand is not None:
            self._push_operand(s.last_operand)
        if len(s.values) < 2:
            return

        self._reduce(LOWEST_PRECEDENCE)

    def press_clear_entry(self):
        self.state.clear_entry()

    def press_clear(self):
        self.state.reset()

    # -------------------------
    # Dispatch
    # -------------------------
    def press(self, key: Key):
        """Run the handler for one logical key."""
        if key.digit is not None:
            self.press_digit(key.digit)
        elif key.operator is not None:
            self.press_operator(key.operator)
        elif key is Key.DECIMAL:
            self.press_decimal()
        elif key is Key.PERCENT:
            self.press_percent()
        elif key is Key.EQUAL:
            self.press_equal()
        elif key is Key.CLEAR:
            self.press_clear()
        elif key is Key.CLEAR_ENTRY:
            self.press_clear_entry()
        else:
            raise UnknownKeyError(f"Unhandled key: {key!r}")

        logger.debug("key %s -> display %s", key.value, self.primary_display())
        if config.TRACE_STATE:
            logger.debug("state %s", json.dumps(self.state.as_dict()))

    def press_id(self, key_id: str):
        self.press(Key.from_id(key_id))

    # -------------------------
    # Stack helpers
    # -------------------------
    def _push_operand(self, value: float):
        s = self.state
        s.values.append(value)
        s.last_operand = value
        s.entry_visible = False
        s.entry = None

    def _reduce(self, precedence: int):
        """Fold pending operators whose precedence is at least ``precedence``."""
        s = self.state
        while s.ops and s.ops[-1].precedence >= precedence:
            if len(s.values) < 2:
                break
            op = s.ops.pop()
            b = s.values.pop()
            a = s.values.pop()
            s.values.append(op.apply(a, b))
            s.last_operator = op
