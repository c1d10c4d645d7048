"""
Logical calculator keys.

Every button a UI can offer maps onto exactly one ``Key`` member; the member
value is the identifier the UI uses for the button (``num7``, ``add``,
``clear-entry``...).
"""
from enum import Enum
from typing import Optional

from pocketcalc.operators import Operator


class UnknownKeyError(ValueError):
    pass


class Key(Enum):
    NUM0 = "num0"
    NUM1 = "num1"
    NUM2 = "num2"
    NUM3 = "num3"
    NUM4 = "num4"
    NUM5 = "num5"
    NUM6 = "num6"
    NUM7 = "num7"
    NUM8 = "num8"
    NUM9 = "num9"
    DECIMAL = "decimal"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    PERCENT = "percent"
    EQUAL = "equal"
    CLEAR = "clear"
    CLEAR_ENTRY = "clear-entry"

    @classmethod
    def from_id(cls, key_id: str) -> "Key":
        """Look up the key for a UI button identifier."""
        try:
            return cls(key_id)
        except ValueError:
            raise UnknownKeyError(f"Unknown key: {key_id!r}") from None

    @property
    def digit(self) -> Optional[int]:
        if self.value.startswith("num"):
            return int(self.value[3:])
        return None

    @property
    def operator(self) -> Optional[Operator]:
        return _KEY_OPERATORS.get(self)


_KEY_OPERATORS = {
    Key.ADD: Operator.ADD,
    Key.SUBTRACT: Operator.SUBTRACT,
    Key.MULTIPLY: Operator.MULTIPLY,
    Key.DIVIDE: Operator.DIVIDE,
}

DIGIT_KEYS = tuple(k for k in Key if k.digit is not None)
OPERATOR_KEYS = tuple(_KEY_OPERATORS)
