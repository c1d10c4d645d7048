"""
The four binary operators and their precedence.
"""
from enum import Enum

import numpy as np

# Lowest precedence: a reduction at this threshold folds every pending operator.
LOWEST_PRECEDENCE = 0


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    def apply(self, a: float, b: float) -> float:
        """
        Evaluate ``a op b`` with IEEE float semantics.

        Division by zero and overflow are not errors here: they produce
        inf/nan, which the display shows as-is.
        """
        fn = _UFUNCS[self]
        with np.errstate(all="ignore"):
            result = fn(np.float64(a), np.float64(b))
        return float(result)


_PRECEDENCE = {
    Operator.ADD: 0,
    Operator.SUBTRACT: 0,
    Operator.MULTIPLY: 1,
    Operator.DIVIDE: 1,
}

_UFUNCS = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
}
