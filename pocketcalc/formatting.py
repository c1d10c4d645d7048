"""
Display formatting for engine values.

Results are rendered the way a pocket calculator shows them: whole numbers
without a trailing ".0", and non-finite results spelled out rather than raised.
"""
import math

from pocketcalc.config import MAX_PLAIN_INTEGER


def format_number(value: float) -> str:
    """Render a stack value for the display."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < MAX_PLAIN_INTEGER:
        # int() also folds -0.0 into "0"
        return str(int(value))
    return repr(float(value))


def format_operator(op) -> str:
    return op.value
