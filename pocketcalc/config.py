"""
Configuration constants for the pocket calculator.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Logging
LOG_LEVEL = os.getenv("CALC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Dump a JSON snapshot of the engine state after every key press (DEBUG level)
TRACE_STATE = _env_flag("CALC_TRACE_STATE")

# Integral values at or above this magnitude switch to exponent notation
MAX_PLAIN_INTEGER = 1e21
