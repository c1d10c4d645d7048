#!/usr/bin/env python3
"""
Entry point for the pocket calculator.

Run from the repository root:

    python main.py

Set CALC_LOG_LEVEL=DEBUG (and CALC_TRACE_STATE=1) in the environment or a
.env file to follow every key press in the log.
"""
import logging
import sys
from pathlib import Path

# Allow running from a checkout without installing
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pocketcalc import config
from pocketcalc.engine import CalculatorEngine

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        from pocketcalc_gui.gui import CalculatorGUI
    except ImportError:
        logger.error("Tkinter is not available; the calculator window cannot be shown")
        raise

    engine = CalculatorEngine()
    logger.info("Starting calculator")
    app = CalculatorGUI(engine)
    app.mainloop()


if __name__ == "__main__":
    main()
