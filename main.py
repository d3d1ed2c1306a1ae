"""Punto de entrada de la calculadora."""

import logging
import os
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


USE_ARBITRARY_PRECISION = False
AP_DIGITS = 30
WINDOW_GEOMETRY = "360x480"
WINDOW_MIN_SIZE = (320, 440)
LOG_LEVEL_ENV = "CALC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging() -> logging.Logger:
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger()
    if logger.handlers:
        return logger  # ya configurado

    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def build_engine():
    if USE_ARBITRARY_PRECISION:
        from arbitrary_precision_engine import ArbitraryPrecisionCalculatorEngine

        return ArbitraryPrecisionCalculatorEngine(digits=AP_DIGITS)
    return CalculatorEngine()


def main():
    log = _setup_logging()
    engine = build_engine()
    log.info("Motor: %s", type(engine).__name__)

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, engine=engine)
    root.mainloop()


if __name__ == "__main__":
    main()
