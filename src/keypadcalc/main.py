"""
Application Initialization
==========================
This module wires the model, controller and view together and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Sets up logging from the environment.
2. Creates the QApplication.
3. Instantiates the Store (the only owner of the calculator state).
4. Passes the Store into the Main Window.
"""
import logging
import sys

from keypadcalc.application import create_app
from keypadcalc.config import get_log_file, get_log_level, get_trace_input
from keypadcalc.controller.store import CalculatorStore
from keypadcalc.logging_config import setup_logging, shutdown_logging
from keypadcalc.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(level=get_log_level(), log_file=get_log_file(), trace_input=get_trace_input())

    app = create_app()

    store = CalculatorStore()
    window = MainWindow(store)
    window.show()

    logger.info("Calculator started.")
    exit_code = app.exec()

    logger.info(f"Calculator closed (exit code {exit_code}).")
    shutdown_logging()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
