"""
Logging Configuration
=====================
Sets up the 'keypadcalc' logger for the application.

Two knobs come from ``config``:
    level: Verbosity of the whole package (INFO by default).
    trace_input: Log every dispatched input event and the state it produced,
        even when the package itself stays at INFO. The store writes these
        records at DEBUG on its own logger.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "keypadcalc"
INPUT_TRACE_LOGGER = "keypadcalc.controller.store"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def _close_handlers(logger: logging.Logger) -> None:
    """Detach and close every handler on ``logger`` (releases open log files)."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    trace_input: bool = False,
) -> logging.Logger:
    """
    Configures the logger for the 'keypadcalc' namespace.

    Calling it again replaces the previous configuration; handlers from the
    earlier call are closed first.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        trace_input: Emit the store's per-keypress DEBUG records.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    _close_handlers(logger)

    # Handlers must let the trace records through even if the package is at INFO
    handler_level = min(level, logging.DEBUG) if trace_input else level
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    trace_logger = logging.getLogger(INPUT_TRACE_LOGGER)
    trace_logger.setLevel(logging.DEBUG if trace_input else logging.NOTSET)

    logger.info(f"Logging initialized (input trace {'on' if trace_input else 'off'}).")
    return logger


def shutdown_logging() -> None:
    """Close the package handlers, e.g. when the event loop has finished."""
    _close_handlers(logging.getLogger(PACKAGE_LOGGER))
    logging.getLogger(INPUT_TRACE_LOGGER).setLevel(logging.NOTSET)
