"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants and the
environment variables the application reads.

Exports:
    MAX_DIGITS (int): Longest number the display accepts while typing.
    INITIAL_DISPLAY (str): Display text after start and after clear.
    ORG_ID, APP_ID, VISIBLE_APP_NAME (str): Application identity for Qt.
"""
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# Global Constants
MAX_DIGITS: int = 15
INITIAL_DISPLAY: str = "0"

ORG_ID = "keypadcalc"
APP_ID = "keypadcalc"
VISIBLE_APP_NAME = "Calculator"

LOG_LEVEL_ENV = "KEYPADCALC_LOG_LEVEL"
LOG_FILE_ENV = "KEYPADCALC_LOG_FILE"
TRACE_INPUT_ENV = "KEYPADCALC_TRACE_INPUT"


def get_log_level() -> int:
    """
    Logging level from ``KEYPADCALC_LOG_LEVEL`` (e.g. "DEBUG").
    Falls back to INFO when unset or unknown.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return logging.INFO

    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{name}' in {LOG_LEVEL_ENV}, using INFO.")
        return logging.INFO
    return level


def get_log_file() -> Optional[str]:
    """Optional log file path from ``KEYPADCALC_LOG_FILE``."""
    return os.environ.get(LOG_FILE_ENV) or None


def get_trace_input() -> bool:
    """Whether ``KEYPADCALC_TRACE_INPUT`` asks for per-keypress logging ("1", "true", "yes", "on")."""
    return os.environ.get(TRACE_INPUT_ENV, "").strip().lower() in {"1", "true", "yes", "on"}
