import logging

from keypadcalc import config
from keypadcalc.controller.store import CalculatorStore
from keypadcalc.logging_config import PACKAGE_LOGGER, setup_logging, shutdown_logging
from keypadcalc.model.events import DigitPressed


def test_log_level_default(monkeypatch):
    monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
    assert config.get_log_level() == logging.INFO


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
    assert config.get_log_level() == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
    assert config.get_log_level() == logging.INFO


def test_log_file_from_env(monkeypatch, tmp_path):
    monkeypatch.delenv(config.LOG_FILE_ENV, raising=False)
    assert config.get_log_file() is None
    monkeypatch.setenv(config.LOG_FILE_ENV, str(tmp_path / "calc.log"))
    assert config.get_log_file() == str(tmp_path / "calc.log")


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == PACKAGE_LOGGER
        assert len(logger.handlers) == 2
        logging.getLogger("keypadcalc.model.state").debug("digit ignored")
        for handler in logger.handlers:
            handler.flush()
        assert "digit ignored" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_trace_input_from_env(monkeypatch):
    monkeypatch.delenv(config.TRACE_INPUT_ENV, raising=False)
    assert config.get_trace_input() is False
    monkeypatch.setenv(config.TRACE_INPUT_ENV, "Yes")
    assert config.get_trace_input() is True


def test_reconfiguring_closes_previous_file_handler(tmp_path):
    first = setup_logging(logging.INFO, log_file=str(tmp_path / "first.log"))
    first_file = next(h for h in first.handlers if isinstance(h, logging.FileHandler))
    try:
        setup_logging(logging.INFO, log_file=str(tmp_path / "second.log"))
        assert first_file not in first.handlers
        assert first_file.stream is None
    finally:
        shutdown_logging()
    assert logging.getLogger(PACKAGE_LOGGER).handlers == []


def test_input_trace_logged_at_info_level(qapp, tmp_path):
    log_file = tmp_path / "trace.log"
    setup_logging(logging.INFO, log_file=str(log_file), trace_input=True)
    try:
        CalculatorStore().dispatch(DigitPressed("8"))
        logging.getLogger("keypadcalc.model.state").debug("not traced")
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "display '8'" in text
        assert "not traced" not in text
    finally:
        shutdown_logging()
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)
