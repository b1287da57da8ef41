import logging

from astroresonance.boot.logging import _coerce_level, configure_logging


def test_coerce_level_accepts_names_and_numbers():
    assert _coerce_level("debug", logging.WARNING) == logging.DEBUG
    assert _coerce_level("15", logging.WARNING) == 15
    assert _coerce_level(logging.ERROR, logging.WARNING) == logging.ERROR
    assert _coerce_level("chatty", logging.WARNING) == logging.WARNING
    assert _coerce_level(None, logging.INFO) == logging.INFO


def test_configure_logging_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    assert configure_logging() == logging.INFO
    assert logging.getLogger().level == logging.INFO
    assert configure_logging(level="error") == logging.ERROR
