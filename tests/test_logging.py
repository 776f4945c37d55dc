# tests/test_logging.py

import logging

from logger import get_logger, setup_logging
from logger.logging import LOG_FORMAT


def _capture_basic_config(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_explicit_level_is_used(monkeypatch):
    calls = _capture_basic_config(monkeypatch)

    setup_logging("DEBUG")

    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["force"] is True
    handler = calls[0]["handlers"][0]
    assert handler.formatter._fmt == LOG_FORMAT


def test_level_defaults_to_settings(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings.app, "log_level", "WARNING")
    calls = _capture_basic_config(monkeypatch)

    setup_logging()

    assert calls[0]["level"] == logging.WARNING


def test_unknown_level_falls_back_to_info(monkeypatch):
    calls = _capture_basic_config(monkeypatch)

    setup_logging("chatty")

    assert calls[0]["level"] == logging.INFO


def test_get_logger_names():
    assert get_logger("api.app").name == "api.app"
    assert get_logger() is logging.getLogger()
