# tests/test_log_config.py
import io
import logging

import pytest

from cgp_core.log_config import LOG_LEVEL_ENV_VAR, resolve_level, setup_logging


@pytest.fixture
def restore_logging():
    yield
    setup_logging(logging.INFO)


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_setup_logging_writes_formatted_records(restore_logging):
    buffer = io.StringIO()
    setup_logging("DEBUG", stream=buffer)
    logging.getLogger("cgp_core.test").debug("hello")
    assert "[DEBUG] [cgp_core.test] hello" in buffer.getvalue()
    assert len(logging.getLogger().handlers) == 1


def test_level_from_environment(restore_logging, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
    setup_logging(stream=io.StringIO())
    assert logging.getLogger().level == logging.ERROR


def test_invalid_level_falls_back_to_info(restore_logging):
    setup_logging("chatty", stream=io.StringIO())
    assert logging.getLogger().level == logging.INFO
