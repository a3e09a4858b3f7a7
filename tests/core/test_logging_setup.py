import logging
from unittest.mock import MagicMock

import pytest
from callflow.core.logging import DEFAULT_LOG_LEVEL, NOISY_LIBRARIES, log_call_state, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    root.handlers.clear()

    yield

    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


def make_settings(level: str) -> MagicMock:
    settings = MagicMock()
    settings.get_log_level.return_value = level
    return settings


def test_setup_logging_default_level():
    setup_logging(make_settings(DEFAULT_LOG_LEVEL))

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    for lib_name in NOISY_LIBRARIES:
        assert logging.getLogger(lib_name).level == logging.WARNING


def test_setup_logging_custom_level():
    setup_logging(make_settings("DEBUG"))
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_invalid_level(capsys):
    setup_logging(make_settings("LOUD"))

    assert logging.getLogger().level == logging.INFO
    assert "Invalid LOG_LEVEL 'LOUD'" in capsys.readouterr().err


def test_setup_logging_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    setup_logging()
    assert logging.getLogger().level == logging.WARNING


def test_log_call_state(caplog):
    with caplog.at_level(logging.DEBUG, logger="callflow.pipeline.call"):
        log_call_state("abc", "received", {"method": "GET"})

    record = caplog.records[-1]
    assert record.getMessage() == "[abc] Call state at received"
    assert record.stage == "received"
    assert record.method == "GET"
