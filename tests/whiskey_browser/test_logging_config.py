from __future__ import annotations

import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from whiskey_browser.logging_config import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    build_formatter,
    configure_logging,
)


@pytest.fixture
def restore_root_logger(monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_is_the_default(restore_root_logger):
    configure_logging()

    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)
    assert restore_root_logger.level == logging.INFO


def test_env_selects_plain(restore_root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "PLAIN")

    configure_logging(level=logging.DEBUG)

    formatter = restore_root_logger.handlers[0].formatter
    assert not isinstance(formatter, JsonFormatter)
    assert restore_root_logger.level == logging.DEBUG


def test_force_format_wins_over_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "plain")

    configure_logging(force_format="json")
    configure_logging(force_format="json")

    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)


def test_level_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    configure_logging()
    assert restore_root_logger.level == logging.WARNING

    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    configure_logging()
    assert restore_root_logger.level == logging.INFO


def test_json_records_carry_extra_fields():
    record = logging.LogRecord("whiskey_browser.test", logging.INFO, __file__, 1, "Loaded", None, None)
    record.n_records = 5

    payload = json.loads(build_formatter("json").format(record))

    assert payload["message"] == "Loaded"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "whiskey_browser.test"
    assert payload["n_records"] == 5
