from __future__ import annotations

import json
import logging

import pytest
from pythonjsonlogger import jsonlogger

from post_browser.core.exceptions import ConfigError
from post_browser.logging_config import build_formatter, configure_logging, resolve_level


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("post_browser.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_format_is_default(monkeypatch):
    monkeypatch.delenv("POST_BROWSER_LOG_FORMAT", raising=False)
    monkeypatch.delenv("POST_BROWSER_LOG_LEVEL", raising=False)

    configure_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.INFO


def test_plain_format_replaces_handlers(monkeypatch):
    monkeypatch.setenv("POST_BROWSER_LOG_FORMAT", "plain")

    configure_logging(level=logging.DEBUG)
    configure_logging(level=logging.DEBUG)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.DEBUG


def test_json_output_uses_short_keys_and_keeps_extra_fields():
    formatter = build_formatter("json")

    out = json.loads(formatter.format(_record("records_loaded", n_records=12, source="stub")))

    assert out["event"] == "records_loaded"
    assert out["level"] == "INFO"
    assert out["logger"] == "post_browser.test"
    assert out["app"] == "post-browser"
    assert out["n_records"] == 12
    assert out["source"] == "stub"
    assert "levelname" not in out


@pytest.mark.parametrize("raw,expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("15", 15)])
def test_level_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("POST_BROWSER_LOG_LEVEL", raw)

    assert resolve_level() == expected


def test_explicit_level_wins_over_environment(monkeypatch):
    monkeypatch.setenv("POST_BROWSER_LOG_LEVEL", "debug")

    assert resolve_level(logging.ERROR) == logging.ERROR


@pytest.mark.parametrize("raw", ["loud", "basic_format"])
def test_unknown_level_name_raises(monkeypatch, raw):
    monkeypatch.setenv("POST_BROWSER_LOG_LEVEL", raw)

    with pytest.raises(ConfigError):
        resolve_level()
