import json
import logging

import pytest

from daggerkit.logger import JsonFormatter, get_level_from_env, new_logger


@pytest.mark.parametrize(
    "env_value, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("INFO", logging.INFO),
        ("WARN", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("", logging.INFO),
        ("debug", logging.INFO),
    ],
)
def test_get_level_from_env(monkeypatch, env_value, expected):
    monkeypatch.setenv("LOG_LEVEL", env_value)
    assert get_level_from_env() == expected


def test_get_level_from_env_unset(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_level_from_env() == logging.INFO


def test_new_logger_json(monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    logger = new_logger()
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    logger.info("hello world")
    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["level"] == "INFO"
    assert payload["msg"] == "hello world"


def test_new_logger_text(monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    logger = new_logger()
    assert not isinstance(logger.handlers[0].formatter, JsonFormatter)
    logger.warning("disk full")
    out = capsys.readouterr().out
    assert "level=WARN" in out
    assert 'msg="disk full"' in out


def test_new_logger_respects_level(monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("LOG_FORMAT", "json")
    logger = new_logger()
    logger.info("hidden")
    logger.error("shown")
    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["msg"] for line in lines] == ["shown"]


def test_new_logger_replaces_handlers(monkeypatch):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    new_logger()
    logger = new_logger()
    assert len(logger.handlers) == 1


def test_json_formatter_fields():
    record = logging.makeLogRecord(
        {"msg": "value %d", "args": (3,), "levelno": logging.WARNING, "levelname": "WARNING", "job": "build"}
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "value 3"
    assert payload["level"] == "WARN"
    assert payload["job"] == "build"
    assert "time" in payload