"""Structured logging to standard output in text or JSON form."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime
from typing import Any

LOGGER_NAME = "daggerkit"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _level_name(levelno: int) -> str:
    if levelno >= logging.ERROR:
        return "ERROR"
    if levelno >= logging.WARNING:
        return "WARN"
    if levelno >= logging.INFO:
        return "INFO"
    return "DEBUG"


def _timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="milliseconds")


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "time": _timestamp(record),
        "level": _level_name(record.levelno),
        "msg": record.getMessage(),
    }
    for key, value in record.__dict__.items():
        if key not in _STANDARD_ATTRS and not key.startswith("_"):
            fields[key] = value
    return fields


class JsonFormatter(logging.Formatter):
    """Formats each record as one JSON object with time, level and msg keys."""

    def format(self, record: logging.LogRecord) -> str:
        fields = _record_fields(record)
        if record.exc_info:
            fields["exc"] = self.formatException(record.exc_info)
        return json.dumps(fields, default=str)


def _quote(value: Any) -> str:
    text = str(value)
    if not text or any(ch in text for ch in ' ="\\') or not text.isprintable():
        return json.dumps(text, ensure_ascii=False)
    return text


class _TextFormatter(logging.Formatter):
    """Formats each record as space-separated ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        fields = _record_fields(record)
        if record.exc_info:
            fields["exc"] = self.formatException(record.exc_info)
        return " ".join(f"{key}={_quote(value)}" for key, value in fields.items())


def get_level_from_env() -> int:
    """Return the logging level named by ``LOG_LEVEL``, defaulting to INFO."""
    return _LEVELS.get(os.environ.get("LOG_LEVEL", ""), logging.INFO)


def new_logger() -> logging.Logger:
    """Configure and return the package logger.

    ``LOG_FORMAT=json`` selects JSON output; anything else gives text.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    level = get_level_from_env()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if os.environ.get("LOG_FORMAT") == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(_TextFormatter())

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger