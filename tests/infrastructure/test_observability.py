"""Structured logging: JSON formatter fields and idempotent setup."""

import json
import logging
import sys

from users_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "users_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "users_api.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_formatter_surfaces_extra_fields():
    out = json.loads(JSONFormatter().format(
        _record(user_id=3, error_code="VALIDATION_ERROR", field="email", path="/users"),
    ))
    assert out["user_id"] == 3
    assert out["error_code"] == "VALIDATION_ERROR"
    assert out["field"] == "email"
    assert out["path"] == "/users"


def test_json_formatter_omits_unset_extras():
    out = json.loads(JSONFormatter().format(_record()))
    assert "user_id" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in out["exception"]


def test_setup_logging_does_not_stack_handlers():
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
