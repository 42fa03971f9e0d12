"""Structured Logging — JSON formatter output and setup idempotence."""

import json
import logging

from webae import SERVICE_NAME
from webae.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "webae.test", logging.INFO, __file__, 1, msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "webae.test"
    assert out["service"] == SERVICE_NAME
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_json_formatter_surfaces_entity_extras():
    out = json.loads(JSONFormatter().format(
        _record(entity="metadata", entity_id=3, error_code="error.idexists"),
    ))
    assert out["entity"] == "metadata"
    assert out["entity_id"] == 3
    assert out["error_code"] == "error.idexists"


def test_json_formatter_omits_absent_extras():
    out = json.loads(JSONFormatter().format(_record()))
    assert "entity_id" not in out
    assert "path" not in out


def test_json_formatter_keeps_accents():
    line = JSONFormatter().format(_record("Activité"))
    assert "Activité" in line


def test_setup_logging_is_idempotent():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("DEBUG", "text")
        ours = [h for h in logging.root.handlers if h.get_name() == "webae"]
        assert len(ours) == 1
        assert logging.root.level == logging.DEBUG
    finally:
        for h in list(logging.root.handlers):
            if h not in before:
                logging.root.removeHandler(h)
        logging.root.setLevel(level)
