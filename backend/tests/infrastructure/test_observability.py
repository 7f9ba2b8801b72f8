"""Structured Logging: verifies JSON output and domain extras."""

import json
import logging

from recordbook.infrastructure.observability import JSONFormatter


def _record(msg, **extra):
    record = logging.LogRecord(
        "recordbook.services.sync_engine", logging.ERROR, __file__, 1,
        msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extras():
    out = json.loads(JSONFormatter().format(_record(
        "Запись не была удалена",
        error_code="SILENT_NO_OP", entity_kind="records", entity_id=7,
    )))

    assert out["level"] == "ERROR"
    assert out["message"] == "Запись не была удалена"
    assert out["error_code"] == "SILENT_NO_OP"
    assert out["entity_kind"] == "records"
    assert out["entity_id"] == 7


def test_json_formatter_skips_missing_extras():
    out = json.loads(JSONFormatter().format(_record("ok", backend_code=None)))

    assert "backend_code" not in out
    assert "operation" not in out
