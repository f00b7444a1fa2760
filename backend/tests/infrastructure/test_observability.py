"""Structured logging — JSON formatter fields and handler replacement."""

import json
import logging

from pmis.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "pmis.test", logging.WARNING, __file__, 1, "Project %s not found", (7,), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "pmis.test"
    assert log["message"] == "Project 7 not found"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(entity="Project", entity_id=7, error_code="RESOURCE_NOT_FOUND"),
    ))
    assert log["entity"] == "Project"
    assert log["entity_id"] == 7
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert "file_id" not in log


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("INFO", "json")
    second = setup_logging("DEBUG", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert logging.root.level == logging.DEBUG
    logging.root.removeHandler(second)
