"""Structured Logging - tests for JSONFormatter and setup_logging."""

import json
import logging

from photoalbum.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "photoalbum.core.snapshot_engine", logging.INFO, __file__, 1,
        "Snapshot taken (%d shapes)", (2,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "photoalbum.core.snapshot_engine"
    assert log["message"] == "Snapshot taken (2 shapes)"
    assert "timestamp" in log


def test_json_formatter_surfaces_domain_extras():
    log = json.loads(JSONFormatter().format(
        _record(snapshot_id="s-1", line_number=4, error_code="UNKNOWN_SHAPE"),
    ))
    assert log["snapshot_id"] == "s-1"
    assert log["line_number"] == 4
    assert log["error_code"] == "UNKNOWN_SHAPE"
    assert "shape_name" not in log


def test_setup_logging_installs_handler():
    previous_level = logging.root.level
    handler = setup_logging("warning", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
