"""Structured Logging — JSONFormatter output and setup_logging idempotence."""

import json
import logging
from decimal import Decimal

from catalog_api.infrastructure import observability
from catalog_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "catalog_api.test", logging.INFO, __file__, 1, "Category %s created", (7,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "catalog_api.test"
    assert payload["message"] == "Category 7 created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(entity="Category", entity_id=7, unrelated="x"),
    ))
    assert payload["entity"] == "Category"
    assert payload["entity_id"] == 7
    assert "unrelated" not in payload


def test_setup_logging_does_not_stack_handlers():
    original_level = logging.root.level
    setup_logging("DEBUG", "text")
    count = len(logging.root.handlers)
    setup_logging("WARNING", "json")
    try:
        assert len(logging.root.handlers) == count
        assert logging.root.level == logging.WARNING
        assert isinstance(observability._handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
        logging.root.setLevel(original_level)


def test_json_formatter_uses_event_time_and_stringifies_decimals():
    record = _record(entity_id=Decimal("1.50"))
    record.created = 0.0
    payload = json.loads(JSONFormatter().format(record))
    assert payload["timestamp"].startswith("1970-01-01T00:00:00")
    assert payload["entity_id"] == "1.50"


def test_setup_logging_unknown_level_falls_back_to_info():
    original_level = logging.root.level
    setup_logging("chatty", "text")
    try:
        assert logging.root.level == logging.INFO
        assert not isinstance(observability._handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
        logging.root.setLevel(original_level)
