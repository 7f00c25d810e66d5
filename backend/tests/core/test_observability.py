"""Structured logging — JSON formatter fields and idempotent setup."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.display_order_manager", logging.INFO, __file__, 1,
        "Rebalanced regular partition", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_known_extras():
    out = json.loads(JSONFormatter().format(_record(featured=False, error_code="X")))

    assert out["level"] == "INFO"
    assert out["message"] == "Rebalanced regular partition"
    assert out["featured"] is False
    assert out["error_code"] == "X"


def test_json_formatter_skips_unknown_and_missing_extras():
    out = json.loads(JSONFormatter().format(_record(secret="s")))

    assert "secret" not in out
    assert "project_id" not in out


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")

    named = [h for h in logging.root.handlers if h.get_name() == "portfolio-api"]
    assert len(named) == 1
    assert isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
