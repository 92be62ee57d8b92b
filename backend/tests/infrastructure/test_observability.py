"""Structured logging tests — JSONFormatter fields and setup_logging idempotence.

Tests cover:
    - JSON line contains core fields and known extras only
    - Exception text included when exc_info present
    - setup_logging replaces its own handler instead of stacking
"""

import json
import logging
import sys

from scriptops.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "scriptops.test", logging.ERROR, __file__, 1, "toggle failed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras():
    line = JSONFormatter().format(
        _record(service_name="sheets", action="enable", unrelated="x"),
    )
    log = json.loads(line)
    assert log["level"] == "ERROR"
    assert log["logger"] == "scriptops.test"
    assert log["message"] == "toggle failed"
    assert log["service_name"] == "sheets"
    assert log["action"] == "enable"
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord(
            "scriptops.test", logging.ERROR, __file__, 1, "oops", None, sys.exc_info(),
        )
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in log["exception"]


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    original_level = root.level
    try:
        first = setup_logging("INFO", "json")
        second = setup_logging("DEBUG", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.DEBUG
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        for handler in list(root.handlers):
            if handler.get_name() == "scriptops":
                root.removeHandler(handler)
        root.setLevel(original_level)
