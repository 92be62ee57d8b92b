"""Structured Logging — JSON formatter and setup for CLI diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (project_id, service_name, error_code, ...) surfaced when present
    - Logs go to stderr; stdout stays reserved for command output
    - setup_logging is idempotent: re-running replaces the handler it installed

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once per CLI invocation from the typer callback
"""

import json
import logging
import sys
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "project_id", "service_name", "script_id", "action",
    "error_code", "status_code", "path",
)
_HANDLER_NAME = "scriptops"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the CLI and return the installed handler."""
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
