"""Structured Logging: JSON formatter, request-id propagation and setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Every record carries the current request_id ("-" outside a request)
    - Extra fields (subscriber_id, error_code, status_code, ...) surfaced when present
    - Subscriber PII (email, name) is never passed as an extra field

Design Decisions:
    - request_id lives in a ContextVar, one value per request task
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone

request_id_ctx_var: ContextVar[str | None] = ContextVar("request_id", default=None)

_EXTRA_KEYS = (
    "request_id", "subscriber_id", "error_code", "operation",
    "path", "method", "status_code", "duration_ms",
)


class RequestIdFilter(logging.Filter):
    """Stamp the active request id on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_ctx_var.get() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.addFilter(RequestIdFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
