"""Logging Setup — one root handler, JSON lines or plain text.

Invariants:
    - Each JSON line carries timestamp (time of the event, UTC), level,
      logger and message
    - Catalog context attached via `extra=` (entity, entity_id, error_code,
      path, status_code) is copied into the line; other extras are dropped
    - At most one handler installed by this module is attached to the root logger

Design Decisions:
    - stdlib logging + json; no structlog
    - Values that json cannot encode (Decimal, enums) fall back to str()
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = ("entity", "entity_id", "error_code", "path", "status_code")
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        line.update(
            (field, getattr(record, field))
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        )
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def _formatter_for(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install (or swap) the root handler; called from the app lifespan."""
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(_formatter_for(fmt))
    root.addHandler(_handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
