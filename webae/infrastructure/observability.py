"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - Every JSON line carries timestamp, level, logger, service and message
    - Entity extras (entity, entity_id, error_code, path, schema_code) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: re-running replaces the handler it installed

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency, full control over keys
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

from webae import SERVICE_NAME

ENTITY_EXTRA_KEYS = ("entity", "entity_id", "error_code", "path", "schema_code")

_HANDLER_NAME = "webae"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def __init__(
        self, service: str = SERVICE_NAME, extra_keys: tuple[str, ...] = ENTITY_EXTRA_KEYS,
    ):
        super().__init__()
        self.service = service
        self.extra_keys = extra_keys

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        for key in self.extra_keys:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json", service: str = SERVICE_NAME):
    """Configure root logging for the application."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter(service=service))
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
