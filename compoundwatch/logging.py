"""
Logging for compoundwatch.

One JSON object per line in production, a plain text line in development
(COMPOUNDWATCH_LOG_FORMAT=text). Context passed through `extra=` is copied
into the JSON entry when its key is listed in CONTEXT_FIELDS.

    logger = get_logger("engine")
    logger.info("Cycle complete", extra={"cycle": 12, "active_patterns": 3})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

NAMESPACE = "compoundwatch"

LOG_LEVEL = os.getenv("COMPOUNDWATCH_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("COMPOUNDWATCH_LOG_FORMAT", "json")

CONTEXT_FIELDS = (
    # cycle
    "cycle", "items", "active_patterns", "topic_signals", "warnings_count", "expired",
    # catalog and annotations
    "topic_id", "pattern_id", "locale",
    # failures
    "error", "error_type",
    # http
    "method", "path", "status_code", "duration_ms", "engine_version",
)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def _text_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s %(levelname)-7s %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )


def setup_logging() -> logging.Logger:
    """Attach a single stdout handler to the package logger. Safe to call twice."""
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if LOG_FORMAT == "json" else _text_formatter())
    logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{NAMESPACE}.{name}")
