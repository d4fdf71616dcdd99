"""Structured Logging — JSON formatter and setup for host applications.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operating_point, perturbation, classification, error_code) surfaced when present
    - Non-JSON stressor/payoff values are rendered with str(), never dropped

Design Decisions:
    - JSONFormatter emits classification extras as top-level keys so log pipelines
      can filter on operating_point / classification without parsing the message
    - The library never calls setup_logging itself: host applications opt in once on startup
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS: tuple[str, ...] = (
    "operating_point", "perturbation", "classification", "error_code",
)


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
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
