"""Structured logging setup for designkit.

Two formatters are provided:
- DesignkitJSONFormatter: one JSON object per line, for log shipping
- DesignkitTextFormatter: compact human-readable lines for the console

Both stamp every record with the service name and the run id of the current
CLI invocation so that lines from concurrent runs can be told apart.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from designkit.config import settings

SERVICE_NAME = "designkit"

# Attributes present on every LogRecord; anything else was passed via extra=
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class DesignkitJSONFormatter(logging.Formatter):
    """Render records as single-line JSON."""

    def __init__(self, run_id: str = ""):
        super().__init__()
        self.run_id = run_id

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": SERVICE_NAME,
            "run_id": self.run_id,
        }
        extra = _extra_fields(record)
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class DesignkitTextFormatter(logging.Formatter):
    """Render records as ``time level [run] logger: message``."""

    def __init__(self, run_id: str = ""):
        super().__init__(
            fmt="%(asctime)s %(levelname)-8s [%(run_id)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.run_id = run_id

    def format(self, record: logging.LogRecord) -> str:
        record.run_id = self.run_id[:8]
        try:
            return super().format(record)
        finally:
            del record.run_id


def build_formatter(run_id: str, log_format: str | None = None) -> logging.Formatter:
    """Return the formatter matching ``log_format`` (defaults to settings)."""
    fmt = (log_format or settings.log_format or "text").lower()
    if fmt == "json":
        return DesignkitJSONFormatter(run_id=run_id)
    return DesignkitTextFormatter(run_id=run_id)


def setup_logging(run_id: str = "") -> None:
    """Install a single stderr handler on the root logger.

    Safe to call more than once: handlers installed by a previous call are
    replaced rather than stacked.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_designkit", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(run_id))
    handler._designkit = True
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())
