"""Process-wide log sink.

The sink is the resource guarded by the singleton lesson: it is opened on
first use, shared by every caller afterwards, and lives until the process
exits.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from designkit.config import settings
from designkit.errors import SinkConstructionError
from designkit.registry import LazySingleton

logger = logging.getLogger(__name__)

SINK_LOGGER_NAME = "designkit.logsink"


class LogSink:
    """Append-only log file shared by all callers."""

    def __init__(self, log_dir: str | Path, log_file: str):
        self._path = Path(log_dir) / log_file
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._handler = logging.FileHandler(self._path, mode="a", encoding="utf-8")
        except OSError as e:
            raise SinkConstructionError(f"cannot open log sink at {self._path}: {e}") from e

        self._handler.setFormatter(
            logging.Formatter("%(asctime)s - %(message)s", "%Y-%m-%d %H:%M:%S")
        )
        self._logger = logging.getLogger(SINK_LOGGER_NAME)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)
        self._write_lock = threading.Lock()
        logger.info(f"Opened log sink at {self._path}")

    @property
    def path(self) -> Path:
        return self._path

    def write(self, message: str, **fields) -> None:
        if fields:
            details = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
            message = f"{message} {details}"
        with self._write_lock:
            self._logger.info(message)
            self._handler.flush()

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()


def _build_sink() -> LogSink:
    return LogSink(settings.log_dir, settings.log_file)


_sink_singleton = LazySingleton(_build_sink, name="log_sink")


def get_log_sink() -> LogSink:
    """Return the shared log sink, opening it on first call."""
    return _sink_singleton.get()
