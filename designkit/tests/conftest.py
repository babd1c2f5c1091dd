from __future__ import annotations

import logging

import pytest

from designkit import sink as sink_mod
from designkit.config import settings


@pytest.fixture(autouse=True)
def _isolated_log_sink(monkeypatch, tmp_path):
    """Point the shared sink at a temp directory and drop it after each test.

    Tests must never write to ./logs, and a sink opened by one test must not
    leak into the next.
    """
    monkeypatch.setattr(settings, "log_dir", str(tmp_path / "logs"))
    monkeypatch.setattr(settings, "log_file", "test.log")
    # main() overwrites these from CLI flags; monkeypatch restores them.
    monkeypatch.setattr(settings, "log_level", settings.log_level)
    monkeypatch.setattr(settings, "log_format", settings.log_format)
    sink_mod._sink_singleton.reset()
    yield
    if sink_mod._sink_singleton.initialized:
        sink_mod._sink_singleton.get().close()
    sink_mod._sink_singleton.reset()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handlers installed by setup_logging()."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_designkit", False):
            root.removeHandler(handler)
    root.setLevel(level)
