"""Singleton pattern.

The naive singleton checks for an instance and creates one if missing, with
nothing stopping two threads from both seeing "missing". The guarded version
hands the same job to ``LazySingleton``, which re-checks under a lock before
constructing; see ``designkit.registry``.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from designkit.sink import LogSink, get_log_sink


# --- Before -----------------------------------------------------------------

class NaiveLogger:
    """Check-then-create with no lock. Racy under threads."""

    _instance: NaiveLogger | None = None
    instances_created = 0
    # Seconds to stall between the check and the create; makes the race visible.
    construction_delay = 0.0

    def __new__(cls):
        if cls._instance is None:
            if cls.construction_delay:
                time.sleep(cls.construction_delay)
            cls.instances_created += 1
            cls._instance = super().__new__(cls)
        return cls._instance

    def log(self, message: str) -> None:
        print(f"[naive] {message}")

    @classmethod
    def forget(cls) -> None:
        cls._instance = None
        cls.instances_created = 0


# --- After ------------------------------------------------------------------

def get_logger() -> LogSink:
    """Return the process-wide log sink."""
    return get_log_sink()


def race(accessor: Callable[[], object], callers: int = 8) -> list[object]:
    """Call ``accessor`` from ``callers`` threads released at the same moment."""
    barrier = threading.Barrier(callers)
    results: list[object] = [None] * callers

    def _call(slot: int) -> None:
        barrier.wait()
        results[slot] = accessor()

    threads = [threading.Thread(target=_call, args=(i,)) for i in range(callers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


def demo() -> None:
    print("-- before: unguarded check-then-create")
    NaiveLogger.forget()
    NaiveLogger.construction_delay = 0.01
    try:
        seen = race(NaiveLogger)
    finally:
        NaiveLogger.construction_delay = 0.0
    print(
        f"{len(seen)} threads saw {len({id(obj) for obj in seen})} distinct instance(s); "
        f"{NaiveLogger.instances_created} constructed"
    )

    print("-- after: double-checked locking")
    seen = race(get_logger)
    print(f"{len(seen)} threads saw {len({id(obj) for obj in seen})} distinct instance(s)")
    sink = get_logger()
    sink.write("singleton demo finished", threads=len(seen))
    print(f"Wrote to shared sink at {sink.path}")
