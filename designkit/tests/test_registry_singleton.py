from __future__ import annotations

import threading
import time

import pytest

from designkit.errors import SingletonConstructionError
from designkit.registry import LazySingleton


def test_lazy_singleton_built_once_and_only_on_demand():
    calls = {"count": 0}

    def factory():
        calls["count"] += 1
        return object()

    singleton = LazySingleton(factory)
    assert calls["count"] == 0
    assert singleton.initialized is False

    first = singleton.get()
    second = singleton.get()
    assert first is second
    assert calls["count"] == 1
    assert singleton.initialized is True


def test_reset_drops_instance_so_next_get_rebuilds():
    built = []

    def open_sink():
        built.append(len(built))
        return f"sink-{len(built)}"

    singleton = LazySingleton(open_sink)

    assert singleton.get() == "sink-1"
    singleton.reset()
    assert singleton.initialized is False
    assert singleton.get() == "sink-2"
    assert built == [0, 1]


def test_concurrent_first_access_constructs_once():
    callers = 100
    calls = {"count": 0}
    count_lock = threading.Lock()

    def factory():
        with count_lock:
            calls["count"] += 1
        # Hold the construction window open so racing threads pile up on it.
        time.sleep(0.05)
        return object()

    singleton = LazySingleton(factory, name="race")
    barrier = threading.Barrier(callers)
    results: list[object] = [None] * callers

    def worker(slot: int) -> None:
        barrier.wait()
        results[slot] = singleton.get()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(callers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert calls["count"] == 1
    assert all(result is results[0] for result in results)
    assert results[0] is not None


def test_fast_path_skips_lock_once_initialized():
    singleton = LazySingleton(object)
    instance = singleton.get()

    class ExplodingLock:
        def __enter__(self):
            raise AssertionError("lock taken on the fast path")

        def __exit__(self, *exc):
            return False

    singleton._lock = ExplodingLock()
    assert singleton.get() is instance


def test_failed_construction_propagates_and_retries():
    attempts = {"count": 0}

    def factory():
        attempts["count"] += 1
        if attempts["count"] == 1:
            raise OSError("cannot open sink")
        return object()

    singleton = LazySingleton(factory)

    with pytest.raises(OSError, match="cannot open sink"):
        singleton.get()
    assert singleton.initialized is False

    instance = singleton.get()
    assert instance is not None
    assert singleton.get() is instance
    assert attempts["count"] == 2


def test_failed_construction_releases_lock_for_waiting_threads():
    attempts = {"count": 0}
    attempts_lock = threading.Lock()

    def factory():
        with attempts_lock:
            attempts["count"] += 1
            attempt = attempts["count"]
        time.sleep(0.02)
        if attempt == 1:
            raise RuntimeError("first attempt fails")
        return object()

    singleton = LazySingleton(factory)
    callers = 10
    barrier = threading.Barrier(callers)
    results: list[object] = []
    errors: list[BaseException] = []
    record_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        try:
            value = singleton.get()
        except RuntimeError as e:
            with record_lock:
                errors.append(e)
        else:
            with record_lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(callers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert not any(thread.is_alive() for thread in threads)
    assert len(errors) == 1
    assert len(results) == callers - 1
    assert all(result is results[0] for result in results)
    assert attempts["count"] == 2


def test_factory_returning_none_is_a_failure():
    singleton = LazySingleton(lambda: None, name="empty")

    with pytest.raises(SingletonConstructionError, match="empty"):
        singleton.get()
    assert singleton.initialized is False


def test_singleton_name_defaults_to_factory_name():
    def build_thing():
        return object()

    assert LazySingleton(build_thing).name == "build_thing"
    assert LazySingleton(build_thing, name="thing").name == "thing"
