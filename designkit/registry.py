"""Shared registry utilities: lazy singletons and kind-keyed factories."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Generic, TypeVar

from designkit.errors import DuplicateKindError, SingletonConstructionError, UnknownKindError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LazySingleton(Generic[T]):
    """Create a singleton lazily from a factory function.

    Safe to share between threads. Uses double-checked locking: once the
    instance is published, ``get()`` returns it without touching the lock.
    Only callers racing on the very first construction serialize on it.

    If the factory raises, the exception reaches the caller that triggered
    construction and the singleton stays empty, so the next ``get()`` tries
    again.
    """

    def __init__(self, factory: Callable[[], T], name: str | None = None):
        self._factory = factory
        self._name = name or getattr(factory, "__name__", "singleton")
        self._instance: T | None = None
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def initialized(self) -> bool:
        return self._instance is not None

    def get(self) -> T:
        instance = self._instance
        if instance is not None:
            return instance

        with self._lock:
            if self._instance is None:
                logger.debug("Constructing singleton %s", self._name)
                created = self._factory()
                if created is None:
                    raise SingletonConstructionError(
                        f"factory for singleton '{self._name}' returned None"
                    )
                self._instance = created
            return self._instance

    def reset(self) -> None:
        """Drop the instance (mainly for testing)."""
        with self._lock:
            self._instance = None


def _kind_key(kind: str | Enum) -> str:
    if isinstance(kind, Enum):
        kind = kind.value
    return str(kind).lower()


class FactoryRegistry(Generic[T]):
    """Map a kind to the constructor that builds it.

    Constructors are registered explicitly, either directly or as a class
    decorator::

        notifications = FactoryRegistry("notification")

        @notifications.register("email")
        class EmailNotification: ...

        notifications.create("email")

    Kinds may be given as strings or Enum members; Enum members are keyed by
    their value.
    """

    def __init__(self, name: str):
        self.name = name
        self._constructors: dict[str, Callable[..., T]] = {}

    def register(self, kind: str | Enum, constructor: Callable[..., T] | None = None):
        key = _kind_key(kind)

        def _register(ctor: Callable[..., T]) -> Callable[..., T]:
            if key in self._constructors:
                raise DuplicateKindError(
                    f"{self.name} kind '{key}' is already registered"
                )
            self._constructors[key] = ctor
            logger.debug("Registered %s kind %s -> %r", self.name, key, ctor)
            return ctor

        if constructor is not None:
            return _register(constructor)
        return _register

    def create(self, kind: str | Enum, *args, **kwargs) -> T:
        key = _kind_key(kind)
        try:
            constructor = self._constructors[key]
        except KeyError:
            raise UnknownKindError(key, list(self._constructors)) from None
        return constructor(*args, **kwargs)

    def kinds(self) -> list[str]:
        return list(self._constructors)

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, (str, Enum)):
            return False
        return _kind_key(kind) in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)
