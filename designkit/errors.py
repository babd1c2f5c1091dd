"""Exceptions raised across designkit."""

from __future__ import annotations


class DesignkitError(Exception):
    """Base class for designkit errors."""


class SingletonConstructionError(DesignkitError):
    """A lazy singleton factory did not produce an instance."""


class SinkConstructionError(SingletonConstructionError):
    """The shared log sink could not be opened."""


class UnknownKindError(DesignkitError, KeyError):
    """No constructor is registered for the requested kind."""

    def __init__(self, kind: str, known: list[str] | None = None):
        self.kind = kind
        self.known = sorted(known or [])
        super().__init__(kind)

    def __str__(self) -> str:
        if self.known:
            return f"unknown kind '{self.kind}' (known: {', '.join(self.known)})"
        return f"unknown kind '{self.kind}'"


class DuplicateKindError(DesignkitError):
    """A constructor is already registered under this kind."""


class BuildError(DesignkitError, ValueError):
    """A builder was asked to build an incomplete product."""


class OrderNotFoundError(DesignkitError, LookupError):
    """No order exists with the requested id."""
