"""Catalog of lessons runnable from the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from designkit.errors import UnknownKindError
from designkit.patterns import abstract_factory, builder, factory, singleton
from designkit.solid import (
    dependency_inversion,
    interface_segregation,
    liskov,
    open_closed,
    single_responsibility,
)

SOLID = "solid"
PATTERN = "pattern"


@dataclass(frozen=True)
class Lesson:
    slug: str
    title: str
    category: str
    summary: str
    demo: Callable[[], None]


LESSONS: dict[str, Lesson] = {
    lesson.slug: lesson
    for lesson in (
        Lesson(
            slug="srp",
            title="Single Responsibility Principle",
            category=SOLID,
            summary=(
                "A class should have one reason to change. Book stays a plain "
                "record while CheckoutService owns checkout rules; order "
                "processing, invoicing and notification live in separate classes "
                "so a change to one never ripples into the others."
            ),
            demo=single_responsibility.demo,
        ),
        Lesson(
            slug="ocp",
            title="Open/Closed Principle",
            category=SOLID,
            summary=(
                "Open for extension, closed for modification. New book formats "
                "and discounts arrive as new classes; BookManager and the order "
                "processor never change. The cost is one more type per variant."
            ),
            demo=open_closed.demo,
        ),
        Lesson(
            slug="lsp",
            title="Liskov Substitution Principle",
            category=SOLID,
            summary=(
                "Subtypes must be usable wherever their base type is expected. "
                "An audiobook that refuses display_content breaks every caller; "
                "splitting readable and playable capabilities keeps each "
                "implementation honest."
            ),
            demo=liskov.demo,
        ),
        Lesson(
            slug="isp",
            title="Interface Segregation Principle",
            category=SOLID,
            summary=(
                "Clients should not depend on methods they do not use. Librarians "
                "manage inventory, members borrow; a status page tracks orders "
                "without pretending it can place them."
            ),
            demo=interface_segregation.demo,
        ),
        Lesson(
            slug="dip",
            title="Dependency Inversion Principle",
            category=SOLID,
            summary=(
                "High-level policy depends on abstractions. Library takes any "
                "BookRepository and checkout takes any Discount and Notifier, so "
                "storage and delivery can be swapped, including in tests."
            ),
            demo=dependency_inversion.demo,
        ),
        Lesson(
            slug="factory",
            title="Factory",
            category=PATTERN,
            summary=(
                "Callers ask for a kind, not a class. A registry keyed by an enum "
                "replaces the string switch, so a kind without a constructor is "
                "caught by a test instead of a runtime default case."
            ),
            demo=factory.demo,
        ),
        Lesson(
            slug="abstract-factory",
            title="Abstract Factory",
            category=PATTERN,
            summary=(
                "A kit builds a family of parts that must agree with each other. "
                "Kits implement a capability Protocol independently and are "
                "picked by configuration, not by subclassing."
            ),
            demo=abstract_factory.demo,
        ),
        Lesson(
            slug="singleton",
            title="Singleton",
            category=PATTERN,
            summary=(
                "One shared instance per process, built on first use. Unguarded "
                "check-then-create races; double-checked locking constructs once "
                "and leaves later callers lock-free. A failed construction is "
                "retried on the next call."
            ),
            demo=singleton.demo,
        ),
        Lesson(
            slug="builder",
            title="Builder",
            category=PATTERN,
            summary=(
                "Assemble a complex object step by step through a fluent "
                "interface, validate once in build(), and get back a product "
                "that shares nothing with the builder."
            ),
            demo=builder.demo,
        ),
    )
}


def get_lesson(slug: str) -> Lesson:
    try:
        return LESSONS[slug.lower()]
    except KeyError:
        raise UnknownKindError(slug, list(LESSONS)) from None


def iter_lessons(category: str | None = None) -> Iterator[Lesson]:
    for lesson in LESSONS.values():
        if category is None or lesson.category == category:
            yield lesson
