"""Dependency Inversion Principle.

High-level policy (a library adding books, a checkout pricing and notifying)
depends on abstractions. The concrete storage or delivery channel is handed
in from outside, so it can be swapped without touching the policy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from designkit.solid.models import Book, Customer, Order, OrderLine, OrderStatus
from designkit.solid.open_closed import Discount, NoDiscount, SeasonalDiscount


class BookDatabase:
    """Pretend database; prints instead of persisting anywhere real."""

    def __init__(self):
        self._rows: list[Book] = []

    def save_book(self, book: Book) -> None:
        print(f"Saving {book.title} to database...")
        self._rows.append(book)

    def save(self, book: Book) -> None:
        self.save_book(book)

    def all(self) -> list[Book]:
        return list(self._rows)


# --- Before -----------------------------------------------------------------

class HardwiredLibrary:
    """Builds its own BookDatabase; tests cannot swap it out."""

    def __init__(self):
        self._book_database = BookDatabase()

    def add_book(self, book: Book) -> None:
        self._book_database.save_book(book)


# --- After ------------------------------------------------------------------

class BookRepository(ABC):
    @abstractmethod
    def save(self, book: Book) -> None:
        ...

    @abstractmethod
    def all(self) -> list[Book]:
        ...


BookRepository.register(BookDatabase)


class InMemoryBookRepository(BookRepository):
    def __init__(self):
        self._books: dict[str, Book] = {}

    def save(self, book: Book) -> None:
        self._books[book.title] = book

    def all(self) -> list[Book]:
        return list(self._books.values())


class Library:
    def __init__(self, book_repository: BookRepository):
        self._books = book_repository

    def add_book(self, book: Book) -> None:
        self._books.save(book)

    def books_by(self, author: str) -> list[Book]:
        return [book for book in self._books.all() if book.author == author]


class Notifier(ABC):
    @abstractmethod
    def send_notification(self, customer: Customer, message: str) -> None:
        ...


class ConsoleNotifier(Notifier):
    def send_notification(self, customer: Customer, message: str) -> None:
        print(f"To {customer.name}: {message}")


class RecordingNotifier(Notifier):
    """Keeps messages instead of sending them."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    def send_notification(self, customer: Customer, message: str) -> None:
        self.sent.append((customer.name, message))


class CheckoutOrderProcessor:
    def __init__(self, discount: Discount, notifier: Notifier):
        self._discount = discount
        self._notifier = notifier

    def process_order(self, order: Order) -> Decimal:
        total = self._discount.apply_discount(order.total_amount)
        order.status = OrderStatus.PROCESSED
        self._notifier.send_notification(
            order.customer, f"Your order has been processed. Total: {total:.2f}"
        )
        return total


def demo() -> None:
    book = Book("Snow Crash", "Neal Stephenson")

    print("-- before: the library news up its own database")
    HardwiredLibrary().add_book(book)

    print("-- after: the repository is injected")
    for repository in (BookDatabase(), InMemoryBookRepository()):
        library = Library(repository)
        library.add_book(book)
        found = library.books_by("Neal Stephenson")
        print(f"{type(repository).__name__} holds {len(found)} book(s) by Neal Stephenson")

    print("-- checkout depends on Discount and Notifier abstractions")
    customer = Customer("Frank")
    for discount in (NoDiscount(), SeasonalDiscount()):
        order = Order(3001, customer, [OrderLine("SKU-3", 1, Decimal("80.00"))])
        CheckoutOrderProcessor(discount, ConsoleNotifier()).process_order(order)
