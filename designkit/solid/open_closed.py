"""Open/Closed Principle.

Open for extension, closed for modification. Adding a new book format or a
new discount should mean adding a class, not editing an ``if`` chain that
every other format already depends on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal

from designkit.config import settings
from designkit.solid.models import Book, Customer, Order, OrderLine, OrderStatus

CENT = Decimal("0.01")


# --- Before -----------------------------------------------------------------

class SwitchingBookManager:
    """Every new book type means editing this method."""

    def process_book(self, book: Book, book_type: str) -> str:
        if book_type == "EBook":
            message = "Processing eBook..."
        elif book_type == "AudioBook":
            message = "Processing audiobook..."
        else:
            message = f"Don't know how to process {book_type}"
        print(message)
        return message


# --- After ------------------------------------------------------------------

class BookProcessor(ABC):
    """Processing step for one kind of book."""

    @abstractmethod
    def process(self, book: Book) -> str:
        ...


class EBookProcessor(BookProcessor):
    def process(self, book: Book) -> str:
        return f"Processing eBook {book.title}..."


class AudioBookProcessor(BookProcessor):
    def process(self, book: Book) -> str:
        return f"Processing audiobook {book.title}..."


class PrintedBookProcessor(BookProcessor):
    def process(self, book: Book) -> str:
        return f"Processing printed book {book.title}..."


class BookManager:
    """Works with any BookProcessor, including ones written later."""

    def process_book(self, book: Book, processor: BookProcessor) -> str:
        message = processor.process(book)
        print(message)
        return message


class Discount(ABC):
    @abstractmethod
    def apply_discount(self, order_total: Decimal) -> Decimal:
        ...


class NoDiscount(Discount):
    def apply_discount(self, order_total: Decimal) -> Decimal:
        return order_total


class SeasonalDiscount(Discount):
    """Percentage off the whole order (10% unless configured otherwise)."""

    def __init__(self, rate: float | None = None):
        if rate is None:
            rate = settings.seasonal_discount_rate
        if not 0 <= rate <= 1:
            raise ValueError(f"discount rate must be between 0 and 1, got {rate}")
        self.rate = Decimal(str(rate))

    def apply_discount(self, order_total: Decimal) -> Decimal:
        return (order_total * (1 - self.rate)).quantize(CENT, rounding=ROUND_HALF_UP)


class ClearanceDiscount(Discount):
    """Fixed amount off; the total never drops below zero."""

    def __init__(self, amount: Decimal):
        amount = Decimal(amount)
        if amount < 0:
            raise ValueError(f"clearance amount cannot be negative, got {amount}")
        self.amount = amount

    def apply_discount(self, order_total: Decimal) -> Decimal:
        return max(order_total - self.amount, Decimal("0"))


class DiscountedOrderProcessor:
    """Applies whatever Discount it was given."""

    def __init__(self, discount: Discount):
        self._discount = discount

    def process_order(self, order: Order) -> Decimal:
        total = self._discount.apply_discount(order.total_amount)
        order.status = OrderStatus.PROCESSED
        print(f"Order {order.order_id} total after {type(self._discount).__name__}: {total:.2f}")
        return total


def demo() -> None:
    book = Book("Neuromancer", "William Gibson")

    print("-- before: string switch")
    manager = SwitchingBookManager()
    manager.process_book(book, "EBook")
    manager.process_book(book, "AudioBook")
    manager.process_book(book, "PrintedBook")

    print("-- after: one processor per type, manager unchanged")
    manager = BookManager()
    for processor in (EBookProcessor(), AudioBookProcessor(), PrintedBookProcessor()):
        manager.process_book(book, processor)

    print("-- discounts plug into the same order processor")
    customer = Customer("Bob")
    for discount in (NoDiscount(), SeasonalDiscount(), ClearanceDiscount(Decimal("5"))):
        order = Order(2001, customer, [OrderLine("SKU-7", 4, Decimal("25.00"))])
        DiscountedOrderProcessor(discount).process_order(order)
