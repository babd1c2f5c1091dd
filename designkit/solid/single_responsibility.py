"""Single Responsibility Principle.

A class should have one reason to change. The "before" renditions fold
unrelated jobs into one class; the "after" renditions split them so that,
say, a change to invoice layout never touches checkout or notification code.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from designkit.solid.models import Book, Customer, Invoice, Order, OrderLine, OrderStatus

logger = logging.getLogger(__name__)


# --- Before -----------------------------------------------------------------

class CheckoutBook:
    """Book that also knows how to check itself out."""

    def __init__(self, title: str, author: str):
        self.title = title
        self.author = author

    def check_out(self, member_name: str) -> None:
        print(f"{self.title} checked out to {member_name}")


class MonolithicOrderService:
    """Processes, invoices and notifies, all in one place."""

    def handle(self, order: Order) -> Invoice:
        order.status = OrderStatus.PROCESSED
        print(f"Processed order {order.order_id}")
        invoice = Invoice(order.order_id, order.customer.name, order.total_amount)
        print(f"Invoice for order {order.order_id}: {invoice.amount:.2f}")
        print(f"Notified {order.customer.name} about order {order.order_id}")
        return invoice


# --- After ------------------------------------------------------------------

class CheckoutService:
    """Owns the checkout rules; Book stays a plain record."""

    def check_out(self, book: Book, member_name: str) -> bool:
        if book.is_checked_out:
            logger.debug("Refusing checkout of %r: already checked out", book.title)
            return False
        book.is_checked_out = True
        print(f"{book.title} checked out to {member_name}")
        return True

    def check_in(self, book: Book) -> bool:
        if not book.is_checked_out:
            return False
        book.is_checked_out = False
        print(f"{book.title} returned")
        return True


class OrderProcessor:
    def process_order(self, order: Order) -> None:
        order.status = OrderStatus.PROCESSED
        print(f"Processed order {order.order_id}")


class InvoiceGenerator:
    def generate_invoice(self, order: Order) -> Invoice:
        return Invoice(
            order_id=order.order_id,
            customer_name=order.customer.name,
            amount=order.total_amount,
        )


class NotificationService:
    def send_order_notification(self, customer: Customer, order: Order) -> str:
        message = f"Dear {customer.name}, order {order.order_id} is {order.status.value}."
        print(message)
        return message


def demo() -> None:
    print("-- before: the book checks itself out")
    CheckoutBook("Dune", "Frank Herbert").check_out("Alice")

    print("-- after: CheckoutService owns the rule")
    book = Book("Dune", "Frank Herbert")
    service = CheckoutService()
    service.check_out(book, "Alice")
    if not service.check_out(book, "Bob"):
        print(f"{book.title} is already checked out")

    order = Order(1001, Customer("Alice", email="alice@example.com"),
                  [OrderLine("BK-1", 2, Decimal("12.50"))])
    print("-- before: one service does everything")
    MonolithicOrderService().handle(order)

    print("-- after: one class per job")
    order = Order(1002, order.customer, list(order.lines))
    OrderProcessor().process_order(order)
    invoice = InvoiceGenerator().generate_invoice(order)
    print(f"Invoice for order {invoice.order_id}: {invoice.amount:.2f}")
    NotificationService().send_order_notification(order.customer, order)
