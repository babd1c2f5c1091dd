"""Data shared by the SOLID lessons.

These are plain, per-call records. Nothing here is persisted or shared
between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class BookFormat(str, Enum):
    """Physical or digital form of a book."""
    PRINTED = "printed"
    EBOOK = "ebook"
    AUDIOBOOK = "audiobook"


@dataclass
class Book:
    """A library book."""
    title: str
    author: str
    format: BookFormat = BookFormat.PRINTED
    is_checked_out: bool = False


@dataclass
class Customer:
    """A shop customer and how to reach them."""
    name: str
    email: str = ""
    phone: str = ""


@dataclass(frozen=True)
class OrderLine:
    """One product line on an order."""
    sku: str
    quantity: int
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


class OrderStatus(str, Enum):
    """Lifecycle of an order."""
    PENDING = "pending"
    PROCESSED = "processed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass
class Order:
    """A placed order."""
    order_id: int
    customer: Customer
    lines: list[OrderLine] = field(default_factory=list)
    shipping_address: str = ""
    note: str = ""
    status: OrderStatus = OrderStatus.PENDING

    @property
    def total_amount(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0"))


@dataclass(frozen=True)
class Invoice:
    """Invoice issued for an order."""
    order_id: int
    customer_name: str
    amount: Decimal
