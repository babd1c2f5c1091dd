"""Builder pattern.

``OrderBuilder`` collects an order one step at a time through a fluent
interface, mutating a private ``OrderDraft``. ``build()`` validates the draft
and hands back a fresh ``Order`` that shares nothing with the builder, so the
builder can keep going or be reset for the next order.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from designkit.errors import BuildError
from designkit.solid.models import Customer, Order, OrderLine

logger = logging.getLogger(__name__)

_order_ids = itertools.count(5001)


@dataclass
class OrderDraft:
    """Mutable work-in-progress order."""
    customer: Customer | None = None
    lines: list[OrderLine] = field(default_factory=list)
    shipping_address: str = ""
    notes: list[str] = field(default_factory=list)


class OrderBuilder:
    def __init__(self):
        self._draft = OrderDraft()

    def for_customer(self, name: str, email: str = "", phone: str = "") -> OrderBuilder:
        self._draft.customer = Customer(name=name, email=email, phone=phone)
        return self

    def add_line(self, sku: str, quantity: int, unit_price: Decimal | str | float) -> OrderBuilder:
        # str() keeps 0.1 as 0.1 rather than its binary expansion
        try:
            price = Decimal(str(unit_price))
        except InvalidOperation:
            raise BuildError(f"unit price for {sku} is not a number: {unit_price!r}") from None
        if not price.is_finite():
            raise BuildError(f"unit price for {sku} must be finite, got {unit_price!r}")
        self._draft.lines.append(OrderLine(sku, quantity, price))
        return self

    def ship_to(self, address: str) -> OrderBuilder:
        self._draft.shipping_address = address
        return self

    def with_note(self, note: str) -> OrderBuilder:
        self._draft.notes.append(note)
        return self

    def reset(self) -> OrderBuilder:
        self._draft = OrderDraft()
        return self

    def build(self) -> Order:
        draft = self._draft
        if draft.customer is None:
            raise BuildError("order needs a customer")
        if not draft.lines:
            raise BuildError("order needs at least one line")
        for line in draft.lines:
            if line.quantity <= 0:
                raise BuildError(f"quantity for {line.sku} must be positive, got {line.quantity}")
            if line.unit_price < 0:
                raise BuildError(f"unit price for {line.sku} cannot be negative")

        order = Order(
            order_id=next(_order_ids),
            customer=Customer(draft.customer.name, draft.customer.email, draft.customer.phone),
            lines=list(draft.lines),
            shipping_address=draft.shipping_address,
            note="; ".join(draft.notes),
        )
        logger.debug("Built order %s with %d line(s)", order.order_id, len(order.lines))
        return order


def demo() -> None:
    print("-- before: a constructor call with every field spelled out")
    order = Order(
        5000,
        Customer("Heidi", "heidi@example.com", ""),
        [OrderLine("PEN-1", 3, Decimal("1.20")), OrderLine("PAD-2", 1, Decimal("4.00"))],
        "1 Main St",
        "gift wrap",
    )
    print(f"Order {order.order_id}: {len(order.lines)} line(s), total {order.total_amount:.2f}")

    print("-- after: fluent builder")
    builder = OrderBuilder()
    order = (
        builder.for_customer("Heidi", email="heidi@example.com")
        .add_line("PEN-1", 3, "1.20")
        .add_line("PAD-2", 1, "4.00")
        .ship_to("1 Main St")
        .with_note("gift wrap")
        .build()
    )
    print(f"Order {order.order_id}: {len(order.lines)} line(s), total {order.total_amount:.2f}")

    try:
        builder.reset().for_customer("Ivan").build()
    except BuildError as e:
        print(f"Build refused: {e}")
