"""Interface Segregation Principle.

Clients should not be forced to depend on methods they do not use. A
librarian forced to implement ``borrow_book`` ends up with a stub that
silently does nothing; a tracking dashboard forced to implement order
placement ends up with one that raises.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod

from designkit.errors import OrderNotFoundError
from designkit.solid.models import Customer, Order, OrderStatus


# --- Before -----------------------------------------------------------------

class LibraryUser(ABC):
    @abstractmethod
    def borrow_book(self) -> None:
        ...

    @abstractmethod
    def manage_inventory(self) -> None:
        ...


class StubbornLibrarian(LibraryUser):
    def borrow_book(self) -> None:
        # Librarians don't borrow books.
        pass

    def manage_inventory(self) -> None:
        print("Managing inventory...")


class OrderManagement(ABC):
    """One interface for placing, tracking and cancelling orders."""

    @abstractmethod
    def place_order(self, order: Order) -> int:
        ...

    @abstractmethod
    def track_order(self, order_id: int) -> OrderStatus:
        ...

    @abstractmethod
    def cancel_order(self, order_id: int) -> None:
        ...


class StatusDashboard(OrderManagement):
    """Only wants to show statuses, but must pretend it can do the rest."""

    def __init__(self, statuses: dict[int, OrderStatus]):
        self._statuses = statuses

    def place_order(self, order: Order) -> int:
        raise NotImplementedError("dashboards cannot place orders")

    def track_order(self, order_id: int) -> OrderStatus:
        return self._statuses.get(order_id, OrderStatus.PENDING)

    def cancel_order(self, order_id: int) -> None:
        raise NotImplementedError("dashboards cannot cancel orders")


# --- After ------------------------------------------------------------------

class Borrower(ABC):
    @abstractmethod
    def borrow_book(self) -> None:
        ...


class InventoryManager(ABC):
    @abstractmethod
    def manage_inventory(self) -> None:
        ...


class Librarian(InventoryManager):
    def manage_inventory(self) -> None:
        print("Managing inventory...")


class Member(Borrower):
    def __init__(self, name: str):
        self.name = name

    def borrow_book(self) -> None:
        print(f"{self.name} is borrowing a book...")


class OrderPlacementService(ABC):
    @abstractmethod
    def place_order(self, order: Order) -> int:
        ...


class OrderTrackingService(ABC):
    @abstractmethod
    def track_order(self, order_id: int) -> OrderStatus:
        ...


class OrderService(OrderPlacementService, OrderTrackingService):
    """In-memory store that both places and tracks orders."""

    def __init__(self):
        self._orders: dict[int, Order] = {}
        self._ids = itertools.count(1)

    def place_order(self, order: Order) -> int:
        if not order.order_id:
            order.order_id = next(self._ids)
        self._orders[order.order_id] = order
        print(f"Placed order {order.order_id} for {order.customer.name}")
        return order.order_id

    def track_order(self, order_id: int) -> OrderStatus:
        try:
            return self._orders[order_id].status
        except KeyError:
            raise OrderNotFoundError(f"no order with id {order_id}") from None


class OrderTracker(OrderTrackingService):
    """Read-only view for a status page; cannot place orders."""

    def __init__(self, source: OrderTrackingService):
        self._source = source

    def track_order(self, order_id: int) -> OrderStatus:
        return self._source.track_order(order_id)

    def describe(self, order_id: int) -> str:
        return f"Order {order_id}: {self.track_order(order_id).value}"


def demo() -> None:
    print("-- before: one fat interface")
    librarian = StubbornLibrarian()
    librarian.borrow_book()
    librarian.manage_inventory()
    print("StubbornLibrarian.borrow_book() did nothing at all")
    dashboard = StatusDashboard({7: OrderStatus.SHIPPED})
    print(f"Dashboard sees order 7 as {dashboard.track_order(7).value}")
    try:
        dashboard.place_order(Order(8, Customer("Eve")))
    except NotImplementedError as e:
        print(f"Dashboard: {e}")

    print("-- after: each role implements only what it uses")
    Librarian().manage_inventory()
    Member("Dave").borrow_book()

    service = OrderService()
    order_id = service.place_order(Order(0, Customer("Dave")))
    tracker = OrderTracker(service)
    print(tracker.describe(order_id))
    try:
        tracker.track_order(9999)
    except OrderNotFoundError as e:
        print(f"Tracking failed: {e}")
