"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQL stores but keep
everything in dicts.  A unit of work snapshots the shared state when it
begins and restores the snapshot on rollback, so tests can compare store
state before and after a failed placement.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ecom.domain.exceptions import (
    InsufficientStockError,
    PersistenceError,
    ProductNotFoundError,
)
from ecom.domain.model.order import Order, OrderItem
from ecom.domain.model.product import Product
from ecom.domain.repository.inventory_store import InventoryStore
from ecom.domain.repository.order_store import OrderStore
from ecom.domain.repository.unit_of_work import UnitOfWork


@dataclass
class FakeState:
    products: dict[int, Product] = field(default_factory=dict)
    orders: dict[int, Order] = field(default_factory=dict)
    items: dict[int, OrderItem] = field(default_factory=dict)
    next_order_id: int = 1
    next_item_id: int = 1
    next_product_id: int = 1


class FakeDatabase:
    """Shared state plus counters and failure switches."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self.state = FakeState()
        for p in products or []:
            self.state.products[p.id] = p
            self.state.next_product_id = max(self.state.next_product_id, p.id + 1)
        self.units_opened = 0
        self.writes = 0
        self.fail_commit = False
        self.fail_on_item_insert = False
        # product_id -> quantity find_product reports instead of the real one,
        # as if another buyer took stock after the lookup.
        self.stale_stock: dict[int, int] = {}

    def uow_factory(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(self)

    def snapshot(self) -> FakeState:
        return copy.deepcopy(self.state)


class FakeInventoryStore(InventoryStore):

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    def find_product(self, product_id: int) -> Product | None:
        product = self._db.state.products.get(product_id)
        if product is None:
            return None
        found = copy.copy(product)
        if product_id in self._db.stale_stock:
            found.quantity = self._db.stale_stock[product_id]
        return found

    def decrement_quantity(self, product_id: int, amount: int) -> None:
        product = self._db.state.products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if product.quantity < amount:
            raise InsufficientStockError(product_id, amount, product.quantity)
        self._db.writes += 1
        product.quantity -= amount

    def list_all(self) -> list[Product]:
        return [copy.copy(p) for _, p in sorted(self._db.state.products.items())]

    def add(self, name: str, price_in_cents: int, quantity: int) -> Product:
        state = self._db.state
        product = Product(
            id=state.next_product_id,
            name=name,
            price_in_cents=price_in_cents,
            quantity=quantity,
        )
        state.next_product_id += 1
        state.products[product.id] = product
        self._db.writes += 1
        return copy.copy(product)


class FakeOrderStore(OrderStore):

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    def create_order(self, customer_id: int) -> Order:
        state = self._db.state
        order = Order(
            id=state.next_order_id,
            customer_id=customer_id,
            created_at=datetime.now(timezone.utc),
        )
        state.next_order_id += 1
        state.orders[order.id] = order
        self._db.writes += 1
        return Order(id=order.id, customer_id=order.customer_id, created_at=order.created_at)

    def create_order_item(
        self,
        order_id: int,
        product_id: int,
        quantity: int,
        price_in_cents: int,
    ) -> OrderItem:
        if self._db.fail_on_item_insert:
            raise PersistenceError("Failed to create order item: OperationalError")
        state = self._db.state
        item = OrderItem(
            id=state.next_item_id,
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            price_in_cents=price_in_cents,
        )
        state.next_item_id += 1
        state.items[item.id] = item
        self._db.writes += 1
        return copy.copy(item)

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._db.state.orders.get(order_id)
        if order is None:
            return None
        items = [copy.copy(i) for _, i in sorted(self._db.state.items.items()) if i.order_id == order_id]
        return Order(id=order.id, customer_id=order.customer_id, created_at=order.created_at, items=items)


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db
        self._snapshot: FakeState | None = None
        self.committed = False

    def begin(self) -> None:
        self._db.units_opened += 1
        self._snapshot = self._db.snapshot()
        self.products = FakeInventoryStore(self._db)
        self.orders = FakeOrderStore(self._db)

    def commit(self) -> None:
        if self._db.fail_commit:
            raise PersistenceError("Failed to commit unit of work: OperationalError")
        self._snapshot = None
        self.committed = True

    def rollback(self) -> None:
        if self._snapshot is not None:
            self._db.state = self._snapshot
            self._snapshot = None
