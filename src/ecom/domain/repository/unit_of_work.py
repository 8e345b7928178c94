"""Abstract unit of work: all-or-nothing visibility for store operations.

Usage::

    with uow_factory() as uow:
        order = uow.orders.create_order(customer_id)
        uow.products.decrement_quantity(product_id, 2)
        uow.commit()

Leaving the ``with`` block without a successful ``commit()`` (normal
return, early return or exception) discards every write made through
``uow.products`` and ``uow.orders``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from ecom.domain.repository.inventory_store import InventoryStore
from ecom.domain.repository.order_store import OrderStore


class UnitOfWork(ABC):

    products: InventoryStore
    orders: OrderStore

    def __enter__(self) -> UnitOfWork:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def begin(self) -> None:
        """Acquire a connection and bind the stores to it."""

    @abstractmethod
    def commit(self) -> None:
        """Make all writes durable and visible at once.

        Raises PersistenceError if the commit fails; in that case none of
        the writes are visible.
        """

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted writes.  Safe to call at any time, repeatedly."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
