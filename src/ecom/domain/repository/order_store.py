"""Abstract store for Order and OrderItem records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecom.domain.model.order import Order, OrderItem


class OrderStore(ABC):

    @abstractmethod
    def create_order(self, customer_id: int) -> Order:
        """Insert an order and return it with store-assigned ID and timestamp."""

    @abstractmethod
    def create_order_item(
        self,
        order_id: int,
        product_id: int,
        quantity: int,
        price_in_cents: int,
    ) -> OrderItem:
        """Insert one line item of an existing order."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items, or None if not found."""
