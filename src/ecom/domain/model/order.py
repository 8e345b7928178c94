"""Order and OrderItem records.

Both are created by the order store inside a unit of work, which assigns
identities and timestamps.  An order is immutable once committed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ecom.domain.model.value_objects import Money


@dataclass
class OrderItem:
    """Captures the price snapshot of a product at placement time.

    ``price_in_cents`` is copied from the product when its stock was
    confirmed, so later price changes never reach existing orders.
    """

    id: int
    order_id: int
    product_id: int
    quantity: int
    price_in_cents: int  # locked at placement time

    @property
    def unit_price(self) -> Money:
        return Money(self.price_in_cents)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Order:

    id: int
    customer_id: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    items: list[OrderItem] = field(default_factory=list)

    @property
    def total(self) -> Money:
        result = Money(0)
        for item in self.items:
            result = result + item.line_total
        return result
