"""Product record.

Products live independently of orders.  Within order placement the only
mutation is a stock decrement, and that happens in the store, not here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ecom.domain.model.value_objects import Money


@dataclass
class Product:

    id: int
    name: str
    price_in_cents: int
    quantity: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def price(self) -> Money:
        return Money(self.price_in_cents)

    def has_stock_for(self, quantity: int) -> bool:
        return self.quantity >= quantity
