"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP boundaries and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ecom.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class CreateOrderRequest:
    """Input: who is ordering and what, in the order the caller listed it."""

    customer_id: int
    items: list[OrderItemSpec] = field(default_factory=list)


@dataclass(frozen=True)
class OrderItemDTO:

    id: int
    product_id: int
    quantity: int
    price_in_cents: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order."""

    id: int
    customer_id: int
    created_at: str
    items: list[OrderItemDTO]
    total: str


@dataclass(frozen=True)
class ProductDTO:

    id: int
    name: str
    price_in_cents: int
    price: str
    quantity: int
    created_at: str


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        created_at=order.created_at.isoformat(),
        items=[
            OrderItemDTO(
                id=item.id,
                product_id=item.product_id,
                quantity=item.quantity,
                price_in_cents=item.price_in_cents,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
    )
