"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Column ranges: ids are signed 64-bit, quantities signed 32-bit.
MIN_ID, MAX_ID = -(2**63), 2**63 - 1
MAX_QUANTITY = 2**31 - 1


class OrderItemBody(BaseModel):
    product_id: int = Field(ge=MIN_ID, le=MAX_ID)
    quantity: int = Field(le=MAX_QUANTITY)


class CreateOrderBody(BaseModel):
    # Missing fields fall through to domain validation.
    customer_id: int = Field(default=0, ge=MIN_ID, le=MAX_ID)
    items: list[OrderItemBody] = Field(default_factory=list)


class ProductResponse(BaseModel):
    id: int
    name: str
    price_in_cents: int
    quantity: int
    created_at: str


class OrderItemResponse(BaseModel):
    id: int
    product_id: int
    quantity: int
    price_in_cents: int


class OrderResponse(BaseModel):
    id: int
    customer_id: int
    created_at: str
    items: list[OrderItemResponse]


class ErrorResponse(BaseModel):
    detail: str
    kind: str
