"""Table definitions (SQLAlchemy Core).

Layout::

    products(id, name, price_in_cents, quantity, created_at)
    orders(id, customer_id, created_at)
    order_items(id, order_id, product_id, quantity, price_in_cents)
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
)

metadata = MetaData()

# BIGINT on PostgreSQL, plain INTEGER (rowid alias) on SQLite.
_Id = BigInteger().with_variant(Integer(), "sqlite")

products = Table(
    "products",
    metadata,
    Column("id", _Id, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("price_in_cents", Integer, nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    CheckConstraint("price_in_cents >= 0", name="ck_products_price_non_negative"),
    CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
)

orders = Table(
    "orders",
    metadata,
    Column("id", _Id, primary_key=True, autoincrement=True),
    Column("customer_id", _Id, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

order_items = Table(
    "order_items",
    metadata,
    Column("id", _Id, primary_key=True, autoincrement=True),
    Column("order_id", _Id, ForeignKey("orders.id"), nullable=False, index=True),
    Column("product_id", _Id, ForeignKey("products.id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("price_in_cents", Integer, nullable=False),
    CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
