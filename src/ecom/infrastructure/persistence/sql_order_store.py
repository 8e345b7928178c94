"""SQLAlchemy implementation of OrderStore."""

from __future__ import annotations

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection, Row

from ecom.domain.model.order import Order, OrderItem
from ecom.domain.repository.order_store import OrderStore
from ecom.infrastructure.persistence.errors import translate_errors
from ecom.infrastructure.persistence.tables import as_utc, order_items, orders, utcnow


class SqlOrderStore(OrderStore):

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    # --- OrderStore interface -------------------------------------------------

    def create_order(self, customer_id: int) -> Order:
        created_at = utcnow()
        with translate_errors("create order"):
            result = self._conn.execute(
                insert(orders).values(customer_id=customer_id, created_at=created_at)
            )
        return Order(
            id=result.inserted_primary_key[0],
            customer_id=customer_id,
            created_at=created_at,
        )

    def create_order_item(
        self,
        order_id: int,
        product_id: int,
        quantity: int,
        price_in_cents: int,
    ) -> OrderItem:
        with translate_errors("create order item"):
            result = self._conn.execute(
                insert(order_items).values(
                    order_id=order_id,
                    product_id=product_id,
                    quantity=quantity,
                    price_in_cents=price_in_cents,
                )
            )
        return OrderItem(
            id=result.inserted_primary_key[0],
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            price_in_cents=price_in_cents,
        )

    def get_by_id(self, order_id: int) -> Order | None:
        with translate_errors("load order"):
            row = self._conn.execute(
                select(orders).where(orders.c.id == order_id)
            ).first()
            if row is None:
                return None
            item_rows = self._conn.execute(
                select(order_items)
                .where(order_items.c.order_id == order_id)
                .order_by(order_items.c.id)
            ).all()
        return Order(
            id=row.id,
            customer_id=row.customer_id,
            created_at=as_utc(row.created_at),
            items=[self._item_to_domain(r) for r in item_rows],
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _item_to_domain(row: Row) -> OrderItem:
        return OrderItem(
            id=row.id,
            order_id=row.order_id,
            product_id=row.product_id,
            quantity=row.quantity,
            price_in_cents=row.price_in_cents,
        )
