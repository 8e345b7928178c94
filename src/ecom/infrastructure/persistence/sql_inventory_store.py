"""SQLAlchemy implementation of InventoryStore.

Bound to the connection of the enclosing unit of work, so every statement
runs inside that unit's transaction.
"""

from __future__ import annotations

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Connection, Row

from ecom.domain.exceptions import InsufficientStockError, ProductNotFoundError, ValidationError
from ecom.domain.model.product import Product
from ecom.domain.repository.inventory_store import InventoryStore
from ecom.infrastructure.persistence.errors import translate_errors
from ecom.infrastructure.persistence.tables import as_utc, products, utcnow


class SqlInventoryStore(InventoryStore):

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    # --- InventoryStore interface ---------------------------------------------

    def find_product(self, product_id: int) -> Product | None:
        with translate_errors("look up product"):
            row = self._conn.execute(
                select(products).where(products.c.id == product_id)
            ).first()
        return self._to_domain(row) if row is not None else None

    def decrement_quantity(self, product_id: int, amount: int) -> None:
        """Conditional decrement: the stock check and the write are one statement.

        Zero rows updated means either the product vanished or another
        unit of work got to the stock first.
        """
        if amount <= 0:
            raise ValidationError("Decrement amount must be positive")

        with translate_errors("update product stock"):
            result = self._conn.execute(
                update(products)
                .where(products.c.id == product_id, products.c.quantity >= amount)
                .values(quantity=products.c.quantity - amount)
            )
            if result.rowcount == 1:
                return
            remaining = self._conn.execute(
                select(products.c.quantity).where(products.c.id == product_id)
            ).scalar_one_or_none()

        if remaining is None:
            raise ProductNotFoundError(product_id)
        raise InsufficientStockError(product_id, amount, remaining)

    def list_all(self) -> list[Product]:
        with translate_errors("list products"):
            rows = self._conn.execute(select(products).order_by(products.c.id)).all()
        return [self._to_domain(row) for row in rows]

    def add(self, name: str, price_in_cents: int, quantity: int) -> Product:
        created_at = utcnow()
        with translate_errors("insert product"):
            result = self._conn.execute(
                insert(products).values(
                    name=name,
                    price_in_cents=price_in_cents,
                    quantity=quantity,
                    created_at=created_at,
                )
            )
        return Product(
            id=result.inserted_primary_key[0],
            name=name,
            price_in_cents=price_in_cents,
            quantity=quantity,
            created_at=created_at,
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: Row) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price_in_cents=row.price_in_cents,
            quantity=row.quantity,
            created_at=as_utc(row.created_at),
        )
