"""Abstract store for Product records and their stock.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (SQL, in-memory) live in the
infrastructure layer and must take part in the enclosing unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecom.domain.model.product import Product


class InventoryStore(ABC):

    @abstractmethod
    def find_product(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def decrement_quantity(self, product_id: int, amount: int) -> None:
        """Subtract *amount* from the product's stock.

        Must raise InsufficientStockError instead of letting the quantity
        go negative, even when another unit of work decremented it after
        this one read the product.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, ordered by ID."""

    @abstractmethod
    def add(self, name: str, price_in_cents: int, quantity: int) -> Product:
        """Insert a new product and return it with its assigned ID."""
