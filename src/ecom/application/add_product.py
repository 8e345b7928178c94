"""Application service: Add Product use case."""

from __future__ import annotations

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.product import Product
from ecom.domain.repository.unit_of_work import UnitOfWorkFactory


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str, price_in_cents: int, quantity: int) -> Product:
        """Add a new product with its initial stock."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price_in_cents < 0:
            raise ValidationError("Product price cannot be negative")
        if quantity < 0:
            raise ValidationError("Product quantity cannot be negative")

        with self._uow_factory() as uow:
            product = uow.products.add(name.strip(), price_in_cents, quantity)
            uow.commit()
        return product
