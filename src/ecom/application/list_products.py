"""Application service: List Products use case (query)."""

from __future__ import annotations

from ecom.application.dto import ProductDTO
from ecom.domain.repository.unit_of_work import UnitOfWorkFactory


class ListProductsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[ProductDTO]:
        with self._uow_factory() as uow:
            products = uow.products.list_all()
        return [
            ProductDTO(
                id=p.id,
                name=p.name,
                price_in_cents=p.price_in_cents,
                price=str(p.price),
                quantity=p.quantity,
                created_at=p.created_at.isoformat(),
            )
            for p in products
        ]
