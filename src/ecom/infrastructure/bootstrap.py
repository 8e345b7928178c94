"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import partial

from sqlalchemy.engine import Engine

from ecom.application.add_product import AddProductHandler
from ecom.domain.repository.unit_of_work import UnitOfWorkFactory
from ecom.infrastructure.config import Settings
from ecom.infrastructure.persistence.engine import create_engine
from ecom.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork

DEMO_PRODUCTS = [
    ("Laptop", 99999, 10),
    ("Mouse", 2999, 50),
    ("Keyboard", 7999, 25),
    ("Monitor", 24999, 8),
]


def load_settings() -> Settings:
    return Settings.from_env()


def engine(settings: Settings) -> Engine:
    return create_engine(settings.database_url, echo=settings.sql_echo)


def unit_of_work_factory(bound_engine: Engine) -> UnitOfWorkFactory:
    return partial(SqlUnitOfWork, bound_engine)


def seed_demo_products(uow_factory: UnitOfWorkFactory) -> int:
    """Insert the demo catalog unless products already exist."""
    with uow_factory() as uow:
        if uow.products.list_all():
            return 0
    handler = AddProductHandler(uow_factory)
    for name, price_in_cents, quantity in DEMO_PRODUCTS:
        handler.handle(name, price_in_cents, quantity)
    return len(DEMO_PRODUCTS)
