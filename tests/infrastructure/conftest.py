"""Fixtures backed by a throwaway SQLite file per test."""

import pytest

from ecom.infrastructure.bootstrap import unit_of_work_factory
from ecom.infrastructure.persistence.engine import create_engine, init_schema


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'ecom.db'}"


@pytest.fixture
def engine(database_url):
    eng = create_engine(database_url)
    init_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def uow_factory(engine):
    return unit_of_work_factory(engine)


@pytest.fixture
def seeded(uow_factory):
    """Laptop (#1, 10 @ 99999) and Mouse (#2, 50 @ 2999)."""
    with uow_factory() as uow:
        uow.products.add("Laptop", 99999, 10)
        uow.products.add("Mouse", 2999, 50)
        uow.commit()
    return uow_factory
