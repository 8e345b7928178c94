"""Order placement against a real SQLite database, including concurrent callers."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import func, select

from ecom.application.dto import CreateOrderRequest, OrderItemSpec
from ecom.application.place_order import PlaceOrderHandler
from ecom.domain.exceptions import (
    InsufficientStockError,
    PersistenceError,
    ProductNotFoundError,
    ValidationError,
)
from ecom.infrastructure.persistence.tables import order_items, orders, products


def _dump(engine) -> dict:
    with engine.connect() as conn:
        return {
            "products": conn.execute(select(products).order_by(products.c.id)).all(),
            "orders": conn.execute(select(orders)).all(),
            "order_items": conn.execute(select(order_items)).all(),
        }


def _request(customer_id, *items):
    return CreateOrderRequest(customer_id, [OrderItemSpec(p, q) for p, q in items])


class TestPlaceOrderSql:

    def test_scenario_laptop(self, seeded, engine):
        dto = PlaceOrderHandler(seeded).handle(_request(1, (1, 2)))

        assert dto.customer_id == 1
        assert dto.id == 1
        with seeded() as uow:
            assert uow.products.find_product(1).quantity == 8
            saved = uow.orders.get_by_id(dto.id)
        assert [(i.product_id, i.quantity, i.price_in_cents) for i in saved.items] == [(1, 2, 99999)]

    def test_empty_items_writes_nothing(self, seeded, engine):
        before = _dump(engine)
        with pytest.raises(ValidationError):
            PlaceOrderHandler(seeded).handle(_request(1))
        assert _dump(engine) == before

    def test_unknown_product_full_rollback(self, seeded, engine):
        before = _dump(engine)
        with pytest.raises(ProductNotFoundError):
            PlaceOrderHandler(seeded).handle(_request(1, (1, 2), (2, 1), (999, 1)))
        assert _dump(engine) == before

    def test_second_line_exhausts_stock(self, uow_factory, engine):
        with uow_factory() as uow:
            uow.products.add("Widget", 100, 5)
            uow.commit()
        before = _dump(engine)

        with pytest.raises(InsufficientStockError):
            PlaceOrderHandler(uow_factory).handle(_request(1, (1, 3), (1, 3)))

        assert _dump(engine) == before
        with uow_factory() as uow:
            assert uow.products.find_product(1).quantity == 5

    @pytest.mark.parametrize(
        "request_",
        [
            _request(1, (1, 2), (2**63, 1)),
            _request(2**63, (1, 1)),
        ],
    )
    def test_out_of_range_ids_are_persistence_errors(self, seeded, engine, request_):
        before = _dump(engine)
        with pytest.raises(PersistenceError):
            PlaceOrderHandler(seeded).handle(request_)
        assert _dump(engine) == before


class TestConcurrentPlacement:

    def test_stock_never_goes_negative(self, uow_factory, engine):
        with uow_factory() as uow:
            uow.products.add("Limited", 1000, 10)
            uow.commit()
        handler = PlaceOrderHandler(uow_factory)

        def attempt(customer_id: int) -> bool:
            try:
                handler.handle(_request(customer_id, (1, 3)))
            except InsufficientStockError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(1, 17)))

        with uow_factory() as uow:
            remaining = uow.products.find_product(1).quantity
        with engine.connect() as conn:
            order_count = conn.execute(select(func.count()).select_from(orders)).scalar_one()
            sold = conn.execute(select(func.coalesce(func.sum(order_items.c.quantity), 0))).scalar_one()

        assert remaining >= 0
        assert sum(results) == 3
        assert order_count == 3
        assert sold == 9
        assert sold + remaining == 10
