"""Application service: Place Order use case.

Turns a CreateOrderRequest into a committed order or a definitive failure.
Everything between the order insert and the commit runs inside one unit
of work, so a failure on any line item leaves no order, no order items and
no stock change behind.
"""

from __future__ import annotations

from time import monotonic

from loguru import logger

from ecom.application.dto import CreateOrderRequest, OrderDTO, order_to_dto
from ecom.domain.exceptions import (
    DomainException,
    ErrorKind,
    InsufficientStockError,
    PlacementCancelledError,
    ProductNotFoundError,
    ValidationError,
)
from ecom.domain.model.order import Order
from ecom.domain.model.value_objects import Quantity
from ecom.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory


class PlaceOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, request: CreateOrderRequest, deadline: float | None = None) -> OrderDTO:
        """Place an order.

        Steps:
        1. Validate the request (no store access on failure).
        2. Insert the order.
        3. For each line, in request order: look up the product, check
           stock, insert the order item at the current price, decrement
           stock.
        4. Commit.

        Args:
            request: The customer and requested lines.
            deadline: Optional ``time.monotonic()`` instant after which the
                placement is abandoned with PlacementCancelledError.
        """
        lines = self._validate(request)
        logger.debug(
            "Placing order for customer {} with {} line(s)",
            request.customer_id,
            len(lines),
        )

        try:
            with self._uow_factory() as uow:
                order = self._place(uow, request.customer_id, lines, deadline)
                _check_deadline(deadline)
                uow.commit()
        except DomainException as exc:
            if exc.kind is ErrorKind.PERSISTENCE:
                logger.error("Order placement failed for customer {}: {}", request.customer_id, exc)
            else:
                logger.warning(
                    "Order placement rejected for customer {} ({}): {}",
                    request.customer_id,
                    exc.kind.value,
                    exc,
                )
            raise

        logger.info("Order #{} placed for customer {}", order.id, order.customer_id)
        return order_to_dto(order)

    # --- Steps ----------------------------------------------------------------

    @staticmethod
    def _validate(request: CreateOrderRequest) -> list[tuple[int, Quantity]]:
        if not request.customer_id:
            raise ValidationError("Customer ID is required")
        if not request.items:
            raise ValidationError("At least one item is required")
        return [(spec.product_id, Quantity(spec.quantity)) for spec in request.items]

    @staticmethod
    def _place(
        uow: UnitOfWork,
        customer_id: int,
        lines: list[tuple[int, Quantity]],
        deadline: float | None,
    ) -> Order:
        _check_deadline(deadline)
        order = uow.orders.create_order(customer_id)

        for product_id, quantity in lines:
            _check_deadline(deadline)
            product = uow.products.find_product(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            if not product.has_stock_for(quantity.value):
                raise InsufficientStockError(product_id, quantity.value, product.quantity)

            item = uow.orders.create_order_item(
                order_id=order.id,
                product_id=product.id,
                quantity=quantity.value,
                price_in_cents=product.price_in_cents,  # <-- price snapshot
            )
            uow.products.decrement_quantity(product.id, quantity.value)
            order.items.append(item)

        return order


def _check_deadline(deadline: float | None) -> None:
    if deadline is not None and monotonic() >= deadline:
        raise PlacementCancelledError("Order placement cancelled: deadline exceeded")
