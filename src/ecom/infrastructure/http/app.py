"""FastAPI application: health, product listing and order placement.

Domain errors are mapped to HTTP statuses by their ErrorKind.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import asdict

from fastapi import FastAPI, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from ecom.application.dto import CreateOrderRequest, OrderItemSpec
from ecom.application.list_products import ListProductsHandler
from ecom.application.place_order import PlaceOrderHandler
from ecom.application.show_order import ShowOrderHandler
from ecom.domain.exceptions import DomainException, ErrorKind
from ecom.domain.repository.unit_of_work import UnitOfWorkFactory
from ecom.infrastructure.config import Settings
from ecom.infrastructure.http.schemas import (
    MAX_ID,
    MIN_ID,
    CreateOrderBody,
    ErrorResponse,
    OrderResponse,
    ProductResponse,
)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INSUFFICIENT_STOCK: 409,
    ErrorKind.CANCELLED: 504,
    ErrorKind.PERSISTENCE: 500,
}

_ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in sorted(set(STATUS_BY_KIND.values()))
}


def create_app(uow_factory: UnitOfWorkFactory, settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    place_order = PlaceOrderHandler(uow_factory)
    list_products = ListProductsHandler(uow_factory)
    show_order = ShowOrderHandler(uow_factory)

    app = FastAPI(
        title="E-Commerce API",
        description="A simple e-commerce API for managing products and orders",
        version="1.0.0",
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        started = time.perf_counter()
        with logger.contextualize(request_id=request_id):
            response = await call_next(request)
            logger.info(
                "{} {} -> {} ({:.1f} ms) [{}]",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
                request_id,
            )
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
        status = STATUS_BY_KIND[exc.kind]
        # Persistence details stay in the log.
        detail = "Internal server error" if status == 500 else str(exc)
        return JSONResponse(
            status_code=status,
            content={"detail": detail, "kind": exc.kind.value},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=STATUS_BY_KIND[ErrorKind.VALIDATION],
            content={"detail": _describe(exc), "kind": ErrorKind.VALIDATION.value},
        )

    @app.get("/health", response_class=PlainTextResponse, tags=["Health"])
    def health() -> str:
        return "all good"

    @app.get("/products", response_model=list[ProductResponse], tags=["Products"])
    def get_products():
        """List all products with pricing and stock information."""
        return [asdict(p) for p in list_products.handle()]

    @app.post(
        "/orders",
        status_code=201,
        response_model=OrderResponse,
        responses=_ERROR_RESPONSES,
        tags=["Orders"],
    )
    def post_order(body: CreateOrderBody):
        """Place an order; stock checks and writes happen in one transaction."""
        request = CreateOrderRequest(
            customer_id=body.customer_id,
            items=[OrderItemSpec(i.product_id, i.quantity) for i in body.items],
        )
        deadline = time.monotonic() + settings.request_timeout
        return asdict(place_order.handle(request, deadline=deadline))

    @app.get(
        "/orders/{order_id}",
        response_model=OrderResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Orders"],
    )
    def get_order(order_id: int = Path(ge=MIN_ID, le=MAX_ID)):
        return asdict(show_order.handle(order_id))

    return app


def _describe(exc: RequestValidationError) -> str:
    """One line per bad field, e.g. ``items.0.quantity: Input should be ...``."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part not in ("body", "path"))
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "Invalid request: " + "; ".join(problems)
