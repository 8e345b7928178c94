"""CLI commands for orders."""

from __future__ import annotations

import time

import click

from ecom.application.dto import CreateOrderRequest, OrderDTO, OrderItemSpec
from ecom.application.place_order import PlaceOrderHandler
from ecom.application.show_order import ShowOrderHandler
from ecom.domain.exceptions import DomainException
from ecom.infrastructure.bootstrap import engine, unit_of_work_factory


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product ID : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderItemSpec(product_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*42}")
    for item in dto.items:
        click.echo(
            f"  {'#' + str(item.product_id):<10} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*42}")
    click.echo(f"  {'Order Total':<17} {dto.total:>25}")


@click.command("place")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.option("--timeout", type=float, default=None, help="Give up after this many seconds.")
@click.pass_obj
def order_place(settings, customer_id: int, items: str, timeout: float | None) -> None:
    """Place an order, decrementing stock atomically."""
    request = CreateOrderRequest(customer_id=customer_id, items=_parse_items(items))
    handler = PlaceOrderHandler(unit_of_work_factory(engine(settings)))
    deadline = time.monotonic() + timeout if timeout is not None else None

    try:
        dto = handler.handle(request, deadline=deadline)
    except DomainException as exc:
        raise click.ClickException(f"[{exc.kind.value}] {exc}")

    click.echo(f"Order #{dto.id} placed.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work_factory(engine(settings)))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
