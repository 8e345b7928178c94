"""CLI commands for products."""

from __future__ import annotations

import click

from ecom.application.add_product import AddProductHandler
from ecom.application.list_products import ListProductsHandler
from ecom.domain.exceptions import DomainException
from ecom.infrastructure.bootstrap import engine, unit_of_work_factory


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price-cents", required=True, type=click.IntRange(min=0), help="Price in cents (e.g. 1500).")
@click.option("--quantity", required=True, type=click.IntRange(min=0), help="Units in stock.")
@click.pass_obj
def product_add(settings, name: str, price_cents: int, quantity: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work_factory(engine(settings)))

    try:
        product = handler.handle(name=name, price_in_cents=price_cents, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price} ({product.quantity} in stock)")


@click.command("list")
@click.pass_obj
def product_list(settings) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(unit_of_work_factory(engine(settings)))

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 47)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.quantity:>8}")
