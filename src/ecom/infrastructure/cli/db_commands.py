"""CLI commands for schema and demo data."""

from __future__ import annotations

import click

from ecom.domain.exceptions import DomainException
from ecom.infrastructure.bootstrap import engine, seed_demo_products, unit_of_work_factory
from ecom.infrastructure.persistence.engine import init_schema


@click.command("init")
@click.pass_obj
def db_init(settings) -> None:
    """Create the database tables."""
    try:
        init_schema(engine(settings))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Database initialised.")


@click.command("seed")
@click.pass_obj
def db_seed(settings) -> None:
    """Create the tables and insert demo products."""
    bound_engine = engine(settings)
    try:
        init_schema(bound_engine)
        count = seed_demo_products(unit_of_work_factory(bound_engine))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if count:
        click.echo(f"Seeded {count} products.")
    else:
        click.echo("Products already present; nothing seeded.")
