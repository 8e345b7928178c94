import click
import uvicorn

from ecom.infrastructure.bootstrap import engine, load_settings, unit_of_work_factory
from ecom.infrastructure.cli.db_commands import db_init, db_seed
from ecom.infrastructure.cli.order_commands import order_place, order_show
from ecom.infrastructure.cli.product_commands import product_add, product_list
from ecom.infrastructure.http.app import create_app
from ecom.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """ecom: products and order placement"""
    settings = load_settings()
    try:
        configure_logging(settings.log_level)
    except ValueError as exc:
        raise click.ClickException(f"Invalid ECOM_LOG_LEVEL {settings.log_level!r}: {exc}") from exc
    ctx.obj = settings


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from ECOM_HOST).")
@click.option("--port", default=None, type=int, help="Bind port (default from ECOM_PORT).")
@click.pass_obj
def serve(settings, host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    app = create_app(unit_of_work_factory(engine(settings)), settings)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


# Register subcommands
db.add_command(db_init)
db.add_command(db_seed)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
