from __future__ import annotations

from pathlib import Path

import click

from shop.application.list_products import ListProductsHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import StoreSession, build_session
from shop.infrastructure.cli.menu import StoreMenu
from shop.infrastructure.cli.rendering import display_products
from shop.infrastructure.config import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, StoreConfig
from shop.infrastructure.logging_setup import configure_logging


@click.group(invoke_without_command=True)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_FILE,
    show_default=True,
    envvar="SHOP_LOG_FILE",
    help="Append-only checkout audit log.",
)
@click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    envvar="SHOP_CATALOG",
    help="JSON product catalog (defaults to the built-in one).",
)
@click.option("--max-cart-lines", type=click.IntRange(min=1), default=None,
              help="Maximum number of different products in the cart.")
@click.option("--max-orders", type=click.IntRange(min=1), default=None,
              help="Maximum number of orders kept this session.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log activity to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    log_file: Path,
    catalog_file: Path | None,
    max_cart_lines: int | None,
    max_orders: int | None,
    verbose: bool,
) -> None:
    """Online Store: browse products, fill a cart and check out."""
    config = StoreConfig(
        log_file=log_file,
        catalog_file=catalog_file,
        max_cart_lines=max_cart_lines,
        max_orders=max_orders,
        log_level="INFO" if verbose else DEFAULT_LOG_LEVEL,
    )
    configure_logging(config.log_level)

    try:
        ctx.obj = build_session(config)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command("run")
@click.pass_obj
def run(session: StoreSession) -> None:
    """Start the interactive store (the default)."""
    StoreMenu(session).run()


@cli.command("products")
@click.pass_obj
def products(session: StoreSession) -> None:
    """List the catalog and exit."""
    display_products(ListProductsHandler(session.catalog).handle())
