"""Table formatting for the console."""

from __future__ import annotations

import click

from shop.application.dto import CartDTO, OrderDTO, ProductDTO


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products available.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Price':>10}")
    click.echo("-" * 42)
    for p in products:
        click.echo(f"{p.id:<10} {p.name:<20} {p.price:>10}")
    click.echo("-" * 42)


def display_cart(cart: CartDTO) -> None:
    click.echo(f"  {'ID':<10} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*59}")
    for line in cart.lines:
        click.echo(
            f"  {line.product_id:<10} {line.product_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Cart Total':<38} {cart.total:>20}")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  (paid with {dto.payment_method})")
    click.echo(f"Placed: {dto.created_at}")
    click.echo()
    click.echo(f"  {'ID':<10} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*59}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<10} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Order Total':<38} {dto.total:>20}")
