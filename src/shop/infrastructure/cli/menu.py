"""Interactive store menu.

All prompting and re-prompting happens here; the application handlers
only ever see validated input.
"""

from __future__ import annotations

import click

from shop.application.add_to_cart import AddToCartHandler
from shop.application.checkout import CheckoutHandler
from shop.application.dto import CheckoutResultDTO
from shop.application.list_orders import ListOrdersHandler
from shop.application.list_products import ListProductsHandler
from shop.application.show_cart import ShowCartHandler
from shop.application.update_cart import UpdateCartQuantityHandler
from shop.domain.exceptions import (
    CapacityExceededError,
    DomainException,
    EntityNotFoundError,
    PaymentError,
)
from shop.domain.model.payment import PaymentOption
from shop.infrastructure.bootstrap import StoreSession
from shop.infrastructure.cli.rendering import display_cart, display_order, display_products

MENU_ITEMS = (
    "View Products",
    "View Shopping Cart",
    "Update Cart Quantity",
    "View Orders",
    "Exit",
)


class StoreMenu:

    def __init__(self, session: StoreSession) -> None:
        self._list_products = ListProductsHandler(session.catalog)
        self._add_to_cart = AddToCartHandler(session.catalog, session.cart)
        self._show_cart = ShowCartHandler(session.cart)
        self._update_cart = UpdateCartQuantityHandler(session.cart)
        self._checkout = CheckoutHandler(session.checkout)
        self._list_orders = ListOrdersHandler(session.orders)

    def run(self) -> None:
        actions = {
            1: self.add_products,
            2: self.view_cart,
            3: self.update_cart,
            4: self.view_orders,
        }
        while True:
            click.echo("\n=== Online Store Menu ===")
            for number, label in enumerate(MENU_ITEMS, start=1):
                click.echo(f"{number}. {label}")

            choice = click.prompt(
                f"Enter your choice (1-{len(MENU_ITEMS)})",
                type=click.IntRange(1, len(MENU_ITEMS)),
            )
            if choice == len(MENU_ITEMS):
                click.echo("Thank you for shopping with us!")
                return
            actions[choice]()

    # --- Menu actions ---------------------------------------------------------

    def add_products(self) -> None:
        add_more = True
        while add_more:
            click.echo("\nAvailable Products:")
            display_products(self._list_products.handle())

            while True:
                product_id = click.prompt(
                    "Enter the ID of the product you want to add to the shopping cart"
                )
                try:
                    line = self._add_to_cart.handle(product_id)
                except EntityNotFoundError:
                    click.echo("Product ID not found. Please try again.")
                    continue
                except CapacityExceededError as exc:
                    click.echo(str(exc))
                    return
                break

            click.echo(f"Product added successfully! ({line.product_name} x{line.quantity})")
            add_more = click.confirm("Do you want to add another product?")

    def view_cart(self) -> None:
        cart = self._show_cart.handle()
        if cart.is_empty:
            click.echo("\nYour shopping cart is empty.")
            return

        click.echo("\nYour Shopping Cart:")
        display_cart(cart)
        if click.confirm("Do you want to check out all the products?"):
            self.checkout()

    def update_cart(self) -> None:
        cart = self._show_cart.handle()
        if cart.is_empty:
            click.echo("\nYour shopping cart is empty.")
            return

        display_cart(cart)
        product_id = click.prompt("Enter the ID of the product to update")
        quantity = click.prompt(
            "Enter the new quantity (0 removes the product)",
            type=click.IntRange(min=0),
        )
        try:
            self._update_cart.handle(product_id, quantity)
        except EntityNotFoundError as exc:
            click.echo(str(exc))
            return
        click.echo("Cart updated.")

    def checkout(self) -> None:
        if not self._checkout.begin():
            click.echo("No items to checkout.")
            return

        result = self._choose_and_pay()
        if result is None:
            return

        order = result.order
        click.echo(f"Paid {order.total} using {order.payment_method}.")
        if result.audit_error is not None:
            click.echo(f"Warning: {result.audit_error}", err=True)
        click.echo(f"\nYou have successfully checked out the products! (Order ID: {order.id})")

    def view_orders(self) -> None:
        click.echo("\nOrder History:")
        orders = self._list_orders.handle()
        if not orders:
            click.echo("No orders yet.")
            return

        for dto in orders:
            click.echo("-" * 61)
            display_order(dto)
        click.echo("-" * 61)

    # --- Internal helpers -----------------------------------------------------

    def _choose_and_pay(self) -> CheckoutResultDTO | None:
        while True:
            click.echo("\nSelect Payment Method:")
            for option in PaymentOption:
                click.echo(f"{option.value}. {option.display_name}")
            choice = click.prompt(
                f"Enter your choice (1-{len(PaymentOption)})",
                type=click.IntRange(1, len(PaymentOption)),
            )

            try:
                return self._checkout.pay(PaymentOption.from_choice(choice))
            except PaymentError as exc:
                click.echo(f"Payment failed: {exc}")
                if click.confirm("Do you want to try another payment method?", default=True):
                    continue
                self._checkout.cancel()
                click.echo("Checkout cancelled. Your cart is unchanged.")
                return None
            except DomainException as exc:
                self._checkout.cancel()
                click.echo(f"Checkout failed: {exc}")
                return None
