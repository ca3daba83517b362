"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money values are
pre-formatted (e.g. "$15.00").
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.cart import Cart, CartLine
from shop.domain.model.order import Order
from shop.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a completed order as displayed to the user."""

    id: str
    payment_method: str
    items: list[OrderLineDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class CheckoutResultDTO:
    order: OrderDTO
    audit_error: str | None = None


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=str(product.price))


def cart_line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        product_id=line.product.id,
        product_name=line.product.name,
        unit_price=str(line.product.price),
        quantity=line.quantity.value,
        line_total=str(line.line_total),
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        lines=[cart_line_to_dto(line) for line in cart.lines()],
        total=str(cart.total()),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        payment_method=order.payment_method,
        items=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                unit_price=str(line.unit_price),
                quantity=line.quantity.value,
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
