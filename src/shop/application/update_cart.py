"""Application service: Update Cart Quantity use case.

A quantity of zero removes the product from the cart.
"""

from __future__ import annotations

from shop.application.dto import CartDTO, cart_to_dto
from shop.domain.model.cart import Cart


class UpdateCartQuantityHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, product_id: str, quantity: int) -> CartDTO:
        self._cart.set_quantity(product_id.strip(), quantity)
        return cart_to_dto(self._cart)
