"""Application service: Add to Cart use case.

Resolves the product ID against the catalog and merges it into the cart.
"""

from __future__ import annotations

from shop.application.dto import CartLineDTO, cart_line_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_id: str, quantity: int = 1) -> CartLineDTO:
        """Add *quantity* units and return the resulting cart line.

        Raises EntityNotFoundError for an unknown ID so the caller can ask
        again.
        """
        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        line = self._cart.add_or_increment(product, quantity)
        return cart_line_to_dto(line)
