"""The fixed, read-only collection of products for sale."""

from __future__ import annotations

from collections.abc import Iterable

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


class Catalog:
    """Products keyed by ID, kept in seeding order.

    Read-only after construction.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            if product.id in self._products:
                raise ValidationError(f"Duplicate product ID '{product.id}' in catalog")
            self._products[product.id] = product

    def find_by_id(self, product_id: str) -> Product | None:
        """Return the product with this ID, or None if there is none."""
        return self._products.get(product_id.strip())

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return isinstance(product_id, str) and product_id.strip() in self._products


def default_catalog() -> Catalog:
    """The products the store ships with."""
    return Catalog([
        Product(id="P100", name="Laptop", price=Money.of("999.99")),
        Product(id="P101", name="Smartphone", price=Money.of("699.99")),
        Product(id="P102", name="Headphones", price=Money.of("149.99")),
        Product(id="P103", name="Mouse", price=Money.of("24.99")),
        Product(id="P104", name="Keyboard", price=Money.of("49.99")),
    ])
