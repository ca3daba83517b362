"""Sellable items in the store catalog."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A catalog entry.

    Frozen: the catalog is seeded once at startup and never changes
    afterwards, so carts and orders can safely hold references to it.
    """

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
