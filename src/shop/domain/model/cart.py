"""The session's mutable collection of products awaiting checkout."""

from __future__ import annotations

from dataclasses import dataclass, replace

from shop.domain.exceptions import (
    CapacityExceededError,
    EntityNotFoundError,
    ValidationError,
)
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """A product and how many units of it are in the cart."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Cart lines keyed by product ID.

    Invariants:
    - at most one line per product ID (adding again merges quantities)
    - every line has a positive quantity; setting a line to zero removes it
    - ``max_lines``, when set, caps the number of *distinct* products
    """

    def __init__(self, max_lines: int | None = None) -> None:
        if max_lines is not None and max_lines <= 0:
            raise ValidationError("Cart capacity must be positive")
        self._lines: dict[str, CartLine] = {}
        self._max_lines = max_lines

    def add_or_increment(self, product: Product, quantity: int = 1) -> CartLine:
        """Add *quantity* units of *product*, merging with an existing line."""
        qty = Quantity(quantity)

        line = self._lines.get(product.id)
        if line is not None:
            line = replace(line, quantity=line.quantity + qty)
            self._lines[product.id] = line
            return line

        if self._max_lines is not None and len(self._lines) >= self._max_lines:
            raise CapacityExceededError(
                f"Cart is full (maximum {self._max_lines} different products)"
            )
        line = CartLine(product=product, quantity=qty)
        self._lines[product.id] = line
        return line

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Replace a line's quantity. Zero removes the line."""
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        line = self._get_line(product_id)
        if quantity == 0:
            del self._lines[product_id]
        else:
            self._lines[product_id] = replace(line, quantity=Quantity(quantity))

    def remove(self, product_id: str) -> None:
        self._get_line(product_id)
        del self._lines[product_id]

    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.line_total
        return result

    def clear(self) -> None:
        self._lines.clear()

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    # --- Internal helpers -----------------------------------------------------

    def _get_line(self, product_id: str) -> CartLine:
        line = self._lines.get(product_id)
        if line is None:
            raise EntityNotFoundError(f"Product ID '{product_id}' is not in the cart")
        return line
