"""Order aggregate — an immutable record of a completed checkout.

An Order owns copies of the cart lines it was created from, so later cart
changes can never reach a stored order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.exceptions import ValidationError
from shop.domain.model.cart import CartLine
from shop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """Snapshot of a cart line at checkout time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderLine:
        return OrderLine(
            product_id=line.product.id,
            product_name=line.product.name,
            quantity=line.quantity,
            unit_price=line.product.price,
        )


@dataclass(frozen=True)
class Order:
    """Aggregate root for completed purchases.

    Use the ``Order.create()`` factory for new orders — it snapshots the
    cart lines and fixes ``total``.  ``total`` is stored, not derived, so
    it always reflects the amount that was actually paid.
    """

    id: str
    lines: tuple[OrderLine, ...]
    total: Money
    payment_method: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        order_id: str,
        cart_lines: Iterable[CartLine],
        payment_method: str,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not order_id or not order_id.strip():
            raise ValidationError("Order ID is required")

        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")

        lines = tuple(OrderLine.from_cart_line(line) for line in cart_lines)
        if not lines:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for line in lines:
            total = total + line.line_total

        return Order(
            id=order_id,
            lines=lines,
            total=total,
            payment_method=payment_method,
        )
