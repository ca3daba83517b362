"""In-memory implementation of OrderRegistry.

Orders live for the lifetime of the process only; the audit log is the
sole record that outlives it.
"""

from __future__ import annotations

import itertools

from shop.domain.exceptions import CapacityExceededError, ValidationError
from shop.domain.model.order import Order
from shop.domain.repository.order_registry import OrderRegistry

ORDER_ID_PREFIX = "ORD-"


class InMemoryOrderRegistry(OrderRegistry):
    """Order IDs come from a counter, not the clock: ``ORD-000001``,
    ``ORD-000002``, ...  Two checkouts in the same instant still get
    distinct IDs.
    """

    def __init__(self, max_orders: int | None = None) -> None:
        if max_orders is not None and max_orders <= 0:
            raise ValidationError("Order capacity must be positive")
        self._orders: list[Order] = []
        self._ids: set[str] = set()
        self._counter = itertools.count(1)
        self._max_orders = max_orders

    # --- OrderRegistry interface ----------------------------------------------

    def next_id(self) -> str:
        return f"{ORDER_ID_PREFIX}{next(self._counter):06d}"

    def append(self, order: Order) -> None:
        if self._max_orders is not None and len(self._orders) >= self._max_orders:
            raise CapacityExceededError(
                f"Order limit reached (maximum {self._max_orders} orders)"
            )
        if order.id in self._ids:
            raise ValidationError(f"Order {order.id} is already registered")
        self._orders.append(order)
        self._ids.add(order.id)

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def __len__(self) -> int:
        return len(self._orders)
