"""Abstract registry for completed Orders.

Defined in the domain layer so the checkout workflow never depends on
infrastructure.  Implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRegistry(ABC):
    """Append-only store of orders, oldest first."""

    @abstractmethod
    def next_id(self) -> str:
        """Mint a new order ID, unique and greater than every ID minted before."""

    @abstractmethod
    def append(self, order: Order) -> None:
        """Store a completed order at the end of the sequence."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order in insertion order."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored orders."""

    def is_empty(self) -> bool:
        return len(self) == 0
