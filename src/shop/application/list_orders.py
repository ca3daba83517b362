"""Application service: List Orders use case (query)."""

from __future__ import annotations

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.repository.order_registry import OrderRegistry


class ListOrdersHandler:

    def __init__(self, order_registry: OrderRegistry) -> None:
        self._order_registry = order_registry

    def handle(self) -> list[OrderDTO]:
        """Every order placed this session, oldest first."""
        return [order_to_dto(order) for order in self._order_registry.list_all()]
