"""Application service: List Products use case (query)."""

from __future__ import annotations

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.model.catalog import Catalog


class ListProductsHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._catalog.list_all()]
