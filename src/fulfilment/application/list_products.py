"""Application service: List Products use case (query)."""

from __future__ import annotations

from fulfilment.application.dto import ProductDTO, product_to_dto
from fulfilment.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ProductDTO]:
        with self._uow:
            products = self._uow.products.list_all()
        return [product_to_dto(p) for p in sorted(products, key=lambda p: p.name.lower())]
