"""Application service: Show Product use case (query)."""

from __future__ import annotations

from fulfilment.application.dto import ProductDTO, product_to_dto
from fulfilment.domain.exceptions import ProductNotFoundError
from fulfilment.domain.repository.unit_of_work import UnitOfWork


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str) -> ProductDTO:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product_to_dto(product)
