"""Application service: Update Product use case.

Replaces the product's details, including its *available* pool. Units
already allocated to containers are not touched.
"""

from __future__ import annotations

from fulfilment.application.dto import ProductDTO, product_to_dto
from fulfilment.domain.exceptions import DuplicateNameError, ProductNotFoundError
from fulfilment.domain.model.value_objects import Money
from fulfilment.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: str,
        name: str,
        price: str,
        description: str = "",
        stock: int = 0,
    ) -> ProductDTO:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            clash = self._uow.products.get_by_name(name.strip()) if name else None
            if clash is not None and clash.id != product.id:
                raise DuplicateNameError("Product", name.strip())

            product.update_details(
                name=name,
                description=description,
                price=Money.of(price),
                available_stock=stock,
            )
            self._uow.products.save(product)
            self._uow.commit()
        return product_to_dto(product)
