"""Application service: Add Product use case."""

from __future__ import annotations

from fulfilment.application.dto import ProductDTO, product_to_dto
from fulfilment.domain.exceptions import DuplicateNameError, ValidationError
from fulfilment.domain.model.product import Product
from fulfilment.domain.model.value_objects import Money
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.logging_config import get_logger

logger = get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str,
        description: str = "",
        stock: int = 0,
    ) -> ProductDTO:
        """Add a new product to the catalogue with an initial available pool."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if stock < 0:
            raise ValidationError("Product stock cannot be negative")

        with self._uow:
            if self._uow.products.get_by_name(name.strip()) is not None:
                raise DuplicateNameError("Product", name.strip())

            product = Product(
                id=self._uow.products.next_id(),
                name=name.strip(),
                description=description,
                price=Money.of(price),
                available_stock=stock,
            )
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("product_added", extra={"product_id": product.id, "available_stock": stock})
        return product_to_dto(product)
