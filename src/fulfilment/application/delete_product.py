"""Application service: Delete Product use case.

A product still held by any container cannot be deleted; its allocations
have to be removed first so the units are accounted for.
"""

from __future__ import annotations

from fulfilment.domain.exceptions import ProductInUseError, ProductNotFoundError
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.allocation_ledger import AllocationLedger


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str) -> None:
        with self._uow:
            if self._uow.products.get_by_id(product_id) is None:
                raise ProductNotFoundError(product_id)

            allocated = AllocationLedger(self._uow).allocated_quantity(product_id)
            if allocated > 0:
                raise ProductInUseError(product_id, allocated)

            self._uow.products.delete(product_id)
            self._uow.commit()
