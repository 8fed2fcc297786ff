"""Application service: Remove Allocation use case."""

from __future__ import annotations

from fulfilment.domain.model.allocation import ContainerRef
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.allocation_ledger import AllocationLedger


class RemoveAllocationHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, container: ContainerRef, product_id: str) -> int:
        """Remove the allocation; returns the units given back to the pool."""
        with self._uow:
            returned = AllocationLedger(self._uow).remove(container, product_id)
            self._uow.commit()
        return returned
