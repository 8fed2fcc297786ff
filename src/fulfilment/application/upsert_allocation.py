"""Application service: Upsert Allocation use case.

Places (or re-sizes) a product allocation in a store or warehouse. The
whole call is one unit of work: a capacity breach discovered after the
pool was debited leaves nothing behind.
"""

from __future__ import annotations

from fulfilment.application.dto import AllocationDTO, allocation_to_dto
from fulfilment.domain.model.allocation import ContainerRef
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.allocation_ledger import AllocationLedger


class UpsertAllocationHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, container: ContainerRef, product_id: str, quantity: int) -> AllocationDTO:
        with self._uow:
            view = AllocationLedger(self._uow).upsert(container, product_id, quantity)
            self._uow.commit()
        return allocation_to_dto(view)
