"""Application service: List Allocations use case (query)."""

from __future__ import annotations

from fulfilment.application.dto import AllocationDTO, allocation_to_dto
from fulfilment.domain.exceptions import StoreNotFoundError, WarehouseNotFoundError
from fulfilment.domain.model.allocation import ContainerRef
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.allocation_ledger import AllocationLedger


class ListAllocationsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, container: ContainerRef) -> list[AllocationDTO]:
        with self._uow:
            if container.is_warehouse:
                if self._uow.warehouses.get_by_code(container.id) is None:
                    raise WarehouseNotFoundError(container.id)
            elif self._uow.stores.get_by_id(container.id) is None:
                raise StoreNotFoundError(container.id)
            views = AllocationLedger(self._uow).list_for(container)
        return [allocation_to_dto(v) for v in views]
