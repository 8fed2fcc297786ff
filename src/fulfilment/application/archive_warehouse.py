"""Application service: Archive Warehouse use case.

Archiving is terminal. Allocations already in the warehouse stay where
they are, but no further allocation change is accepted for it.
"""

from __future__ import annotations

from fulfilment.application.dto import WarehouseDTO, warehouse_to_dto
from fulfilment.domain.repository.location_resolver import LocationResolver
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.warehouse_lifecycle import (
    Clock,
    WarehouseLifecycleManager,
    utc_now,
)


class ArchiveWarehouseHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        location_resolver: LocationResolver,
        clock: Clock = utc_now,
    ) -> None:
        self._uow = uow
        self._location_resolver = location_resolver
        self._clock = clock

    def handle(self, business_unit_code: str, expected_version: int | None = None) -> WarehouseDTO:
        with self._uow:
            manager = WarehouseLifecycleManager(
                self._uow.warehouses, self._location_resolver, self._clock
            )
            warehouse = manager.archive(business_unit_code, expected_version=expected_version)
            self._uow.commit()
        return warehouse_to_dto(warehouse)
