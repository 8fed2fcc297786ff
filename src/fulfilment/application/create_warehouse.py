"""Application service: Create Warehouse use case."""

from __future__ import annotations

from fulfilment.application.dto import WarehouseDTO, warehouse_to_dto
from fulfilment.domain.repository.location_resolver import LocationResolver
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.warehouse_lifecycle import (
    Clock,
    WarehouseLifecycleManager,
    utc_now,
)


class CreateWarehouseHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        location_resolver: LocationResolver,
        clock: Clock = utc_now,
    ) -> None:
        self._uow = uow
        self._location_resolver = location_resolver
        self._clock = clock

    def handle(
        self,
        business_unit_code: str,
        location: str,
        capacity: int,
        stock: int = 0,
    ) -> WarehouseDTO:
        with self._uow:
            manager = WarehouseLifecycleManager(
                self._uow.warehouses, self._location_resolver, self._clock
            )
            warehouse = manager.create(business_unit_code, location, capacity, stock)
            self._uow.commit()
        return warehouse_to_dto(warehouse)
