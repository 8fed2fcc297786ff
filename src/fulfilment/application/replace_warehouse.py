"""Application service: Replace Warehouse use case.

The business unit code from the request path identifies the warehouse;
everything else in the request replaces the stored values.
"""

from __future__ import annotations

from fulfilment.application.dto import WarehouseDTO, warehouse_to_dto
from fulfilment.domain.repository.location_resolver import LocationResolver
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.warehouse_lifecycle import WarehouseLifecycleManager


class ReplaceWarehouseHandler:

    def __init__(self, uow: UnitOfWork, location_resolver: LocationResolver) -> None:
        self._uow = uow
        self._location_resolver = location_resolver

    def handle(
        self,
        business_unit_code: str,
        location: str,
        capacity: int,
        stock: int = 0,
        expected_version: int | None = None,
    ) -> WarehouseDTO:
        """Replace an active warehouse.

        Args:
            expected_version: The version the caller last read. When given
                and no longer current, ConcurrentModificationError is raised
                and nothing is written. The caller decides whether to reload
                and retry.
        """
        with self._uow:
            manager = WarehouseLifecycleManager(self._uow.warehouses, self._location_resolver)
            warehouse = manager.replace(
                business_unit_code,
                location,
                capacity,
                stock,
                expected_version=expected_version,
            )
            self._uow.commit()
        return warehouse_to_dto(warehouse)
