"""Application service: Show Warehouse use cases (queries)."""

from __future__ import annotations

from fulfilment.application.dto import WarehouseDTO, warehouse_to_dto
from fulfilment.domain.exceptions import WarehouseNotFoundError
from fulfilment.domain.repository.unit_of_work import UnitOfWork


class ShowWarehouseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, business_unit_code: str) -> WarehouseDTO:
        with self._uow:
            warehouse = self._uow.warehouses.get_by_code(business_unit_code)
        if warehouse is None:
            raise WarehouseNotFoundError(business_unit_code)
        return warehouse_to_dto(warehouse)


class ListWarehousesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[WarehouseDTO]:
        """Every warehouse, archived ones included, in creation order."""
        with self._uow:
            warehouses = self._uow.warehouses.list_all()
        return [warehouse_to_dto(w) for w in warehouses]
