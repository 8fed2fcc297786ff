"""Application service: Search Warehouses use case (query)."""

from __future__ import annotations

from fulfilment.application.dto import WarehouseDTO, warehouse_to_dto
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.warehouse_search import (
    DEFAULT_PAGE_SIZE,
    SearchCriteria,
    WarehouseSearch,
)


class SearchWarehousesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        location: str | None = None,
        min_capacity: int | None = None,
        max_capacity: int | None = None,
        sort_by: str = "createdAt",
        sort_order: str = "asc",
        page: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[WarehouseDTO]:
        criteria = SearchCriteria(
            location=location,
            min_capacity=min_capacity,
            max_capacity=max_capacity,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            page_size=page_size,
        )
        with self._uow:
            found = WarehouseSearch(self._uow.warehouses).search(criteria)
        return [warehouse_to_dto(w) for w in found]
