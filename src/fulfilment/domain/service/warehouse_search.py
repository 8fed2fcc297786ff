"""Domain service: Warehouse Search (query).

Filters, sorts and pages ACTIVE warehouses. Archived warehouses never
appear. Sorting is stable, so warehouses that tie on the sort key keep
the order in which they were created, in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass

from fulfilment.domain.exceptions import (
    InvalidPageError,
    InvalidPageSizeError,
    InvalidRangeError,
    InvalidSortError,
)
from fulfilment.domain.model.warehouse import Warehouse
from fulfilment.domain.repository.warehouse_repository import WarehouseRepository

SORT_FIELDS = ("createdAt", "capacity")
SORT_ORDERS = ("asc", "desc")
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class SearchCriteria:
    """Validated search parameters. Invalid combinations cannot be built."""

    location: str | None = None
    min_capacity: int | None = None
    max_capacity: int | None = None
    sort_by: str = "createdAt"
    sort_order: str = "asc"
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.sort_by not in SORT_FIELDS:
            raise InvalidSortError("sortBy", self.sort_by, SORT_FIELDS)
        if self.sort_order not in SORT_ORDERS:
            raise InvalidSortError("sortOrder", self.sort_order, SORT_ORDERS)
        if self.page < 0:
            raise InvalidPageError(self.page)
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise InvalidPageSizeError(self.page_size, MAX_PAGE_SIZE)
        for bound in (self.min_capacity, self.max_capacity):
            if bound is not None and bound < 0:
                raise InvalidRangeError(self.min_capacity, self.max_capacity)
        if (
            self.min_capacity is not None
            and self.max_capacity is not None
            and self.min_capacity > self.max_capacity
        ):
            raise InvalidRangeError(self.min_capacity, self.max_capacity)
        # A blank location means "any location"
        if self.location is not None and not self.location.strip():
            object.__setattr__(self, "location", None)

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    def matches(self, warehouse: Warehouse) -> bool:
        if self.location is not None and warehouse.location != self.location:
            return False
        if self.min_capacity is not None and warehouse.capacity < self.min_capacity:
            return False
        if self.max_capacity is not None and warehouse.capacity > self.max_capacity:
            return False
        return True


class WarehouseSearch:

    def __init__(self, warehouse_repo: WarehouseRepository) -> None:
        self._warehouse_repo = warehouse_repo

    def search(self, criteria: SearchCriteria) -> list[Warehouse]:
        candidates = [
            w for w in self._warehouse_repo.list_active() if criteria.matches(w)
        ]
        if criteria.sort_by == "capacity":
            ordered = sorted(
                candidates,
                key=lambda w: w.capacity,
                reverse=criteria.sort_order == "desc",
            )
        else:
            ordered = sorted(
                candidates,
                key=lambda w: w.created_at,
                reverse=criteria.sort_order == "desc",
            )
        return ordered[criteria.offset : criteria.offset + criteria.page_size]
