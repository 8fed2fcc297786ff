"""Unit of Work: the atomic boundary for every mutating use case.

Handlers open a unit of work with ``with uow:``, make their changes through
its repositories and call ``commit()``. Leaving the block without a
commit (including through an exception) discards every change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfilment.domain.repository.allocation_repository import AllocationRepository
from fulfilment.domain.repository.product_repository import ProductRepository
from fulfilment.domain.repository.store_repository import StoreRepository
from fulfilment.domain.repository.warehouse_repository import WarehouseRepository


class UnitOfWork(ABC):

    products: ProductRepository
    stores: StoreRepository
    warehouses: WarehouseRepository
    allocations: AllocationRepository

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._committed:
            self.rollback()
        self._end()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made since the unit was opened."""

    @abstractmethod
    def _begin(self) -> None:
        """Load state and acquire whatever isolation the store offers."""

    @abstractmethod
    def _commit(self) -> None:
        """Make every change durable at once."""

    def _end(self) -> None:
        """Release resources held since ``_begin``."""
