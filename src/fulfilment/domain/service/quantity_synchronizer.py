"""Domain service: Container Quantity Synchronizer.

Recomputes a container's occupancy from its allocations. It runs inside
the caller's unit of work, so the sum is read together with the mutation
that triggered it and nothing in between is visible outside.
"""

from __future__ import annotations

from fulfilment.domain.exceptions import (
    CapacityExceededError,
    StoreNotFoundError,
    ValidationError,
    WarehouseNotFoundError,
)
from fulfilment.domain.model.allocation import ContainerRef
from fulfilment.domain.model.store import OccupancyMode, Store
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.logging_config import get_logger

logger = get_logger(__name__)


class ContainerQuantitySynchronizer:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def recompute(self, container: ContainerRef, enforce_capacity: bool = True) -> int:
        """Set the container's occupancy to the sum of its allocations.

        For warehouses a sum above capacity raises CapacityExceededError
        unless ``enforce_capacity`` is False (used when stock only leaves).
        Returns the new occupancy.
        """
        total = sum(
            a.quantity for a in self._uow.allocations.list_for_container(container)
        )

        if container.is_warehouse:
            warehouse = self._uow.warehouses.get_by_code(container.id)
            if warehouse is None:
                raise WarehouseNotFoundError(container.id)
            if enforce_capacity and total > warehouse.capacity:
                logger.warning(
                    "capacity_exceeded",
                    extra={
                        "business_unit_code": warehouse.business_unit_code,
                        "occupancy": total,
                        "capacity": warehouse.capacity,
                    },
                )
                raise CapacityExceededError(
                    warehouse.business_unit_code, total, warehouse.capacity
                )
            if warehouse.occupancy != total:
                warehouse.occupancy = total
                self._uow.warehouses.update(warehouse)
            return total

        store = self._require_store(container.id)
        if store.occupancy != total:
            store.occupancy = total
            self._uow.stores.save(store)
        return total

    def occupancy_mode(self, store: Store) -> OccupancyMode:
        count = len(self._uow.allocations.list_for_container(ContainerRef.store(store.id)))
        return OccupancyMode.for_allocation_count(count)

    def apply_manual_occupancy(self, store: Store, occupancy: int) -> OccupancyMode:
        """Honour a hand-entered occupancy only while the store has no allocations.

        In DERIVED mode the supplied value is ignored and the store keeps
        the sum of its allocations. The store is modified in place; saving
        it is left to the caller.
        """
        if occupancy < 0:
            raise ValidationError("Store occupancy cannot be negative")
        mode = self.occupancy_mode(store)
        if mode is OccupancyMode.MANUAL:
            store.occupancy = occupancy
        else:
            store.occupancy = sum(
                a.quantity
                for a in self._uow.allocations.list_for_container(ContainerRef.store(store.id))
            )
            if occupancy != store.occupancy:
                logger.info(
                    "manual_occupancy_ignored",
                    extra={"store_id": store.id, "supplied": occupancy, "derived": store.occupancy},
                )
        return mode

    def _require_store(self, store_id: str) -> Store:
        store = self._uow.stores.get_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        return store
