"""Domain service: Allocation Ledger.

The only place where stock moves between a product's available pool and
containers. Whatever the container type, every movement goes through
``upsert`` / ``remove`` / ``release_all`` here, which is what keeps

    product.available_stock + sum(allocations of product)

constant across any sequence of operations.

The ledger works inside the caller's unit of work and never commits. On
any failure the caller leaves the unit without committing and every change
made during the call is discarded; that is how a capacity breach found by
the synchronizer after the pool was already debited is rolled back.
"""

from __future__ import annotations

from fulfilment.domain.exceptions import (
    AllocationNotFoundError,
    ContainerArchivedError,
    ProductNotFoundError,
    StoreNotFoundError,
    WarehouseNotFoundError,
)
from fulfilment.domain.model.allocation import Allocation, AllocationView, ContainerRef
from fulfilment.domain.model.product import Product
from fulfilment.domain.model.value_objects import Quantity
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.quantity_synchronizer import ContainerQuantitySynchronizer
from fulfilment.logging_config import get_logger

logger = get_logger(__name__)


class AllocationLedger:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow
        self._synchronizer = ContainerQuantitySynchronizer(uow)

    def upsert(
        self,
        container: ContainerRef,
        product_id: str,
        requested_quantity: int,
    ) -> AllocationView:
        """Set the quantity of a product held in a container.

        Creates the allocation or adjusts it by the difference to the
        current quantity: a larger quantity draws the difference from the
        pool, a smaller one returns it.
        """
        quantity = Quantity(requested_quantity).value

        self.ensure_mutable(container)
        product = self._require_product(product_id)

        existing = self._uow.allocations.get(container, product_id)
        if existing is None:
            product.withdraw(quantity)
            allocation = Allocation(container=container, product_id=product_id, quantity=quantity)
        else:
            delta = quantity - existing.quantity
            if delta > 0:
                product.withdraw(delta)
            elif delta < 0:
                product.restock(-delta)
            existing.quantity = quantity
            allocation = existing

        self._uow.products.save(product)
        self._uow.allocations.save(allocation)
        occupancy = self._synchronizer.recompute(container)

        logger.info(
            "allocation_upserted",
            extra={
                "container": str(container),
                "product_id": product_id,
                "quantity": quantity,
                "available_stock": product.available_stock,
                "occupancy": occupancy,
            },
        )
        return AllocationView(
            container=container,
            product_id=product.id,
            product_name=product.name,
            quantity=allocation.quantity,
        )

    def remove(self, container: ContainerRef, product_id: str) -> int:
        """Delete an allocation and return its units to the pool.

        Returns the quantity that went back to the pool. Calling it again
        for the same pair raises AllocationNotFoundError.
        """
        self.ensure_mutable(container)

        existing = self._uow.allocations.get(container, product_id)
        if existing is None:
            raise AllocationNotFoundError(str(container), product_id)

        returned = self._return_to_pool(existing)
        self._synchronizer.recompute(container, enforce_capacity=False)

        logger.info(
            "allocation_removed",
            extra={"container": str(container), "product_id": product_id, "returned": returned},
        )
        return returned

    def release_all(self, container: ContainerRef) -> int:
        """Remove every allocation of a container (container is being deleted).

        Returns the total number of units returned to product pools.
        """
        returned = 0
        for allocation in self._uow.allocations.list_for_container(container):
            returned += self._return_to_pool(allocation)
        if returned:
            logger.info(
                "allocations_released",
                extra={"container": str(container), "returned": returned},
            )
        return returned

    def list_for(self, container: ContainerRef) -> list[AllocationView]:
        """Allocations of a container ordered by product name."""
        views: list[AllocationView] = []
        for allocation in self._uow.allocations.list_for_container(container):
            product = self._uow.products.get_by_id(allocation.product_id)
            name = product.name if product is not None else ""
            views.append(
                AllocationView(
                    container=container,
                    product_id=allocation.product_id,
                    product_name=name,
                    quantity=allocation.quantity,
                )
            )
        return sorted(views, key=lambda v: (v.product_name.lower(), v.product_id))

    def allocated_quantity(self, product_id: str) -> int:
        """Units of a product currently held across all containers."""
        return sum(a.quantity for a in self._uow.allocations.list_for_product(product_id))

    def ensure_mutable(self, container: ContainerRef) -> None:
        """Raise unless the container exists and accepts allocation changes."""
        if container.is_warehouse:
            warehouse = self._uow.warehouses.get_by_code(container.id)
            if warehouse is None:
                raise WarehouseNotFoundError(container.id)
            if warehouse.is_archived:
                logger.warning(
                    "archived_container_rejected",
                    extra={"business_unit_code": container.id},
                )
                raise ContainerArchivedError(container.id)
        elif self._uow.stores.get_by_id(container.id) is None:
            raise StoreNotFoundError(container.id)

    # --- Internal helpers -----------------------------------------------------

    def _return_to_pool(self, allocation: Allocation) -> int:
        product = self._require_product(allocation.product_id)
        product.restock(allocation.quantity)
        self._uow.products.save(product)
        self._uow.allocations.delete(allocation.container, allocation.product_id)
        return allocation.quantity

    def _require_product(self, product_id: str) -> Product:
        product = self._uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
