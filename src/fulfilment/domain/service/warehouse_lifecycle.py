"""Domain service: Warehouse Lifecycle Manager.

Create, replace and archive warehouses. Location rules come from the
LocationResolver; conflicting writers are detected through the
warehouse's version token, never by locking and never retried here.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fulfilment.domain.exceptions import (
    AlreadyArchivedError,
    CapacityOutOfRangeError,
    ConcurrentModificationError,
    DuplicateCodeError,
    InvalidLocationError,
    StockExceedsCapacityError,
    WarehouseNotFoundError,
)
from fulfilment.domain.model.location import Location
from fulfilment.domain.model.warehouse import Warehouse, utc_now
from fulfilment.domain.repository.location_resolver import LocationResolver
from fulfilment.domain.repository.warehouse_repository import WarehouseRepository
from fulfilment.logging_config import get_logger

logger = get_logger(__name__)

Clock = Callable[[], datetime]


class WarehouseLifecycleManager:

    def __init__(
        self,
        warehouse_repo: WarehouseRepository,
        location_resolver: LocationResolver,
        clock: Clock = utc_now,
    ) -> None:
        self._warehouse_repo = warehouse_repo
        self._location_resolver = location_resolver
        self._clock = clock

    def create(
        self,
        business_unit_code: str,
        location: str,
        capacity: int,
        stock: int = 0,
    ) -> Warehouse:
        """Register a new ACTIVE warehouse at version 0.

        Checks, in order: field rules, unique code (archived warehouses
        keep their code), known location, capacity within the location's
        maximum, initial stock within capacity.
        """
        warehouse = Warehouse.create(
            business_unit_code=business_unit_code,
            location=location,
            capacity=capacity,
            stock=stock,
            created_at=self._clock(),
        )

        if self._warehouse_repo.get_by_code(warehouse.business_unit_code) is not None:
            raise DuplicateCodeError(warehouse.business_unit_code)

        self._check_location(location, capacity, stock)

        self._warehouse_repo.add(warehouse)
        logger.info(
            "warehouse_created",
            extra={
                "business_unit_code": warehouse.business_unit_code,
                "location": location,
                "capacity": capacity,
                "occupancy": stock,
            },
        )
        return warehouse

    def replace(
        self,
        business_unit_code: str,
        location: str,
        capacity: int,
        stock: int = 0,
        expected_version: int | None = None,
    ) -> Warehouse:
        """Overwrite location, capacity and occupancy of an ACTIVE warehouse."""
        warehouse = self._load(business_unit_code, expected_version)
        if warehouse.is_archived:
            raise AlreadyArchivedError(warehouse.business_unit_code)

        self._check_location(location, capacity, stock)

        warehouse.replace(location=location, capacity=capacity, stock=stock)
        self._warehouse_repo.update(warehouse)
        logger.info(
            "warehouse_replaced",
            extra={
                "business_unit_code": warehouse.business_unit_code,
                "location": location,
                "capacity": capacity,
                "occupancy": stock,
                "version": warehouse.version,
            },
        )
        return warehouse

    def archive(
        self,
        business_unit_code: str,
        expected_version: int | None = None,
    ) -> Warehouse:
        """Move an ACTIVE warehouse to ARCHIVED. One-way."""
        warehouse = self._load(business_unit_code, expected_version)
        warehouse.archive(self._clock())
        self._warehouse_repo.update(warehouse)
        logger.info(
            "warehouse_archived",
            extra={
                "business_unit_code": warehouse.business_unit_code,
                "archived_at": warehouse.archived_at,
                "version": warehouse.version,
            },
        )
        return warehouse

    def get(self, business_unit_code: str) -> Warehouse:
        warehouse = self._warehouse_repo.get_by_code(business_unit_code)
        if warehouse is None:
            raise WarehouseNotFoundError(business_unit_code)
        return warehouse

    # --- Internal helpers -----------------------------------------------------

    def _load(self, business_unit_code: str, expected_version: int | None) -> Warehouse:
        warehouse = self.get(business_unit_code)
        if expected_version is not None and expected_version != warehouse.version:
            logger.warning(
                "warehouse_version_conflict",
                extra={
                    "business_unit_code": business_unit_code,
                    "expected_version": expected_version,
                    "actual_version": warehouse.version,
                },
            )
            raise ConcurrentModificationError(
                business_unit_code, expected_version, warehouse.version
            )
        return warehouse

    def _check_location(self, location: str, capacity: int, stock: int) -> Location:
        resolved = self._location_resolver.resolve(location)
        if resolved is None:
            raise InvalidLocationError(location)
        # Only the upper bound is enforced; min_capacity is not validated.
        if capacity > resolved.max_capacity:
            raise CapacityOutOfRangeError(location, capacity, resolved.max_capacity)
        if stock > capacity:
            raise StockExceedsCapacityError(stock, capacity)
        return resolved
