"""Warehouse aggregate.

A warehouse is identified by its business unit code for its whole life.
Location, capacity and occupancy may be replaced while it is ACTIVE;
archiving is one-way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from fulfilment.domain.exceptions import AlreadyArchivedError, ValidationError


class WarehouseStatus(Enum):
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Warehouse:
    """Aggregate root for warehouses.

    Use the ``Warehouse.create()`` factory for new warehouses; it enforces
    the field rules. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted warehouses without re-validating.

    ``version`` is the optimistic concurrency token. Repositories compare
    it on every write and advance it by one on success.
    """

    business_unit_code: str
    location: str
    capacity: int
    occupancy: int = 0
    created_at: datetime = field(default_factory=utc_now)
    archived_at: datetime | None = None
    version: int = 0

    # --- Factory (used for NEW warehouses only) -------------------------------

    @staticmethod
    def create(
        business_unit_code: str,
        location: str,
        capacity: int,
        stock: int,
        created_at: datetime,
    ) -> Warehouse:
        if not business_unit_code or not business_unit_code.strip():
            raise ValidationError("Business unit code is required")
        _validate_fields(location, capacity, stock)
        return Warehouse(
            business_unit_code=business_unit_code.strip(),
            location=location,
            capacity=capacity,
            occupancy=stock,
            created_at=created_at,
        )

    # --- State ----------------------------------------------------------------

    @property
    def status(self) -> WarehouseStatus:
        if self.archived_at is None:
            return WarehouseStatus.ACTIVE
        return WarehouseStatus.ARCHIVED

    @property
    def is_archived(self) -> bool:
        return self.status is WarehouseStatus.ARCHIVED

    # --- State transitions ----------------------------------------------------

    def replace(self, location: str, capacity: int, stock: int) -> None:
        """Overwrite everything but the identity. ACTIVE only."""
        if self.is_archived:
            raise AlreadyArchivedError(self.business_unit_code)
        _validate_fields(location, capacity, stock)
        self.location = location
        self.capacity = capacity
        self.occupancy = stock

    def archive(self, when: datetime) -> None:
        """Transition ACTIVE -> ARCHIVED. There is no way back."""
        if self.is_archived:
            raise AlreadyArchivedError(self.business_unit_code)
        self.archived_at = when


def _validate_fields(location: str, capacity: int, stock: int) -> None:
    if not location or not location.strip():
        raise ValidationError("Location is required")
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise ValidationError("Capacity must be a positive number")
    if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
        raise ValidationError("Stock cannot be negative")
