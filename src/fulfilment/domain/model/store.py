"""Store aggregate.

A store has no capacity limit. Its occupancy is derived from its
allocations once it has any; stores that have never been allocated to keep
the older manual-entry mode, where occupancy is whatever was last typed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fulfilment.domain.exceptions import ValidationError


class OccupancyMode(Enum):
    MANUAL = "MANUAL"
    DERIVED = "DERIVED"

    @staticmethod
    def for_allocation_count(count: int) -> OccupancyMode:
        return OccupancyMode.DERIVED if count > 0 else OccupancyMode.MANUAL


@dataclass
class Store:

    id: str
    name: str
    occupancy: int = 0

    @staticmethod
    def create(store_id: str, name: str, occupancy: int = 0) -> Store:
        if not name or not name.strip():
            raise ValidationError("Store name is required")
        if occupancy < 0:
            raise ValidationError("Store occupancy cannot be negative")
        return Store(id=store_id, name=name.strip(), occupancy=occupancy)

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Store name is required")
        self.name = name.strip()
