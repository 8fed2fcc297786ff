"""JSON-backed implementation of WarehouseRepository.

``update`` is a compare-and-swap on the ``version`` field of the record
loaded at the start of the unit of work. JsonUnitOfWork repeats the check
against the file itself at commit time.
"""

from __future__ import annotations

from datetime import datetime

from fulfilment.domain.exceptions import (
    ConcurrentModificationError,
    DuplicateCodeError,
    WarehouseNotFoundError,
)
from fulfilment.domain.model.warehouse import Warehouse
from fulfilment.domain.repository.warehouse_repository import WarehouseRepository


class JsonWarehouseRepository(WarehouseRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- WarehouseRepository interface ----------------------------------------

    def get_by_code(self, business_unit_code: str) -> Warehouse | None:
        for raw in self._records:
            if raw["business_unit_code"] == business_unit_code:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Warehouse]:
        return [self._to_domain(raw) for raw in self._records]

    def list_active(self) -> list[Warehouse]:
        return [self._to_domain(raw) for raw in self._records if raw.get("archived_at") is None]

    def add(self, warehouse: Warehouse) -> None:
        if self.get_by_code(warehouse.business_unit_code) is not None:
            raise DuplicateCodeError(warehouse.business_unit_code)
        self._records.append(self._to_raw(warehouse))

    def update(self, warehouse: Warehouse) -> None:
        for i, raw in enumerate(self._records):
            if raw["business_unit_code"] != warehouse.business_unit_code:
                continue
            if raw["version"] != warehouse.version:
                raise ConcurrentModificationError(
                    warehouse.business_unit_code, warehouse.version, raw["version"]
                )
            warehouse.version += 1
            self._records[i] = self._to_raw(warehouse)
            return
        raise WarehouseNotFoundError(warehouse.business_unit_code)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(warehouse: Warehouse) -> dict:
        return {
            "business_unit_code": warehouse.business_unit_code,
            "location": warehouse.location,
            "capacity": warehouse.capacity,
            "occupancy": warehouse.occupancy,
            "created_at": warehouse.created_at.isoformat(),
            "archived_at": warehouse.archived_at.isoformat() if warehouse.archived_at else None,
            "version": warehouse.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Warehouse:
        archived_at = raw.get("archived_at")
        return Warehouse(
            business_unit_code=raw["business_unit_code"],
            location=raw["location"],
            capacity=raw["capacity"],
            occupancy=raw.get("occupancy", 0),
            created_at=datetime.fromisoformat(raw["created_at"]),
            archived_at=datetime.fromisoformat(archived_at) if archived_at else None,
            version=raw.get("version", 0),
        )
