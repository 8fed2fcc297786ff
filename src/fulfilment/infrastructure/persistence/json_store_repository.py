"""JSON-backed implementation of StoreRepository."""

from __future__ import annotations

from fulfilment.domain.model.store import Store
from fulfilment.domain.repository.store_repository import StoreRepository


class JsonStoreRepository(StoreRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- StoreRepository interface --------------------------------------------

    def next_id(self) -> str:
        if not self._records:
            return "1"
        return str(max(int(r["id"]) for r in self._records) + 1)

    def get_by_id(self, store_id: str) -> Store | None:
        for raw in self._records:
            if raw["id"] == store_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Store | None:
        for raw in self._records:
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Store]:
        return [self._to_domain(raw) for raw in self._records]

    def save(self, store: Store) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == store.id:
                self._records[i] = self._to_raw(store)
                return
        self._records.append(self._to_raw(store))

    def delete(self, store_id: str) -> None:
        self._records[:] = [r for r in self._records if r["id"] != store_id]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(store: Store) -> dict:
        return {"id": store.id, "name": store.name, "occupancy": store.occupancy}

    @staticmethod
    def _to_domain(raw: dict) -> Store:
        return Store(id=raw["id"], name=raw["name"], occupancy=raw.get("occupancy", 0))
