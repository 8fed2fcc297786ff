"""JSON-backed implementation of AllocationRepository."""

from __future__ import annotations

from fulfilment.domain.model.allocation import Allocation, ContainerKind, ContainerRef
from fulfilment.domain.repository.allocation_repository import AllocationRepository


class JsonAllocationRepository(AllocationRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- AllocationRepository interface ---------------------------------------

    def get(self, container: ContainerRef, product_id: str) -> Allocation | None:
        for raw in self._records:
            if self._matches(raw, container) and raw["product_id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_for_container(self, container: ContainerRef) -> list[Allocation]:
        return [self._to_domain(raw) for raw in self._records if self._matches(raw, container)]

    def list_for_product(self, product_id: str) -> list[Allocation]:
        return [self._to_domain(raw) for raw in self._records if raw["product_id"] == product_id]

    def save(self, allocation: Allocation) -> None:
        for i, raw in enumerate(self._records):
            if self._matches(raw, allocation.container) and raw["product_id"] == allocation.product_id:
                self._records[i] = self._to_raw(allocation)
                return
        self._records.append(self._to_raw(allocation))

    def delete(self, container: ContainerRef, product_id: str) -> None:
        self._records[:] = [
            r
            for r in self._records
            if not (self._matches(r, container) and r["product_id"] == product_id)
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _matches(raw: dict, container: ContainerRef) -> bool:
        return raw["container_kind"] == container.kind.value and raw["container_id"] == container.id

    @staticmethod
    def _to_raw(allocation: Allocation) -> dict:
        return {
            "container_kind": allocation.container.kind.value,
            "container_id": allocation.container.id,
            "product_id": allocation.product_id,
            "quantity": allocation.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Allocation:
        return Allocation(
            container=ContainerRef(ContainerKind(raw["container_kind"]), raw["container_id"]),
            product_id=raw["product_id"],
            quantity=raw["quantity"],
        )
