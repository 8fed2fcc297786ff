"""Abstract repository for Warehouse aggregate.

Writes are compare-and-swap on ``Warehouse.version``: ``update`` persists
only when the stored version still equals the version the caller loaded,
then advances the token on the passed object.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfilment.domain.model.warehouse import Warehouse


class WarehouseRepository(ABC):

    @abstractmethod
    def get_by_code(self, business_unit_code: str) -> Warehouse | None:
        """Return a warehouse (active or archived), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Warehouse]:
        """Return every warehouse in insertion order."""

    @abstractmethod
    def list_active(self) -> list[Warehouse]:
        """Return non-archived warehouses in insertion order."""

    @abstractmethod
    def add(self, warehouse: Warehouse) -> None:
        """Persist a new warehouse at version 0."""

    @abstractmethod
    def update(self, warehouse: Warehouse) -> None:
        """Persist changes if nobody advanced the version in the meantime.

        Raises ConcurrentModificationError on a version mismatch.
        On success ``warehouse.version`` is incremented.
        """
