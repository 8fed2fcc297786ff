"""Abstract repository for Store aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfilment.domain.model.store import Store


class StoreRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique store ID."""

    @abstractmethod
    def get_by_id(self, store_id: str) -> Store | None:
        """Return a store by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Store | None:
        """Return a store by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Store]:
        """Return every store."""

    @abstractmethod
    def save(self, store: Store) -> None:
        """Persist a new or updated store."""

    @abstractmethod
    def delete(self, store_id: str) -> None:
        """Remove a store. Missing IDs are ignored."""
