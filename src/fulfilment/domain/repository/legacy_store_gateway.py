"""Port to the legacy store manager.

The legacy system learns about store changes only after they have been
committed; it is never part of the unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfilment.domain.model.store import Store


class LegacyStoreGateway(ABC):

    @abstractmethod
    def store_created(self, store: Store) -> None:
        """Notify the legacy system of a new store."""

    @abstractmethod
    def store_updated(self, store: Store) -> None:
        """Notify the legacy system of a changed store."""

    @abstractmethod
    def store_deleted(self, store: Store) -> None:
        """Notify the legacy system of a removed store."""
