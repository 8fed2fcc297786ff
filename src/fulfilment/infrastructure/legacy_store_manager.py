"""Legacy store manager adapter.

The legacy system has no API; it only needs to see that a change
happened, so each notification is written as a structured log line.
"""

from __future__ import annotations

from fulfilment.domain.model.store import Store
from fulfilment.domain.repository.legacy_store_gateway import LegacyStoreGateway
from fulfilment.logging_config import get_logger

logger = get_logger(__name__)


class LoggingLegacyStoreGateway(LegacyStoreGateway):

    def store_created(self, store: Store) -> None:
        self._notify("created", store)

    def store_updated(self, store: Store) -> None:
        self._notify("updated", store)

    def store_deleted(self, store: Store) -> None:
        self._notify("deleted", store)

    @staticmethod
    def _notify(action: str, store: Store) -> None:
        logger.info(
            "legacy_store_sync",
            extra={
                "action": action,
                "store_id": store.id,
                "store_name": store.name,
                "occupancy": store.occupancy,
            },
        )
