"""Application service: Delete Store use case.

Deleting a store deletes its allocations and returns every allocated
unit to the owning product's pool, all in one unit of work.
"""

from __future__ import annotations

from fulfilment.domain.exceptions import StoreNotFoundError
from fulfilment.domain.model.allocation import ContainerRef
from fulfilment.domain.repository.legacy_store_gateway import LegacyStoreGateway
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.allocation_ledger import AllocationLedger


class DeleteStoreHandler:

    def __init__(self, uow: UnitOfWork, legacy_gateway: LegacyStoreGateway) -> None:
        self._uow = uow
        self._legacy_gateway = legacy_gateway

    def handle(self, store_id: str) -> int:
        """Delete the store; returns the units given back to product pools."""
        with self._uow:
            store = self._uow.stores.get_by_id(store_id)
            if store is None:
                raise StoreNotFoundError(store_id)

            returned = AllocationLedger(self._uow).release_all(ContainerRef.store(store_id))
            self._uow.stores.delete(store_id)
            self._uow.commit()

        self._legacy_gateway.store_deleted(store)
        return returned
