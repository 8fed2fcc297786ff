"""Application service: Update Store use case.

Renames a store and, for stores without allocations, accepts a
hand-entered occupancy. Once a store holds allocations the supplied
occupancy is ignored and the derived total stays in place.
"""

from __future__ import annotations

from fulfilment.application.dto import StoreDTO, store_to_dto
from fulfilment.domain.exceptions import DuplicateNameError, StoreNotFoundError
from fulfilment.domain.repository.legacy_store_gateway import LegacyStoreGateway
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.quantity_synchronizer import ContainerQuantitySynchronizer


class UpdateStoreHandler:

    def __init__(self, uow: UnitOfWork, legacy_gateway: LegacyStoreGateway) -> None:
        self._uow = uow
        self._legacy_gateway = legacy_gateway

    def handle(self, store_id: str, name: str, occupancy: int | None = None) -> StoreDTO:
        """Update a store.

        Args:
            occupancy: Manual occupancy. None keeps the current value.
        """
        with self._uow:
            store = self._uow.stores.get_by_id(store_id)
            if store is None:
                raise StoreNotFoundError(store_id)

            store.rename(name)
            clash = self._uow.stores.get_by_name(store.name)
            if clash is not None and clash.id != store.id:
                raise DuplicateNameError("Store", store.name)

            synchronizer = ContainerQuantitySynchronizer(self._uow)
            if occupancy is None:
                mode = synchronizer.occupancy_mode(store)
            else:
                mode = synchronizer.apply_manual_occupancy(store, occupancy)

            self._uow.stores.save(store)
            self._uow.commit()

        self._legacy_gateway.store_updated(store)
        return store_to_dto(store, mode)
