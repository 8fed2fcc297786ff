"""Application service: Create Store use case.

New stores start in manual occupancy mode with whatever occupancy was
supplied; their first allocation switches them to derived mode.
"""

from __future__ import annotations

from fulfilment.application.dto import StoreDTO, store_to_dto
from fulfilment.domain.exceptions import DuplicateNameError
from fulfilment.domain.model.store import OccupancyMode, Store
from fulfilment.domain.repository.legacy_store_gateway import LegacyStoreGateway
from fulfilment.domain.repository.unit_of_work import UnitOfWork


class CreateStoreHandler:

    def __init__(self, uow: UnitOfWork, legacy_gateway: LegacyStoreGateway) -> None:
        self._uow = uow
        self._legacy_gateway = legacy_gateway

    def handle(self, name: str, occupancy: int = 0) -> StoreDTO:
        with self._uow:
            store = Store.create(self._uow.stores.next_id(), name, occupancy)
            if self._uow.stores.get_by_name(store.name) is not None:
                raise DuplicateNameError("Store", store.name)
            self._uow.stores.save(store)
            self._uow.commit()

        self._legacy_gateway.store_created(store)
        return store_to_dto(store, OccupancyMode.MANUAL)
