"""Application service: Show Store use case (query)."""

from __future__ import annotations

from fulfilment.application.dto import StoreDTO, store_to_dto
from fulfilment.domain.exceptions import StoreNotFoundError
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.quantity_synchronizer import ContainerQuantitySynchronizer


class ShowStoreHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, store_id: str) -> StoreDTO:
        """One store with its occupancy and whether that value is typed or derived."""
        with self._uow:
            store = self._uow.stores.get_by_id(store_id)
            if store is None:
                raise StoreNotFoundError(store_id)
            mode = ContainerQuantitySynchronizer(self._uow).occupancy_mode(store)
        return store_to_dto(store, mode)
