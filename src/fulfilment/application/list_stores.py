"""Application service: List Stores use case (query)."""

from __future__ import annotations

from fulfilment.application.dto import StoreDTO, store_to_dto
from fulfilment.domain.repository.unit_of_work import UnitOfWork
from fulfilment.domain.service.quantity_synchronizer import ContainerQuantitySynchronizer


class ListStoresHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[StoreDTO]:
        with self._uow:
            synchronizer = ContainerQuantitySynchronizer(self._uow)
            stores = sorted(self._uow.stores.list_all(), key=lambda s: s.name.lower())
            return [store_to_dto(s, synchronizer.occupancy_mode(s)) for s in stores]
