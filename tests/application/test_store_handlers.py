"""Integration tests for the store use cases."""

import pytest

from fulfilment.application.add_product import AddProductHandler
from fulfilment.application.create_store import CreateStoreHandler
from fulfilment.application.delete_store import DeleteStoreHandler
from fulfilment.application.list_stores import ListStoresHandler
from fulfilment.application.show_store import ShowStoreHandler
from fulfilment.application.update_store import UpdateStoreHandler
from fulfilment.application.upsert_allocation import UpsertAllocationHandler
from fulfilment.domain.exceptions import DuplicateNameError, StoreNotFoundError, ValidationError
from fulfilment.domain.model.allocation import ContainerRef
from tests.fakes import FakeUnitOfWork, RecordingLegacyGateway


def _setup() -> tuple[FakeUnitOfWork, RecordingLegacyGateway]:
    uow = FakeUnitOfWork()
    AddProductHandler(uow).handle("Widget", "15.00", stock=100)
    return uow, RecordingLegacyGateway()


class TestCreateStore:

    def test_create_notifies_legacy_system(self):
        uow, legacy = _setup()

        dto = CreateStoreHandler(uow, legacy).handle("Downtown", occupancy=12)

        assert (dto.id, dto.occupancy, dto.occupancy_mode) == ("1", 12, "MANUAL")
        assert legacy.calls == [("created", "1", "Downtown", 12)]

    def test_duplicate_name_rejected_without_notification(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Downtown")

        with pytest.raises(DuplicateNameError):
            CreateStoreHandler(uow, legacy).handle("downtown")

        assert len(legacy.calls) == 1

    def test_negative_occupancy_rejected(self):
        uow, legacy = _setup()
        with pytest.raises(ValidationError):
            CreateStoreHandler(uow, legacy).handle("Downtown", occupancy=-1)
        assert legacy.calls == []


class TestUpdateStore:

    def test_manual_store_takes_supplied_occupancy(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Downtown", occupancy=5)

        dto = UpdateStoreHandler(uow, legacy).handle("1", "Downtown East", occupancy=9)

        assert (dto.name, dto.occupancy, dto.occupancy_mode) == ("Downtown East", 9, "MANUAL")
        assert legacy.calls[-1] == ("updated", "1", "Downtown East", 9)

    def test_allocated_store_keeps_derived_occupancy(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Downtown")
        UpsertAllocationHandler(uow).handle(ContainerRef.store("1"), "1", 7)

        dto = UpdateStoreHandler(uow, legacy).handle("1", "Downtown", occupancy=500)

        assert (dto.occupancy, dto.occupancy_mode) == (7, "DERIVED")
        assert uow.stores.get_by_id("1").occupancy == 7

    def test_omitted_occupancy_keeps_current_value(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Downtown", occupancy=5)

        dto = UpdateStoreHandler(uow, legacy).handle("1", "Central")

        assert dto.occupancy == 5

    def test_rename_onto_other_store_rejected(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Downtown")
        CreateStoreHandler(uow, legacy).handle("Uptown")

        with pytest.raises(DuplicateNameError):
            UpdateStoreHandler(uow, legacy).handle("2", "DOWNTOWN")

    def test_update_unknown_rejected(self):
        uow, legacy = _setup()
        with pytest.raises(StoreNotFoundError):
            UpdateStoreHandler(uow, legacy).handle("7", "Anywhere")


class TestDeleteStore:

    def test_delete_returns_allocated_units(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Downtown")
        UpsertAllocationHandler(uow).handle(ContainerRef.store("1"), "1", 30)

        returned = DeleteStoreHandler(uow, legacy).handle("1")

        assert returned == 30
        assert uow.products.get_by_id("1").available_stock == 100
        assert uow.stores.get_by_id("1") is None
        assert uow.allocations.list_for_product("1") == []
        assert legacy.calls[-1][0] == "deleted"

    def test_delete_unknown_rejected(self):
        uow, legacy = _setup()
        with pytest.raises(StoreNotFoundError):
            DeleteStoreHandler(uow, legacy).handle("1")
        assert legacy.calls == []


class TestListStores:

    def test_lists_with_mode(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Uptown")
        CreateStoreHandler(uow, legacy).handle("Downtown")
        UpsertAllocationHandler(uow).handle(ContainerRef.store("1"), "1", 2)

        stores = ListStoresHandler(uow).handle()

        assert [(s.name, s.occupancy_mode) for s in stores] == [
            ("Downtown", "MANUAL"),
            ("Uptown", "DERIVED"),
        ]


class TestShowStore:

    def test_show_reports_derived_occupancy(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Uptown", occupancy=7)
        UpsertAllocationHandler(uow).handle(ContainerRef.store("1"), "1", 2)

        dto = ShowStoreHandler(uow).handle("1")

        assert (dto.name, dto.occupancy, dto.occupancy_mode) == ("Uptown", 2, "DERIVED")

    def test_show_manual_store(self):
        uow, legacy = _setup()
        CreateStoreHandler(uow, legacy).handle("Uptown", occupancy=7)

        dto = ShowStoreHandler(uow).handle("1")

        assert (dto.occupancy, dto.occupancy_mode) == (7, "MANUAL")

    def test_show_unknown_rejected(self):
        uow, _ = _setup()
        with pytest.raises(StoreNotFoundError):
            ShowStoreHandler(uow).handle("9")
