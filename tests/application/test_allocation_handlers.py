"""Integration tests for the allocation use cases."""

from datetime import datetime, timezone

import pytest

from fulfilment.application.list_allocations import ListAllocationsHandler
from fulfilment.application.remove_allocation import RemoveAllocationHandler
from fulfilment.application.upsert_allocation import UpsertAllocationHandler
from fulfilment.domain.exceptions import (
    CapacityExceededError,
    ContainerArchivedError,
    EntityNotFoundError,
    InsufficientStockError,
    StoreNotFoundError,
)
from fulfilment.domain.model.allocation import ContainerRef
from fulfilment.domain.model.product import Product
from fulfilment.domain.model.store import Store
from fulfilment.domain.model.value_objects import Money
from fulfilment.domain.model.warehouse import Warehouse
from tests.fakes import FakeUnitOfWork

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)

STORE = ContainerRef.store("1")
WAREHOUSE = ContainerRef.warehouse("MWH.001")


def _setup(capacity: int = 20) -> FakeUnitOfWork:
    return FakeUnitOfWork(
        products=[
            Product(id="1", name="Widget", price=Money.of("15.00"), available_stock=100),
            Product(id="2", name="Gadget", price=Money.of("25.00"), available_stock=50),
        ],
        stores=[Store(id="1", name="Downtown", occupancy=4)],
        warehouses=[Warehouse("MWH.001", "AMSTERDAM-001", capacity, created_at=T0)],
    )


class TestUpsertAllocation:

    def test_upsert_commits_and_returns_dto(self):
        uow = _setup()

        dto = UpsertAllocationHandler(uow).handle(WAREHOUSE, "1", 12)

        assert dto.container_kind == "WAREHOUSE"
        assert dto.container_id == "MWH.001"
        assert dto.product_name == "Widget"
        assert dto.quantity == 12
        assert uow.commits == 1

    def test_capacity_breach_rolls_back_the_pool_debit(self):
        uow = _setup(capacity=20)
        handler = UpsertAllocationHandler(uow)
        handler.handle(WAREHOUSE, "1", 12)

        with pytest.raises(CapacityExceededError):
            handler.handle(WAREHOUSE, "1", 25)

        assert uow.products.get_by_id("1").available_stock == 88
        assert uow.allocations.get(WAREHOUSE, "1").quantity == 12
        assert uow.warehouses.get_by_code("MWH.001").occupancy == 12
        assert uow.commits == 1

    def test_insufficient_stock_leaves_nothing_behind(self):
        uow = _setup()

        with pytest.raises(InsufficientStockError):
            UpsertAllocationHandler(uow).handle(STORE, "2", 51)

        assert uow.products.get_by_id("2").available_stock == 50
        assert uow.allocations.get(STORE, "2") is None
        assert uow.commits == 0

    def test_first_allocation_overrides_manual_store_occupancy(self):
        uow = _setup()

        UpsertAllocationHandler(uow).handle(STORE, "1", 3)

        assert uow.stores.get_by_id("1").occupancy == 3


class TestRemoveAllocation:

    def test_remove_returns_units(self):
        uow = _setup()
        UpsertAllocationHandler(uow).handle(STORE, "1", 10)

        returned = RemoveAllocationHandler(uow).handle(STORE, "1")

        assert returned == 10
        assert uow.products.get_by_id("1").available_stock == 100
        assert uow.commits == 2


class TestListAllocations:

    def test_lists_sorted_by_product_name(self):
        uow = _setup()
        upsert = UpsertAllocationHandler(uow)
        upsert.handle(STORE, "1", 1)
        upsert.handle(STORE, "2", 2)

        dtos = ListAllocationsHandler(uow).handle(STORE)

        assert [(d.product_name, d.quantity) for d in dtos] == [("Gadget", 2), ("Widget", 1)]

    def test_empty_container(self):
        assert ListAllocationsHandler(_setup()).handle(WAREHOUSE) == []

    def test_unknown_container_rejected(self):
        with pytest.raises(StoreNotFoundError):
            ListAllocationsHandler(_setup()).handle(ContainerRef.store("42"))

    def test_archived_warehouse_is_still_listable(self):
        uow = _setup()
        UpsertAllocationHandler(uow).handle(WAREHOUSE, "1", 5)
        w = uow.warehouses.get_by_code("MWH.001")
        w.archive(T0)
        uow.warehouses.update(w)

        assert len(ListAllocationsHandler(uow).handle(WAREHOUSE)) == 1
        with pytest.raises(ContainerArchivedError):
            UpsertAllocationHandler(uow).handle(WAREHOUSE, "1", 6)


class TestNotFoundHierarchy:

    def test_not_found_errors_share_a_base(self):
        with pytest.raises(EntityNotFoundError):
            RemoveAllocationHandler(_setup()).handle(STORE, "1")
