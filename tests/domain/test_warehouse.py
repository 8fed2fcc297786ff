"""Unit tests for the Warehouse aggregate."""

from datetime import datetime, timezone

import pytest

from fulfilment.domain.exceptions import AlreadyArchivedError, ValidationError
from fulfilment.domain.model.warehouse import Warehouse, WarehouseStatus

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _warehouse(**overrides) -> Warehouse:
    fields = dict(
        business_unit_code="MWH.001",
        location="AMSTERDAM-001",
        capacity=50,
        stock=10,
        created_at=T0,
    )
    fields.update(overrides)
    return Warehouse.create(**fields)


class TestCreate:

    def test_new_warehouse_is_active_at_version_zero(self):
        w = _warehouse()
        assert w.status is WarehouseStatus.ACTIVE
        assert w.version == 0
        assert w.occupancy == 10
        assert w.archived_at is None

    def test_reconstituted_warehouse_defaults_to_utc_timestamp(self):
        w = Warehouse("MWH.009", "ZWOLLE-001", 30)
        assert w.created_at.tzinfo is timezone.utc

    def test_code_is_trimmed(self):
        assert _warehouse(business_unit_code="  MWH.002 ").business_unit_code == "MWH.002"

    @pytest.mark.parametrize("code", ["", "   "])
    def test_blank_code_rejected(self, code):
        with pytest.raises(ValidationError, match="code is required"):
            _warehouse(business_unit_code=code)

    def test_blank_location_rejected(self):
        with pytest.raises(ValidationError, match="Location is required"):
            _warehouse(location=" ")

    @pytest.mark.parametrize("capacity", [0, -5])
    def test_non_positive_capacity_rejected(self, capacity):
        with pytest.raises(ValidationError, match="positive"):
            _warehouse(capacity=capacity)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _warehouse(stock=-1)


class TestTransitions:

    def test_replace_overwrites_everything_but_identity(self):
        w = _warehouse()
        w.replace(location="ZWOLLE-001", capacity=30, stock=5)
        assert (w.business_unit_code, w.location, w.capacity, w.occupancy) == (
            "MWH.001",
            "ZWOLLE-001",
            30,
            5,
        )
        assert w.created_at == T0

    def test_archive_is_one_way(self):
        w = _warehouse()
        archived_at = datetime(2024, 2, 1, tzinfo=timezone.utc)
        w.archive(archived_at)
        assert w.is_archived
        assert w.archived_at == archived_at

        with pytest.raises(AlreadyArchivedError, match="already archived"):
            w.archive(archived_at)

    def test_archived_warehouse_cannot_be_replaced(self):
        w = _warehouse()
        w.archive(T0)
        with pytest.raises(AlreadyArchivedError):
            w.replace(location="ZWOLLE-001", capacity=30, stock=0)
