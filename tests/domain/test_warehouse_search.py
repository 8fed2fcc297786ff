"""Unit tests for WarehouseSearch and SearchCriteria."""

from datetime import datetime, timedelta, timezone

import pytest

from fulfilment.domain.exceptions import (
    InvalidPageError,
    InvalidPageSizeError,
    InvalidRangeError,
    InvalidSortError,
)
from fulfilment.domain.model.warehouse import Warehouse
from fulfilment.domain.service.warehouse_search import SearchCriteria, WarehouseSearch
from tests.fakes import FakeWarehouseRepository

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _repo() -> FakeWarehouseRepository:
    """Five warehouses created a day apart; W4 is archived."""
    rows = [
        ("W1", "AMSTERDAM-001", 50),
        ("W2", "ZWOLLE-001", 30),
        ("W3", "AMSTERDAM-001", 50),
        ("W4", "AMSTERDAM-001", 90),
        ("W5", "AMSTERDAM-001", 20),
    ]
    warehouses = [
        Warehouse(code, location, capacity, created_at=T0 + timedelta(days=i))
        for i, (code, location, capacity) in enumerate(rows)
    ]
    warehouses[3].archived_at = T0 + timedelta(days=10)
    return FakeWarehouseRepository(warehouses)


def _codes(criteria: SearchCriteria) -> list[str]:
    return [w.business_unit_code for w in WarehouseSearch(_repo()).search(criteria)]


class TestFiltering:

    def test_defaults_return_active_by_creation_date(self):
        assert _codes(SearchCriteria()) == ["W1", "W2", "W3", "W5"]

    def test_archived_never_returned(self):
        assert "W4" not in _codes(SearchCriteria(location="AMSTERDAM-001", min_capacity=90))

    def test_location_filter_is_exact(self):
        assert _codes(SearchCriteria(location="AMSTERDAM-001")) == ["W1", "W3", "W5"]
        assert _codes(SearchCriteria(location="AMSTERDAM")) == []

    def test_blank_location_means_any(self):
        assert _codes(SearchCriteria(location="  ")) == ["W1", "W2", "W3", "W5"]

    def test_capacity_bounds_are_inclusive(self):
        assert _codes(SearchCriteria(min_capacity=30, max_capacity=50)) == ["W1", "W2", "W3"]

    def test_equal_bounds_allowed(self):
        assert _codes(SearchCriteria(min_capacity=50, max_capacity=50)) == ["W1", "W3"]


class TestSorting:

    def test_capacity_ascending_keeps_ties_in_creation_order(self):
        assert _codes(SearchCriteria(sort_by="capacity")) == ["W5", "W2", "W1", "W3"]

    def test_capacity_descending_keeps_ties_in_creation_order(self):
        assert _codes(SearchCriteria(sort_by="capacity", sort_order="desc")) == [
            "W1",
            "W3",
            "W2",
            "W5",
        ]

    def test_created_at_descending(self):
        assert _codes(SearchCriteria(sort_order="desc")) == ["W5", "W3", "W2", "W1"]


class TestPaging:

    def test_pages_slice_the_sorted_result(self):
        assert _codes(SearchCriteria(page=0, page_size=3)) == ["W1", "W2", "W3"]
        assert _codes(SearchCriteria(page=1, page_size=3)) == ["W5"]

    def test_page_past_the_end_is_empty(self):
        assert _codes(SearchCriteria(page=5, page_size=3)) == []

    def test_max_page_size_accepted(self):
        assert len(_codes(SearchCriteria(page_size=100))) == 4


class TestValidation:

    def test_unknown_sort_field_rejected(self):
        with pytest.raises(InvalidSortError, match="sortBy must be either"):
            SearchCriteria(sort_by="location")

    def test_unknown_sort_order_rejected(self):
        with pytest.raises(InvalidSortError, match="sortOrder"):
            SearchCriteria(sort_order="up")

    def test_negative_page_rejected(self):
        with pytest.raises(InvalidPageError):
            SearchCriteria(page=-1)

    @pytest.mark.parametrize("page_size", [0, 101])
    def test_page_size_out_of_range_rejected(self, page_size):
        with pytest.raises(InvalidPageSizeError):
            SearchCriteria(page_size=page_size)

    def test_inverted_range_rejected(self):
        with pytest.raises(InvalidRangeError):
            SearchCriteria(min_capacity=60, max_capacity=10)

    def test_negative_bound_rejected(self):
        with pytest.raises(InvalidRangeError):
            SearchCriteria(min_capacity=-1)
