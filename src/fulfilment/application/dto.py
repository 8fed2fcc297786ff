"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fulfilment.domain.model.allocation import AllocationView
from fulfilment.domain.model.product import Product
from fulfilment.domain.model.store import OccupancyMode, Store
from fulfilment.domain.model.warehouse import Warehouse


@dataclass(frozen=True)
class AllocationDTO:
    container_kind: str
    container_id: str
    product_id: str
    product_name: str
    quantity: int


@dataclass(frozen=True)
class WarehouseDTO:
    business_unit_code: str
    location: str
    capacity: int
    stock: int
    status: str
    created_at: datetime
    archived_at: datetime | None
    version: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "15.00 EUR"
    available_stock: int


@dataclass(frozen=True)
class StoreDTO:
    id: str
    name: str
    occupancy: int
    occupancy_mode: str


# --- Mapping --------------------------------------------------------------


def allocation_to_dto(view: AllocationView) -> AllocationDTO:
    return AllocationDTO(
        container_kind=view.container.kind.value,
        container_id=view.container.id,
        product_id=view.product_id,
        product_name=view.product_name,
        quantity=view.quantity,
    )


def warehouse_to_dto(warehouse: Warehouse) -> WarehouseDTO:
    return WarehouseDTO(
        business_unit_code=warehouse.business_unit_code,
        location=warehouse.location,
        capacity=warehouse.capacity,
        stock=warehouse.occupancy,
        status=warehouse.status.value,
        created_at=warehouse.created_at,
        archived_at=warehouse.archived_at,
        version=warehouse.version,
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        available_stock=product.available_stock,
    )


def store_to_dto(store: Store, mode: OccupancyMode) -> StoreDTO:
    return StoreDTO(
        id=store.id,
        name=store.name,
        occupancy=store.occupancy,
        occupancy_mode=mode.value,
    )
