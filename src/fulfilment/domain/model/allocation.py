"""Allocations: units of a product physically held in a container.

Containers and products are linked by index, never by reference: an
allocation is keyed by ``(ContainerRef, product_id)`` and the ledger owns
the table of allocations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fulfilment.domain.exceptions import InvalidQuantityError


class ContainerKind(Enum):
    STORE = "STORE"
    WAREHOUSE = "WAREHOUSE"


@dataclass(frozen=True)
class ContainerRef:
    """Identifies a container: a store by id, a warehouse by business unit code."""

    kind: ContainerKind
    id: str

    @staticmethod
    def store(store_id: str) -> ContainerRef:
        return ContainerRef(ContainerKind.STORE, store_id)

    @staticmethod
    def warehouse(business_unit_code: str) -> ContainerRef:
        return ContainerRef(ContainerKind.WAREHOUSE, business_unit_code)

    @property
    def is_warehouse(self) -> bool:
        return self.kind is ContainerKind.WAREHOUSE

    def __str__(self) -> str:
        if self.is_warehouse:
            return f"warehouse '{self.id}'"
        return f"store #{self.id}"


@dataclass
class Allocation:
    """A positive quantity of one product bound to one container."""

    container: ContainerRef
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)

    @property
    def key(self) -> tuple[ContainerRef, str]:
        return (self.container, self.product_id)


@dataclass(frozen=True)
class AllocationView:
    """Read model of an allocation, joined with its product's name."""

    container: ContainerRef
    product_id: str
    product_name: str
    quantity: int
