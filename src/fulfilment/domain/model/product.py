"""Product aggregate.

A product owns its unallocated stock pool. Units leave the pool only when
the allocation ledger places them in a container, and come back when an
allocation shrinks or is removed.
"""

from __future__ import annotations

from dataclasses import dataclass

from fulfilment.domain.exceptions import InsufficientStockError, ValidationError
from fulfilment.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalogue.

    Invariant: ``available_stock`` is never negative.
    """

    id: str
    name: str
    price: Money
    description: str = ""
    available_stock: int = 0

    def withdraw(self, quantity: int) -> None:
        """Take units out of the pool for an allocation."""
        if quantity <= 0:
            raise ValidationError("Withdraw quantity must be positive")
        if quantity > self.available_stock:
            raise InsufficientStockError(
                product_id=self.id,
                product_name=self.name,
                requested=quantity,
                available=self.available_stock,
            )
        self.available_stock -= quantity

    def restock(self, quantity: int) -> None:
        """Return units to the pool (allocation reduced or removed)."""
        if quantity <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.available_stock += quantity

    def update_details(
        self,
        name: str,
        description: str,
        price: Money,
        available_stock: int,
    ) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if available_stock < 0:
            raise ValidationError("Product stock cannot be negative")
        self.name = name.strip()
        self.description = description
        self.price = price
        self.available_stock = available_stock
