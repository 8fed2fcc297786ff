"""JSON-backed implementation of ProductRepository.

Works on the raw records loaded by JsonUnitOfWork; nothing touches the
file until the unit of work commits.
"""

from __future__ import annotations

from decimal import Decimal

from fulfilment.domain.model.product import Product
from fulfilment.domain.model.value_objects import Money
from fulfilment.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        if not self._records:
            return "1"
        return str(max(int(r["id"]) for r in self._records) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._records:
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._records]

    def save(self, product: Product) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == product.id:
                self._records[i] = self._to_raw(product)
                return
        self._records.append(self._to_raw(product))

    def delete(self, product_id: str) -> None:
        self._records[:] = [r for r in self._records if r["id"] != product_id]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "available_stock": product.available_stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "EUR")),
            available_stock=raw.get("available_stock", 0),
        )
