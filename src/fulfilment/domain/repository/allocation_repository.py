"""Abstract repository for the allocation table."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfilment.domain.model.allocation import Allocation, ContainerRef


class AllocationRepository(ABC):

    @abstractmethod
    def get(self, container: ContainerRef, product_id: str) -> Allocation | None:
        """Return the allocation for the pair, or None."""

    @abstractmethod
    def list_for_container(self, container: ContainerRef) -> list[Allocation]:
        """Return every allocation held by a container."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[Allocation]:
        """Return every allocation of a product, across containers."""

    @abstractmethod
    def save(self, allocation: Allocation) -> None:
        """Persist a new or updated allocation."""

    @abstractmethod
    def delete(self, container: ContainerRef, product_id: str) -> None:
        """Remove the allocation for the pair. Missing pairs are ignored."""
