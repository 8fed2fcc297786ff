"""Port to the location reference data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfilment.domain.model.location import Location


class LocationResolver(ABC):

    @abstractmethod
    def resolve(self, identifier: str) -> Location | None:
        """Return the location's capacity bounds, or None if unknown."""
