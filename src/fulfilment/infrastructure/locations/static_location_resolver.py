"""Location reference data shipped with the application."""

from __future__ import annotations

from fulfilment.domain.model.location import Location
from fulfilment.domain.repository.location_resolver import LocationResolver

KNOWN_LOCATIONS: tuple[Location, ...] = (
    Location("ZWOLLE-001", 1, 40),
    Location("ZWOLLE-002", 2, 50),
    Location("AMSTERDAM-001", 5, 100),
    Location("AMSTERDAM-002", 3, 75),
    Location("TILBURG-001", 1, 40),
    Location("HELMOND-001", 1, 45),
    Location("EINDHOVEN-001", 2, 70),
    Location("VETSBY-001", 1, 90),
)


class StaticLocationResolver(LocationResolver):

    def __init__(self, locations: tuple[Location, ...] | list[Location] = KNOWN_LOCATIONS) -> None:
        self._by_identifier = {loc.identifier: loc for loc in locations}

    def resolve(self, identifier: str) -> Location | None:
        return self._by_identifier.get(identifier)
