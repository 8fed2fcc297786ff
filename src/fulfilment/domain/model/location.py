"""Location reference data."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Legal capacity range for any warehouse sited at ``identifier``.

    Only ``max_capacity`` is enforced; ``min_capacity`` is carried as
    reference data.
    """

    identifier: str
    min_capacity: int
    max_capacity: int
