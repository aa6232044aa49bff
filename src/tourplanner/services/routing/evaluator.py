"""Distance accounting along a tour."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Location
from ..geospatial import EARTH_RADIUS_KM, coordinate_distance_km


def leg_distances(
    tour: Sequence[int],
    locations: Sequence[Location],
    *,
    radius_km: float = EARTH_RADIUS_KM,
) -> list[float]:
    """Return the length of every consecutive leg, ``len(tour) - 1`` entries."""

    return [
        coordinate_distance_km(
            locations[tour[i]].coordinate,
            locations[tour[i + 1]].coordinate,
            radius_km=radius_km,
        )
        for i in range(len(tour) - 1)
    ]


def total_distance(
    tour: Sequence[int],
    locations: Sequence[Location],
    *,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Sum the great-circle legs of an open path. Empty and single-stop tours are 0."""

    return sum(leg_distances(tour, locations, radius_km=radius_km), 0.0)
