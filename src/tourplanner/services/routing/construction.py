"""Nearest-neighbour tour construction."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Location
from ..geospatial import EARTH_RADIUS_KM, coordinate_distance_km
from .models import Tour

logger = logging.getLogger(__name__)


def build_initial_tour(
    locations: Sequence[Location],
    *,
    radius_km: float = EARTH_RADIUS_KM,
) -> Tour:
    """Greedily walk from location 0 to the closest unvisited location.

    Ties go to the lowest index, so the result is reproducible for inputs with
    duplicate coordinates or equidistant candidates.
    """
    count = len(locations)
    if count < 1:
        raise ValueError("At least one location is required to build a tour.")

    visited = [False] * count
    visited[0] = True
    tour: Tour = [0]
    current = 0

    for _ in range(count - 1):
        nearest = -1
        nearest_distance = float("inf")
        origin = locations[current].coordinate
        for idx in range(count):
            if visited[idx]:
                continue
            distance = coordinate_distance_km(origin, locations[idx].coordinate, radius_km=radius_km)
            # Strict comparison keeps the first (lowest) index on ties.
            if distance < nearest_distance:
                nearest = idx
                nearest_distance = distance
        tour.append(nearest)
        visited[nearest] = True
        current = nearest

    logger.debug("Nearest-neighbour tour built for %d locations", count)
    return tour
