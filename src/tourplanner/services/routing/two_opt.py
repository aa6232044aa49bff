"""2-opt local search for open paths.

The first and last stops are fixed; only interior segments are reversed. A pass
scans every interior pair ``1 <= i < j <= n - 2`` and reverses ``tour[i..j]``
whenever the two replacement edges are strictly shorter than the two edges they
replace. Passes repeat until one finds no improving move, or until the optional
pass cap is reached.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Location
from ..geospatial import EARTH_RADIUS_KM, coordinate_distance_km
from .models import RefinementResult, Tour

logger = logging.getLogger(__name__)


def _validate_tour(tour: Sequence[int], count: int) -> None:
    if len(tour) != count or sorted(tour) != list(range(count)):
        raise ValueError(f"Tour must be a permutation of 0..{count - 1}, got {list(tour)}.")


def two_opt(
    initial_tour: Sequence[int],
    locations: Sequence[Location],
    *,
    max_passes: int | None = None,
    radius_km: float = EARTH_RADIUS_KM,
) -> RefinementResult:
    """Improve ``initial_tour`` with first-improvement 2-opt.

    The input sequence is never mutated. ``max_passes=None`` runs until a local
    optimum is reached.
    """
    if max_passes is not None and max_passes < 1:
        raise ValueError("max_passes must be at least 1 when provided.")
    _validate_tour(initial_tour, len(locations))

    tour: Tour = list(initial_tour)
    size = len(tour)
    if size <= 3:
        return RefinementResult(tour=tour, passes=0, swaps=0, converged=True)

    coords = [location.coordinate for location in locations]

    def dist(a: int, b: int) -> float:
        return coordinate_distance_km(coords[a], coords[b], radius_km=radius_km)

    passes = 0
    swaps = 0
    improved = True
    while improved:
        if max_passes is not None and passes >= max_passes:
            logger.info("2-opt stopped after %d passes before reaching a local optimum", passes)
            return RefinementResult(tour=tour, passes=passes, swaps=swaps, converged=False)

        improved = False
        passes += 1
        pass_swaps = 0
        for i in range(1, size - 2):
            for j in range(i + 1, size - 1):
                removed = dist(tour[i - 1], tour[i]) + dist(tour[j], tour[j + 1])
                added = dist(tour[i - 1], tour[j]) + dist(tour[i], tour[j + 1])
                if added < removed:
                    tour[i : j + 1] = tour[i : j + 1][::-1]
                    improved = True
                    pass_swaps += 1
        swaps += pass_swaps
        logger.debug("2-opt pass %d accepted %d swaps", passes, pass_swaps)

    return RefinementResult(tour=tour, passes=passes, swaps=swaps, converged=True)


def refine(
    initial_tour: Sequence[int],
    locations: Sequence[Location],
    *,
    max_passes: int | None = None,
    radius_km: float = EARTH_RADIUS_KM,
) -> Tour:
    """Return the 2-opt improved tour without the pass statistics."""

    return two_opt(initial_tour, locations, max_passes=max_passes, radius_km=radius_km).tour
