"""Routing orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Sequence

from ...config import settings
from ...models.domain import Coordinate, Location
from ...schemas.routing import (
    OptimizeRequest,
    OptimizeResponse,
    RouteSummaryModel,
    TourStopModel,
)
from ..geospatial import is_valid_coordinate
from ..outputs.routing_formatter import build_maps_url, format_summary
from .construction import build_initial_tour
from .errors import InsufficientLocations, InvalidCoordinate
from .evaluator import leg_distances, total_distance
from .models import OptimizationResult, TourStop
from .two_opt import two_opt

logger = logging.getLogger(__name__)

MIN_LOCATIONS = 2


def _validate_locations(locations: Sequence[Location], minimum: int) -> None:
    if len(locations) < minimum:
        raise InsufficientLocations(len(locations), minimum)
    for location in locations:
        if not is_valid_coordinate(location.latitude, location.longitude):
            raise InvalidCoordinate(location.latitude, location.longitude, location.name)


def _build_stops(tour: Sequence[int], locations: Sequence[Location], radius_km: float) -> list[TourStop]:
    legs = [0.0] + leg_distances(tour, locations, radius_km=radius_km)
    stops: list[TourStop] = []
    cumulative = 0.0
    for sequence, (index, leg) in enumerate(zip(tour, legs), start=1):
        location = locations[index]
        cumulative += leg
        stops.append(
            TourStop(
                index=index,
                name=location.name,
                sequence=sequence,
                latitude=location.latitude,
                longitude=location.longitude,
                distance_from_prev_km=leg,
                cumulative_km=cumulative,
            )
        )
    return stops


def optimize(
    locations: Sequence[Location],
    *,
    max_passes: int | None = None,
    radius_km: float | None = None,
) -> OptimizationResult:
    """Order ``locations`` with nearest-neighbour + 2-opt and compare against the input order.

    The first location stays the start of the route. The computation is
    deterministic and performs no I/O.
    """
    _validate_locations(locations, MIN_LOCATIONS)

    radius = radius_km if radius_km is not None else settings.earth_radius_km
    passes_cap = max_passes if max_passes is not None else settings.max_refine_passes

    naive_tour = list(range(len(locations)))
    constructed_tour = build_initial_tour(locations, radius_km=radius)
    refinement = two_opt(constructed_tour, locations, max_passes=passes_cap, radius_km=radius)

    naive_distance = total_distance(naive_tour, locations, radius_km=radius)
    constructed_distance = total_distance(constructed_tour, locations, radius_km=radius)
    optimized_distance = total_distance(refinement.tour, locations, radius_km=radius)
    saved = naive_distance - optimized_distance
    saved_percent = 100 * saved / naive_distance if naive_distance > 0 else 0.0

    logger.info(
        "Optimized %d locations: %.3f km -> %.3f km (%.1f%% saved, %d passes, %d swaps)",
        len(locations),
        naive_distance,
        optimized_distance,
        saved_percent,
        refinement.passes,
        refinement.swaps,
    )

    return OptimizationResult(
        naive_tour=naive_tour,
        constructed_tour=constructed_tour,
        optimized_tour=refinement.tour,
        naive_distance_km=naive_distance,
        constructed_distance_km=constructed_distance,
        optimized_distance_km=optimized_distance,
        saved_distance_km=saved,
        saved_percent=saved_percent,
        stops=_build_stops(refinement.tour, locations, radius),
        passes=refinement.passes,
        swaps=refinement.swaps,
        converged=refinement.converged,
    )


def locations_from_request(payload: OptimizeRequest) -> list[Location]:
    if len(payload.locations) > settings.max_locations:
        raise ValueError(
            f"Too many locations: {len(payload.locations)} (maximum {settings.max_locations})."
        )
    return [
        Location(name=item.name, coordinate=Coordinate(item.latitude, item.longitude))
        for item in payload.locations
    ]


def run_optimization(payload: OptimizeRequest) -> tuple[OptimizationResult, list[Location]]:
    locations = locations_from_request(payload)
    return optimize(locations, max_passes=payload.max_passes), locations


def optimize_request(payload: OptimizeRequest) -> OptimizeResponse:
    result, locations = run_optimization(payload)
    return OptimizeResponse(
        naive_tour=result.naive_tour,
        constructed_tour=result.constructed_tour,
        optimized_tour=result.optimized_tour,
        naive_distance_km=result.naive_distance_km,
        constructed_distance_km=result.constructed_distance_km,
        optimized_distance_km=result.optimized_distance_km,
        saved_distance_km=result.saved_distance_km,
        saved_percent=result.saved_percent,
        passes=result.passes,
        swaps=result.swaps,
        converged=result.converged,
        stops=[TourStopModel(**asdict(stop)) for stop in result.stops],
        maps_url=build_maps_url(result.optimized_tour, locations),
        summary=RouteSummaryModel(**format_summary(result)),
    )
