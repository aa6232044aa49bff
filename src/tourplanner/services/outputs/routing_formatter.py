"""Serializers for routing outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict
from typing import TYPE_CHECKING, Sequence

from ...config import settings
from ...models.domain import Location

if TYPE_CHECKING:
    from ..routing.models import OptimizationResult


def build_maps_url(tour: Sequence[int], locations: Sequence[Location], base_url: str | None = None) -> str:
    """Directions deep link visiting ``lat,lng`` waypoints in tour order."""

    base = (base_url or settings.map_base_url).rstrip("/")
    waypoints = "/".join(f"{locations[i].latitude},{locations[i].longitude}" for i in tour)
    return f"{base}/{waypoints}"


def format_summary(result: OptimizationResult) -> dict[str, str]:
    return {
        "original_distance": f"{result.naive_distance_km:.0f} km",
        "optimized_distance": f"{result.optimized_distance_km:.0f} km",
        "saved_distance": f"{result.saved_distance_km:.0f} km",
        "saved_percent": f"{result.saved_percent:.1f}% shorter",
    }


def result_to_json(result: OptimizationResult) -> dict:
    return {
        "naive_tour": list(result.naive_tour),
        "constructed_tour": list(result.constructed_tour),
        "optimized_tour": list(result.optimized_tour),
        "naive_distance_km": result.naive_distance_km,
        "constructed_distance_km": result.constructed_distance_km,
        "optimized_distance_km": result.optimized_distance_km,
        "saved_distance_km": result.saved_distance_km,
        "saved_percent": result.saved_percent,
        "passes": result.passes,
        "swaps": result.swaps,
        "converged": result.converged,
        "stops": [asdict(stop) for stop in result.stops],
    }


def result_to_csv(result: OptimizationResult) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "index",
        "name",
        "latitude",
        "longitude",
        "distance_from_prev_km",
        "cumulative_km",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for stop in result.stops:
        writer.writerow(
            {
                "sequence": stop.sequence,
                "index": stop.index,
                "name": stop.name,
                "latitude": stop.latitude,
                "longitude": stop.longitude,
                "distance_from_prev_km": stop.distance_from_prev_km,
                "cumulative_km": stop.cumulative_km,
            }
        )
    return buffer.getvalue()
