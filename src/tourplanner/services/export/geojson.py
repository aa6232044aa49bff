"""GeoJSON export of optimized routes."""

from __future__ import annotations

from typing import Any, Dict, List

from shapely.geometry import LineString, Point, mapping

from ..routing.models import OptimizationResult


def route_to_geojson(result: OptimizationResult) -> Dict[str, Any]:
    """Convert an optimization result into a GeoJSON FeatureCollection.

    One Point feature per stop in visiting order, followed by a LineString for
    the whole path. GeoJSON uses lon,lat order (x,y).
    """
    if len(result.stops) < 2:
        raise ValueError("A route needs at least 2 stops to export as GeoJSON.")

    features: List[Dict[str, Any]] = [
        {
            "type": "Feature",
            "geometry": mapping(Point(stop.longitude, stop.latitude)),
            "properties": {
                "sequence": stop.sequence,
                "index": stop.index,
                "name": stop.name,
                "distance_from_prev_km": stop.distance_from_prev_km,
            },
        }
        for stop in result.stops
    ]

    path = LineString([(stop.longitude, stop.latitude) for stop in result.stops])
    features.append(
        {
            "type": "Feature",
            "geometry": mapping(path),
            "properties": {
                "kind": "route",
                "total_distance_km": result.optimized_distance_km,
                "saved_distance_km": result.saved_distance_km,
                "saved_percent": result.saved_percent,
            },
        }
    )
    return {"type": "FeatureCollection", "features": features}
