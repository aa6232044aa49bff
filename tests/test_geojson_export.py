import pytest

from tourplanner.models.domain import Coordinate, Location
from tourplanner.services.export.geojson import route_to_geojson
from tourplanner.services.routing.models import OptimizationResult
from tourplanner.services.routing.service import optimize


def _location(name: str, lat: float, lon: float) -> Location:
    return Location(name=name, coordinate=Coordinate(lat, lon))


def test_route_to_geojson():
    locations = [
        _location("Jeddah", 21.5433, 39.1728),
        _location("Riyadh", 24.7136, 46.6753),
        _location("Makkah", 21.3891, 39.8579),
    ]
    result = optimize(locations)

    collection = route_to_geojson(result)

    assert collection["type"] == "FeatureCollection"
    features = collection["features"]
    assert len(features) == 4
    points, line = features[:3], features[3]
    assert [feature["properties"]["name"] for feature in points] == ["Jeddah", "Makkah", "Riyadh"]
    assert points[0]["geometry"]["type"] == "Point"
    assert tuple(points[0]["geometry"]["coordinates"]) == pytest.approx((39.1728, 21.5433))
    assert line["geometry"]["type"] == "LineString"
    assert len(line["geometry"]["coordinates"]) == 3
    assert line["properties"]["total_distance_km"] == pytest.approx(result.optimized_distance_km)


def test_route_without_stops_is_rejected():
    empty = OptimizationResult(
        naive_tour=[],
        constructed_tour=[],
        optimized_tour=[],
        naive_distance_km=0.0,
        constructed_distance_km=0.0,
        optimized_distance_km=0.0,
        saved_distance_km=0.0,
        saved_percent=0.0,
    )

    with pytest.raises(ValueError):
        route_to_geojson(empty)
