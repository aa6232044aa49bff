import math

import pytest

from tourplanner.models.domain import Coordinate
from tourplanner.services.geospatial import (
    EARTH_RADIUS_KM,
    coordinate_distance_km,
    haversine_km,
    is_valid_coordinate,
)


def test_one_degree_along_equator():
    distance = haversine_km(0.0, 0.0, 0.0, 1.0)

    assert distance == pytest.approx(EARTH_RADIUS_KM * math.pi / 180, rel=1e-12)


def test_antipodal_points_are_half_circumference():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


def test_paris_to_london():
    paris = Coordinate(48.8566, 2.3522)
    london = Coordinate(51.5074, -0.1278)

    assert coordinate_distance_km(paris, london) == pytest.approx(343.5, abs=1.0)


@pytest.mark.parametrize(
    "a, b",
    [
        (Coordinate(21.5, 39.2), Coordinate(21.55, 39.25)),
        (Coordinate(-33.8688, 151.2093), Coordinate(40.7128, -74.0060)),
        (Coordinate(89.9, -179.9), Coordinate(-89.9, 179.9)),
    ],
)
def test_distance_is_symmetric(a: Coordinate, b: Coordinate):
    assert coordinate_distance_km(a, b) == coordinate_distance_km(b, a)


def test_distance_to_self_is_zero():
    point = Coordinate(24.7136, 46.6753)

    assert coordinate_distance_km(point, point) == 0.0


def test_radius_scales_distance():
    a, b = Coordinate(10.0, 10.0), Coordinate(11.0, 12.0)

    assert coordinate_distance_km(a, b, radius_km=1.0) * EARTH_RADIUS_KM == pytest.approx(
        coordinate_distance_km(a, b)
    )


@pytest.mark.parametrize(
    "lat, lon, expected",
    [
        (0.0, 0.0, True),
        (90.0, 180.0, True),
        (-90.0, -180.0, True),
        (90.5, 0.0, False),
        (0.0, -180.01, False),
        (float("nan"), 0.0, False),
        (0.0, float("inf"), False),
    ],
)
def test_is_valid_coordinate(lat: float, lon: float, expected: bool):
    assert is_valid_coordinate(lat, lon) is expected


def test_near_antipodal_pair_does_not_overflow():
    south, north = Coordinate(-87.5, -180.0), Coordinate(87.5, 0.0)

    assert coordinate_distance_km(south, north) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


def test_near_antipodal_pair_through_optimizer():
    from tourplanner.models.domain import Location
    from tourplanner.services.routing.service import optimize

    locations = [
        Location(name="South", coordinate=Coordinate(-87.5, -180.0)),
        Location(name="North", coordinate=Coordinate(87.5, 0.0)),
    ]

    result = optimize(locations)

    assert result.optimized_tour == [0, 1]
    assert result.optimized_distance_km == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)
