import random

import pytest

from tourplanner.models.domain import Coordinate, Location
from tourplanner.services.routing.construction import build_initial_tour


def _location(name: str, lat: float, lon: float) -> Location:
    return Location(name=name, coordinate=Coordinate(lat, lon))


def test_single_location_tour():
    assert build_initial_tour([_location("Only", 21.5, 39.2)]) == [0]


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        build_initial_tour([])


def test_nearest_neighbour_follows_closest_point():
    locations = [
        _location("A", 0.0, 0.0),
        _location("B", 0.0, 2.0),
        _location("C", 0.0, 1.0),
        _location("D", 0.0, 3.0),
    ]

    assert build_initial_tour(locations) == [0, 2, 1, 3]


def test_ties_pick_lowest_index():
    locations = [
        _location("Origin", 0.0, 0.0),
        _location("East", 0.0, 1.0),
        _location("West", 0.0, -1.0),
    ]

    assert build_initial_tour(locations) == [0, 1, 2]


def test_duplicate_coordinates_keep_input_order():
    locations = [_location(f"Stop {i}", 21.5, 39.2) for i in range(5)]

    assert build_initial_tour(locations) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("count", [1, 2, 7, 25])
def test_tour_is_permutation_starting_at_zero(count: int):
    rng = random.Random(count)
    locations = [
        _location(f"P{i}", rng.uniform(20.0, 22.0), rng.uniform(38.0, 40.0)) for i in range(count)
    ]

    tour = build_initial_tour(locations)

    assert tour[0] == 0
    assert sorted(tour) == list(range(count))
