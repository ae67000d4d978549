"""Tests for the static route."""

from caravan.engine.route import (
    ROUTE,
    TOTAL_DISTANCE,
    get_distance_to_next,
    get_location,
    get_next_location,
    get_river_crossings,
    is_destination,
)
from caravan.models.location import LocationType


def test_route_starts_and_ends_correctly():
    assert ROUTE[0].type == LocationType.START
    assert ROUTE[-1].type == LocationType.DESTINATION
    assert [loc.type for loc in ROUTE].count(LocationType.DESTINATION) == 1
    assert TOTAL_DISTANCE == 2000


def test_distances_strictly_increase():
    distances = [loc.distance_from_start for loc in ROUTE]

    assert distances == sorted(distances)
    assert len(set(distances)) == len(distances)


def test_rivers_have_difficulty():
    rivers = get_river_crossings()

    assert [r.id for r in rivers] == [
        "kansas_river",
        "green_river",
        "snake_river",
        "columbia_river",
    ]
    assert all(1 <= r.river_difficulty <= 5 for r in rivers)


def test_lookup_out_of_range():
    assert get_location(-1) is None
    assert get_location(len(ROUTE)) is None
    assert get_next_location(len(ROUTE) - 1) is None
    assert is_destination(len(ROUTE) - 1)
    assert not is_destination(0)


def test_distance_to_next():
    assert get_distance_to_next(0, 100) == 2
    assert get_distance_to_next(len(ROUTE) - 1, 2000) == 0
