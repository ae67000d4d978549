"""Static route from Independence, Missouri to Oregon City.

The route is an ordered tuple that is never mutated at runtime. Index 0 is
the start and the last index is the only destination.
"""

from ..models.location import Location, LocationType

ROUTE: tuple[Location, ...] = (
    Location("independence", "Independence", LocationType.START, 0, has_store=True),
    Location(
        "kansas_river",
        "Kansas River Crossing",
        LocationType.RIVER,
        102,
        river_difficulty=2,
    ),
    Location("fort_kearny", "Fort Kearny", LocationType.LANDMARK, 304, has_store=True),
    Location("chimney_rock", "Chimney Rock", LocationType.LANDMARK, 554),
    Location("fort_laramie", "Fort Laramie", LocationType.TOWN, 640, has_store=True),
    Location("independence_rock", "Independence Rock", LocationType.LANDMARK, 830),
    Location("south_pass", "South Pass", LocationType.LANDMARK, 932),
    Location(
        "green_river",
        "Green River Crossing",
        LocationType.RIVER,
        988,
        river_difficulty=3,
    ),
    Location("fort_bridger", "Fort Bridger", LocationType.TOWN, 1026, has_store=True),
    Location("soda_springs", "Soda Springs", LocationType.LANDMARK, 1160),
    Location("fort_hall", "Fort Hall", LocationType.TOWN, 1217, has_store=True),
    Location(
        "snake_river",
        "Snake River Crossing",
        LocationType.RIVER,
        1382,
        river_difficulty=4,
    ),
    Location("fort_boise", "Fort Boise", LocationType.LANDMARK, 1534, has_store=True),
    Location("blue_mountains", "Blue Mountains", LocationType.LANDMARK, 1700),
    Location("the_dalles", "The Dalles", LocationType.TOWN, 1838, has_store=True),
    Location(
        "columbia_river",
        "Columbia River",
        LocationType.RIVER,
        1900,
        river_difficulty=5,
    ),
    Location("oregon_city", "Oregon City", LocationType.DESTINATION, 2000, has_store=True),
)

TOTAL_DISTANCE = ROUTE[-1].distance_from_start


def get_location(index: int) -> Location | None:
    """Return the location at a route index, or None if out of range."""
    if index < 0 or index >= len(ROUTE):
        return None
    return ROUTE[index]


def get_next_location(current_index: int) -> Location | None:
    """Return the location after current_index, or None at the end of the route."""
    return get_location(current_index + 1)


def get_distance_to_next(current_index: int, distance_traveled: int) -> int:
    """Return miles left to the next location (0 if there is none)."""
    next_location = get_next_location(current_index)
    if next_location is None:
        return 0
    return next_location.distance_from_start - distance_traveled


def is_destination(index: int) -> bool:
    location = get_location(index)
    return location is not None and location.type == LocationType.DESTINATION


def get_store_locations() -> list[Location]:
    return [loc for loc in ROUTE if loc.has_store]


def get_river_crossings() -> list[Location]:
    return [loc for loc in ROUTE if loc.type == LocationType.RIVER]
