"""Daily movement along the route and calendar arithmetic.

This module handles:
1. Daily distance from pace, weather, oxen and wagon condition
2. Date advancement (12-entry month table, no leap years)
3. Location-reached detection (at most one location per day)
4. The travel-eligibility gate
"""

import math
from dataclasses import dataclass

from ..models.game import DateState, PaceType
from ..models.location import Location
from ..models.party import PartyMember
from ..models.supplies import Supplies
from ..models.wagon import Wagon
from ..models.weather import WeatherType
from ..utils.constants import (
    DAYS_PER_MONTH,
    MIN_OXEN,
    OXEN_SPEED_MOD,
    PACE_SPEEDS,
    WEATHER_TRAVEL_MODS,
)
from .party import get_alive_members
from .route import TOTAL_DISTANCE, get_distance_to_next, get_next_location, is_destination


@dataclass
class TravelDayResult:
    """Outcome of one day on the trail.

    Attributes:
        distance_traveled: Miles covered today
        new_total_distance: Cumulative miles after today
        reached_location: Location reached today, if any
        new_location_index: Route index after today
    """

    distance_traveled: int
    new_total_distance: int
    reached_location: Location | None
    new_location_index: int


@dataclass(frozen=True)
class TravelCheck:
    can_travel: bool
    reason: str | None = None


def calculate_daily_distance(pace: PaceType, weather: WeatherType, wagon: Wagon) -> int:
    """Calculate miles covered in one day.

    1. Blizzard: 0, nothing else is considered
    2. Base pace speed plus the weather travel modifier
    3. Each ox above MIN_OXEN multiplies by (1 + extra * OXEN_SPEED_MOD)
    4. Condition <= 0 halves the distance, condition < 50 takes 75%
    5. Floor and clamp at 0

    Args:
        pace: Current pace
        weather: Today's weather
        wagon: Wagon condition and team

    Returns:
        Whole miles traveled (>= 0)
    """
    if weather == WeatherType.BLIZZARD:
        return 0

    distance: float = PACE_SPEEDS[pace] + WEATHER_TRAVEL_MODS[weather]

    extra_oxen = wagon.oxen - MIN_OXEN
    if extra_oxen > 0:
        distance *= 1 + extra_oxen * OXEN_SPEED_MOD

    if wagon.condition <= 0:
        distance = math.floor(distance * 0.5)
    elif wagon.condition < 50:
        distance = math.floor(distance * 0.75)

    return max(0, math.floor(distance))


def advance_day(date: DateState) -> DateState:
    """Return the date one day later, wrapping month and year."""
    day, month, year = date.day + 1, date.month, date.year

    if day > DAYS_PER_MONTH[month - 1]:
        day = 1
        month += 1
        if month > 12:
            month = 1
            year += 1

    return DateState(day=day, month=month, year=year)


def travel_one_day(
    current_distance: int,
    current_location_index: int,
    pace: PaceType,
    weather: WeatherType,
    wagon: Wagon,
) -> TravelDayResult:
    """Process one day of travel.

    Reaching or passing the next location's distance reports that location
    and advances the index by exactly one, however far the day overshoots.

    Args:
        current_distance: Cumulative miles before today
        current_location_index: Route index before today
        pace: Current pace
        weather: Today's weather
        wagon: Wagon condition and team

    Returns:
        TravelDayResult for the day
    """
    daily_distance = calculate_daily_distance(pace, weather, wagon)
    new_total_distance = current_distance + daily_distance

    reached_location = None
    new_location_index = current_location_index

    next_location = get_next_location(current_location_index)
    if next_location is not None and new_total_distance >= next_location.distance_from_start:
        reached_location = next_location
        new_location_index = current_location_index + 1

    return TravelDayResult(
        distance_traveled=daily_distance,
        new_total_distance=new_total_distance,
        reached_location=reached_location,
        new_location_index=new_location_index,
    )


def can_continue(
    party: list[PartyMember],
    supplies: Supplies,
    wagon: Wagon,
    location_index: int,
) -> TravelCheck:
    """Check whether the party can set out today.

    Running out of food does not stop travel; starvation is applied by the
    turn orchestrator instead.
    """
    if not get_alive_members(party):
        return TravelCheck(False, "All party members have died.")

    if is_destination(location_index):
        return TravelCheck(False, "You have reached your destination!")

    if wagon.oxen <= 0:
        return TravelCheck(False, "You have no oxen to pull the wagon.")

    return TravelCheck(True)


def get_distance_remaining(distance_traveled: int) -> int:
    """Return miles left to the destination, never negative."""
    return max(0, TOTAL_DISTANCE - distance_traveled)


def get_distance_to_next_location(current_location_index: int, distance_traveled: int) -> int:
    return get_distance_to_next(current_location_index, distance_traveled)


def estimate_days_to_next(
    current_location_index: int,
    distance_traveled: int,
    pace: PaceType,
    wagon: Wagon,
) -> int:
    """Estimate days to the next location in clear weather (999 if unreachable)."""
    distance = get_distance_to_next(current_location_index, distance_traveled)
    daily_rate = calculate_daily_distance(pace, WeatherType.CLEAR, wagon)
    if daily_rate <= 0:
        return 999
    return math.ceil(distance / daily_rate)
