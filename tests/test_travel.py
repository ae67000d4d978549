"""Tests for daily travel and the calendar."""

import pytest

from caravan.engine.party import create_party
from caravan.engine.route import ROUTE
from caravan.engine.travel import (
    advance_day,
    calculate_daily_distance,
    can_continue,
    estimate_days_to_next,
    get_distance_remaining,
    travel_one_day,
)
from caravan.models.game import DateState, PaceType
from caravan.models.party import PartyStatus
from caravan.models.supplies import Supplies
from caravan.models.wagon import Wagon
from caravan.models.weather import WeatherType


@pytest.mark.parametrize(
    "pace, weather, wagon, expected",
    [
        (PaceType.STEADY, WeatherType.CLEAR, Wagon(100, 1), 15),
        (PaceType.STEADY, WeatherType.CLEAR, Wagon(100, 2), 17),
        (PaceType.STRENUOUS, WeatherType.RAIN, Wagon(100, 4), 21),
        (PaceType.STEADY, WeatherType.STORM, Wagon(100, 1), 5),
        (PaceType.STEADY, WeatherType.SNOW, Wagon(100, 2), 0),
        (PaceType.GRUELING, WeatherType.BLIZZARD, Wagon(100, 4), 0),
        (PaceType.STEADY, WeatherType.CLEAR, Wagon(40, 2), 12),
        (PaceType.STEADY, WeatherType.CLEAR, Wagon(0, 2), 8),
    ],
)
def test_calculate_daily_distance(pace, weather, wagon, expected):
    assert calculate_daily_distance(pace, weather, wagon) == expected


def test_advance_day_wraps_month():
    assert advance_day(DateState(30, 4, 1848)) == DateState(1, 5, 1848)


def test_advance_day_wraps_year():
    assert advance_day(DateState(31, 12, 1848)) == DateState(1, 1, 1849)


def test_advance_day_has_no_leap_years():
    assert advance_day(DateState(28, 2, 1848)) == DateState(1, 3, 1848)


def test_travel_reaches_kansas_river():
    result = travel_one_day(100, 0, PaceType.STEADY, WeatherType.CLEAR, Wagon(100, 2))

    assert result.reached_location.id == "kansas_river"
    assert result.new_location_index == 1
    assert result.distance_traveled == 17
    assert result.new_total_distance == 117


def test_travel_without_reaching_location():
    result = travel_one_day(0, 0, PaceType.STEADY, WeatherType.CLEAR, Wagon(100, 2))

    assert result.reached_location is None
    assert result.new_location_index == 0


def test_travel_never_skips_two_locations():
    """Overshooting two locations in one day still advances the index by one."""
    # Index 2 is Fort Kearny; Chimney Rock (554) and Fort Laramie (640) are both passed
    result = travel_one_day(630, 2, PaceType.STEADY, WeatherType.CLEAR, Wagon(100, 2))

    assert result.new_total_distance >= ROUTE[4].distance_from_start
    assert result.reached_location.id == "chimney_rock"
    assert result.new_location_index == 3


def test_can_continue_with_no_food():
    party = create_party(["Ann"])

    check = can_continue(party, Supplies(food=0), Wagon(), 0)

    assert check.can_travel is True
    assert check.reason is None


def test_can_continue_fails_when_party_dead():
    party = create_party(["Ann"])
    party[0].health = 0
    party[0].status = PartyStatus.DEAD

    check = can_continue(party, Supplies(food=100), Wagon(), 0)

    assert check.can_travel is False
    assert "died" in check.reason


def test_can_continue_fails_at_destination():
    party = create_party(["Ann"])

    check = can_continue(party, Supplies(food=100), Wagon(), len(ROUTE) - 1)

    assert check.can_travel is False
    assert "destination" in check.reason


def test_can_continue_fails_without_oxen():
    party = create_party(["Ann"])

    check = can_continue(party, Supplies(food=100), Wagon(oxen=0), 0)

    assert check.can_travel is False
    assert "oxen" in check.reason


@pytest.mark.parametrize("distance, expected", [(0, 2000), (1500, 500), (2000, 0), (3000, 0)])
def test_distance_remaining_never_negative(distance, expected):
    assert get_distance_remaining(distance) == expected


def test_estimate_days_to_next():
    assert estimate_days_to_next(0, 0, PaceType.STEADY, Wagon(100, 2)) == 6
