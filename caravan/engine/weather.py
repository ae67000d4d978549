"""Weather generation from seasonal probability tables."""

from ..models.weather import WeatherEffect, WeatherType
from ..utils.constants import (
    SEASON_WEATHER,
    TRAVEL_BLOCKED,
    WEATHER_HEALTH_MODS,
    WEATHER_TRAVEL_MODS,
)
from ..utils.rng import RandomSource

_DESCRIPTIONS = {
    WeatherType.CLEAR: "Clear skies",
    WeatherType.RAIN: "Light rain",
    WeatherType.STORM: "Heavy storm",
    WeatherType.SNOW: "Snow",
    WeatherType.BLIZZARD: "Blizzard - cannot travel",
}

_SEVERITY = {
    WeatherType.CLEAR: 0,
    WeatherType.RAIN: 1,
    WeatherType.STORM: 2,
    WeatherType.SNOW: 3,
    WeatherType.BLIZZARD: 4,
}


def get_season(month: int) -> str:
    """Return the season for a month, normalizing any integer to 1-12."""
    m = (month - 1) % 12 + 1

    if 3 <= m <= 5:
        return "spring"
    if 6 <= m <= 8:
        return "summer"
    if 9 <= m <= 11:
        return "fall"
    return "winter"


def get_season_weather_chances(month: int) -> dict[WeatherType, float]:
    return SEASON_WEATHER[get_season(month)]


def generate_weather(month: int, rng: RandomSource) -> WeatherType:
    """Draw the day's weather for a month.

    Walks the season table in WeatherType order, accumulating probability
    until the draw falls inside the accumulated mass. Falls back to CLEAR if
    rounding leaves the draw unmatched.
    """
    chances = get_season_weather_chances(month)
    roll = rng.random()

    cumulative = 0.0
    for weather in WeatherType:
        cumulative += chances[weather]
        if roll < cumulative:
            return weather

    return WeatherType.CLEAR


def get_weather_effect(weather: WeatherType) -> WeatherEffect:
    return WeatherEffect(
        travel_mod=WEATHER_TRAVEL_MODS[weather],
        health_mod=WEATHER_HEALTH_MODS[weather],
    )


def prevents_travel(weather: WeatherType) -> bool:
    return WEATHER_TRAVEL_MODS[weather] <= TRAVEL_BLOCKED


def get_weather_description(weather: WeatherType) -> str:
    return _DESCRIPTIONS[weather]


def get_weather_severity(weather: WeatherType) -> int:
    """Return 0 (clear) through 4 (blizzard)."""
    return _SEVERITY[weather]
