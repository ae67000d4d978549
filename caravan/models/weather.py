"""Weather data model."""

from dataclasses import dataclass
from enum import Enum


class WeatherType(str, Enum):
    """Daily weather. Declaration order is the draw order for season tables."""

    CLEAR = "clear"
    RAIN = "rain"
    STORM = "storm"
    SNOW = "snow"
    BLIZZARD = "blizzard"


@dataclass(frozen=True)
class WeatherEffect:
    travel_mod: int  # Miles per day; the blocked sentinel means no travel
    health_mod: int  # Health per travel day
