"""Data models for Caravan."""

from .event import EventChoice, EventType, GameEvent
from .game import (
    TERMINAL_SCREENS,
    DateState,
    Difficulty,
    GameData,
    GameScreen,
    PaceType,
    RationsType,
)
from .location import Location, LocationType
from .party import PartyMember, PartyStatus
from .supplies import SUPPLY_FIELDS, Supplies, SupplyDelta
from .wagon import Wagon
from .weather import WeatherEffect, WeatherType

__all__ = [
    "DateState",
    "Difficulty",
    "EventChoice",
    "EventType",
    "GameData",
    "GameEvent",
    "GameScreen",
    "Location",
    "LocationType",
    "PaceType",
    "PartyMember",
    "PartyStatus",
    "RationsType",
    "SUPPLY_FIELDS",
    "Supplies",
    "SupplyDelta",
    "TERMINAL_SCREENS",
    "Wagon",
    "WeatherEffect",
    "WeatherType",
]
