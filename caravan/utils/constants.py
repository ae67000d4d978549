"""Game configuration constants."""

from dataclasses import dataclass

from ..models.game import Difficulty, PaceType, RationsType
from ..models.event import EventType
from ..models.weather import WeatherType


@dataclass(frozen=True)
class DifficultySettings:
    """Multipliers fixed for the whole game when it is created."""

    starting_money: int
    event_multiplier: float  # Scales every per-day event chance
    health_regen_bonus: int  # Added to the rest heal amount
    weather_harshness: float  # Scales negative weather health effects


DIFFICULTY_SETTINGS: dict[Difficulty, DifficultySettings] = {
    Difficulty.EASY: DifficultySettings(
        starting_money=600,
        event_multiplier=0.5,
        health_regen_bonus=5,
        weather_harshness=1.0,
    ),
    Difficulty.NORMAL: DifficultySettings(
        starting_money=400,
        event_multiplier=1.0,
        health_regen_bonus=0,
        weather_harshness=1.0,
    ),
    Difficulty.HARD: DifficultySettings(
        starting_money=300,
        event_multiplier=1.5,
        health_regen_bonus=-3,
        weather_harshness=1.5,
    ),
}

# Journey
STARTING_MONTH = 4  # April
STARTING_YEAR = 1848

# Starting resources
STARTING_MONEY = 400
STARTING_FOOD = 200
STARTING_AMMO = 100
STARTING_MEDICINE = 5
STARTING_PARTS = 2
STARTING_OXEN = 2

# Health
MAX_HEALTH = 100
STARTING_HEALTH = 100

# Wagon
MAX_WAGON_CONDITION = 100
WAGON_REPAIR_AMOUNT = 25
MAX_OXEN = 4
MIN_OXEN = 1

# Pace (miles per day)
PACE_SPEEDS: dict[PaceType, int] = {
    PaceType.STEADY: 15,
    PaceType.STRENUOUS: 20,
    PaceType.GRUELING: 25,
}

# Pace health effects (per week)
PACE_HEALTH_EFFECTS: dict[PaceType, int] = {
    PaceType.STEADY: 0,
    PaceType.STRENUOUS: -5,
    PaceType.GRUELING: -10,
}

# Rations (lbs per person per day)
RATION_AMOUNTS: dict[RationsType, int] = {
    RationsType.BARE: 1,
    RationsType.MEAGER: 2,
    RationsType.FILLING: 3,
}

# Rations health effects (per week)
RATION_HEALTH_EFFECTS: dict[RationsType, int] = {
    RationsType.BARE: -10,
    RationsType.MEAGER: -2,
    RationsType.FILLING: 5,
}

# Store prices
STORE_PRICES: dict[str, float] = {
    "food": 0.2,  # per lb
    "ammunition": 2.0,  # per box of 20
    "medicine": 5.0,  # per dose
    "spare_parts": 10.0,  # per set
    "oxen": 40.0,  # each
}
AMMO_PER_BOX = 20
SELL_PRICE_RATIO = 0.5

# Event chances (per day), walked in this order
EVENT_CHANCES: dict[EventType, float] = {
    EventType.ILLNESS: 0.05,
    EventType.INJURY: 0.03,
    EventType.WEATHER: 0.10,
    EventType.BREAKDOWN: 0.05,
    EventType.THEFT: 0.02,
    EventType.DISCOVERY: 0.03,
    EventType.ANIMAL: 0.05,
}

# Health damage (per day)
STARVATION_DAMAGE = 20
SICKNESS_DAMAGE = 5
INJURY_DAMAGE = 3

# Sickness
SICKNESS_MIN_DAYS = 3
SICKNESS_MAX_DAYS = 7
SICKNESS_SPREAD_CHANCE = 0.2

# Rest bonus (health per day of rest)
REST_HEALTH_BONUS = 10

# Weather travel modifiers (miles per day)
TRAVEL_BLOCKED = -999
WEATHER_TRAVEL_MODS: dict[WeatherType, int] = {
    WeatherType.CLEAR: 0,
    WeatherType.RAIN: -5,
    WeatherType.STORM: -10,
    WeatherType.SNOW: -15,
    WeatherType.BLIZZARD: TRAVEL_BLOCKED,
}

# Weather health modifiers (per travel day)
WEATHER_HEALTH_MODS: dict[WeatherType, int] = {
    WeatherType.CLEAR: 0,
    WeatherType.RAIN: 0,
    WeatherType.STORM: -5,
    WeatherType.SNOW: -10,
    WeatherType.BLIZZARD: -20,
}

# Season weather chances, walked in WeatherType order
SEASON_WEATHER: dict[str, dict[WeatherType, float]] = {
    "spring": {
        WeatherType.CLEAR: 0.5,
        WeatherType.RAIN: 0.35,
        WeatherType.STORM: 0.1,
        WeatherType.SNOW: 0.05,
        WeatherType.BLIZZARD: 0.0,
    },
    "summer": {
        WeatherType.CLEAR: 0.7,
        WeatherType.RAIN: 0.2,
        WeatherType.STORM: 0.1,
        WeatherType.SNOW: 0.0,
        WeatherType.BLIZZARD: 0.0,
    },
    "fall": {
        WeatherType.CLEAR: 0.4,
        WeatherType.RAIN: 0.35,
        WeatherType.STORM: 0.15,
        WeatherType.SNOW: 0.1,
        WeatherType.BLIZZARD: 0.0,
    },
    "winter": {
        WeatherType.CLEAR: 0.2,
        WeatherType.RAIN: 0.1,
        WeatherType.STORM: 0.1,
        WeatherType.SNOW: 0.4,
        WeatherType.BLIZZARD: 0.2,
    },
}

# Hunting
HUNTING_BASE_SUCCESS = 0.3
HUNTING_AMMO_BONUS = 0.02  # Per round used
HUNTING_AMMO_CEILING = 20  # Rounds beyond this add nothing
HUNTING_MAX_SUCCESS = 0.9  # Unreachable while the ammo ceiling is 20
HUNTING_MIN_FOOD = 10
HUNTING_MAX_FOOD = 100

# River crossing
FORD_BASE_RISK = 0.1  # Per difficulty level
CAULK_BASE_RISK = 0.05  # Per difficulty level
FERRY_COST_PER_DIFFICULTY = 5
MAX_FERRY_COST = 20
WAIT_DIFFICULTY_REDUCTION = 1  # Per day waited
DEFAULT_WAIT_DAYS = 3
MIN_RIVER_DIFFICULTY = 1
MAX_RIVER_DIFFICULTY = 5

# Oxen speed modifier
OXEN_SPEED_MOD = 0.15  # Per ox above minimum

# Calendar (no leap years)
DAYS_PER_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
DAYS_PER_WEEK = 7

# Scoring and leaderboard
MAX_LEADERBOARD_ENTRIES = 10
SCORE_SURVIVAL_BONUS = 1000
SCORE_PER_SURVIVOR = 200
SCORE_TIME_TARGET_DAYS = 180
SCORE_PER_DAY_SAVED = 5

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
