"""Game state container."""

from dataclasses import dataclass, field
from enum import Enum

from ..utils.rng import GameRNG
from .event import GameEvent
from .party import PartyMember
from .supplies import Supplies
from .wagon import Wagon
from .weather import WeatherType


class GameScreen(str, Enum):
    """States of the screen state machine. GAME_OVER and VICTORY are terminal."""

    TITLE = "title"
    NAME_PARTY = "name_party"
    STORE = "store"
    TRAVELING = "traveling"
    EVENT = "event"
    RIVER = "river"
    HUNTING = "hunting"
    LANDMARK = "landmark"
    GAME_OVER = "game_over"
    VICTORY = "victory"


TERMINAL_SCREENS = frozenset({GameScreen.GAME_OVER, GameScreen.VICTORY})


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class PaceType(str, Enum):
    STEADY = "steady"
    STRENUOUS = "strenuous"
    GRUELING = "grueling"


class RationsType(str, Enum):
    BARE = "bare"
    MEAGER = "meager"
    FILLING = "filling"


@dataclass(frozen=True)
class DateState:
    day: int
    month: int
    year: int


@dataclass
class GameData:
    """Main game state container.

    One snapshot of the whole journey. Transition functions treat it as
    immutable: they return a new GameData (built with dataclasses.replace
    over cloned party/supplies/wagon) and never mutate the one passed in.
    The RNG object is shared between successive snapshots of one game so
    the random stream continues from day to day.
    """

    seed: int  # RNG seed
    screen: GameScreen = GameScreen.TITLE
    difficulty: Difficulty = Difficulty.NORMAL
    day: int = 1
    month: int = 4
    year: int = 1848
    days_elapsed: int = 0  # Days spent on the trail so far
    distance_traveled: int = 0  # Cumulative miles from the start
    current_location_index: int = 0  # Index into the route
    party: list[PartyMember] = field(default_factory=list)
    supplies: Supplies = field(default_factory=Supplies)
    wagon: Wagon = field(default_factory=Wagon)
    pace: PaceType = PaceType.STEADY
    rations: RationsType = RationsType.MEAGER
    weather: WeatherType = WeatherType.CLEAR
    current_event: GameEvent | None = None  # Event awaiting a choice
    river_difficulty: int | None = None  # Effective difficulty of the river being crossed
    landmark_pending: bool = False  # Landmark arrival interrupted by an event
    messages: list[str] = field(default_factory=list)  # Accumulating message log
    next_member_id: int = 0  # Member ID generation
    next_event_id: int = 0  # Event ID generation
    rng: GameRNG | None = None  # Seeded RNG instance

    def __post_init__(self):
        """Initialize RNG if not provided and validate the calendar."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if not (1 <= self.month <= 12):
            raise ValueError(f"Invalid month: {self.month} (must be 1-12)")
        if not (1 <= self.day <= 31):
            raise ValueError(f"Invalid day: {self.day} (must be 1-31)")
        if self.distance_traveled < 0:
            raise ValueError(f"Invalid distance_traveled: {self.distance_traveled} (must be >= 0)")
        if self.current_location_index < 0:
            raise ValueError(
                f"Invalid current_location_index: {self.current_location_index} (must be >= 0)"
            )

    @property
    def date(self) -> DateState:
        return DateState(day=self.day, month=self.month, year=self.year)
