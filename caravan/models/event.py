"""Random event data model."""

from dataclasses import dataclass, field
from enum import Enum


class EventType(str, Enum):
    """Event kinds. Declaration order is the roll order for event chances."""

    ILLNESS = "illness"
    INJURY = "injury"
    WEATHER = "weather"
    BREAKDOWN = "breakdown"
    THEFT = "theft"
    DISCOVERY = "discovery"
    ANIMAL = "animal"


@dataclass(frozen=True)
class EventChoice:
    id: int
    text: str


@dataclass
class GameEvent:
    """A random event awaiting the player's choice.

    Illness and Injury events name a target member; the other kinds are
    acknowledged with their single choice.
    """

    id: int  # Drawn from GameData.next_event_id
    type: EventType
    title: str
    description: str
    choices: list[EventChoice] = field(default_factory=list)
    target_member_id: int | None = None

    def __post_init__(self):
        """Validate event data after initialization."""
        self.type = EventType(self.type)
        if not (1 <= len(self.choices) <= 2):
            raise ValueError(f"Event {self.id} must offer 1-2 choices, got {len(self.choices)}")
