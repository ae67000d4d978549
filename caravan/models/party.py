"""Party member data model."""

from dataclasses import dataclass
from enum import Enum


class PartyStatus(str, Enum):
    """Lifecycle state of a party member."""

    HEALTHY = "healthy"
    SICK = "sick"
    INJURED = "injured"
    DEAD = "dead"


@dataclass
class PartyMember:
    """A traveler in the party.

    Members are created once when the party forms and are mutated in place
    over the journey. Dead members stay in the party list and are ignored by
    every health and status mutator.
    """

    id: int  # Unique, assigned sequentially at party creation
    name: str
    health: int = 100  # 0-100
    status: PartyStatus = PartyStatus.HEALTHY
    sickness_turns: int = 0  # Days left until recovery, only while sick

    def __post_init__(self):
        """Validate member data after initialization."""
        self.status = PartyStatus(self.status)
        if not (0 <= self.health <= 100):
            raise ValueError(f"Invalid health: {self.health} (must be 0-100)")
        if self.sickness_turns < 0:
            raise ValueError(f"Invalid sickness_turns: {self.sickness_turns} (must be >= 0)")
        if (self.status == PartyStatus.DEAD) != (self.health == 0):
            raise ValueError(
                f"Member {self.id} has status {self.status.value} with health {self.health}"
            )

    @property
    def is_alive(self) -> bool:
        return self.status != PartyStatus.DEAD
