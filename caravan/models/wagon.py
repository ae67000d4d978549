"""Wagon data model."""

from dataclasses import dataclass


@dataclass
class Wagon:
    """The wagon and its team.

    Condition slows travel below 50 and halves it at 0. At least one ox is
    needed to travel at all.
    """

    condition: int = 100  # 0-100
    oxen: int = 2

    def __post_init__(self):
        """Validate wagon data after initialization."""
        if not (0 <= self.condition <= 100):
            raise ValueError(f"Invalid condition: {self.condition} (must be 0-100)")
        if self.oxen < 0:
            raise ValueError(f"Invalid oxen: {self.oxen} (must be >= 0)")
