"""Route location data model."""

from dataclasses import dataclass
from enum import Enum


class LocationType(str, Enum):
    START = "start"
    TOWN = "town"
    LANDMARK = "landmark"
    RIVER = "river"
    DESTINATION = "destination"


@dataclass(frozen=True)
class Location:
    """An immutable node on the fixed route."""

    id: str  # Unique identifier (e.g., "kansas_river")
    name: str  # Human-readable name
    type: LocationType
    distance_from_start: int  # Miles from the start of the route
    has_store: bool = False
    river_difficulty: int | None = None  # 1-5, rivers only

    def __post_init__(self):
        """Validate location data after initialization."""
        if self.distance_from_start < 0:
            raise ValueError(
                f"Invalid distance_from_start: {self.distance_from_start} (must be >= 0)"
            )
        if self.type == LocationType.RIVER:
            if self.river_difficulty is None or not (1 <= self.river_difficulty <= 5):
                raise ValueError(
                    f"River {self.id} needs river_difficulty 1-5, got {self.river_difficulty}"
                )
        elif self.river_difficulty is not None:
            raise ValueError(f"Only rivers have a difficulty, {self.id} is a {self.type.value}")
