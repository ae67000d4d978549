"""Supply pools and sparse supply deltas."""

from dataclasses import dataclass, fields

SUPPLY_FIELDS = ("food", "ammunition", "medicine", "spare_parts", "money")


@dataclass
class Supplies:
    """The five independent resource pools carried by the wagon.

    No invariant couples the pools; every mutator keeps each one >= 0.
    """

    food: int = 0  # lbs
    ammunition: int = 0  # rounds
    medicine: int = 0  # doses
    spare_parts: int = 0  # sets
    money: float = 0.0

    def __post_init__(self):
        """Validate supply pools after initialization."""
        for name in SUPPLY_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"Invalid {name}: {getattr(self, name)} (must be >= 0)")


@dataclass
class SupplyDelta:
    """Signed change to some supply pools. Absent fields mean zero."""

    food: int = 0
    ammunition: int = 0
    medicine: int = 0
    spare_parts: int = 0
    money: float = 0.0

    def is_empty(self) -> bool:
        """Return True if the delta changes nothing."""
        return all(getattr(self, f.name) == 0 for f in fields(self))

    def negated(self) -> "SupplyDelta":
        """Return the delta with every sign flipped."""
        return SupplyDelta(**{f.name: -getattr(self, f.name) for f in fields(self)})

    def to_dict(self) -> dict[str, float]:
        """Return only the non-zero entries."""
        return {
            f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) != 0
        }
