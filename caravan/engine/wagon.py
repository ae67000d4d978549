"""Wagon ledger: condition and oxen mutators.

damage and repair are the only condition mutators and always clamp into
[0, MAX_WAGON_CONDITION].
"""

from ..models.wagon import Wagon
from ..utils.constants import (
    MAX_OXEN,
    MAX_WAGON_CONDITION,
    MIN_OXEN,
    OXEN_SPEED_MOD,
    STARTING_OXEN,
    WAGON_REPAIR_AMOUNT,
)


def create_wagon() -> Wagon:
    return Wagon(condition=MAX_WAGON_CONDITION, oxen=STARTING_OXEN)


def clone_wagon(wagon: Wagon) -> Wagon:
    return Wagon(condition=wagon.condition, oxen=wagon.oxen)


def damage(wagon: Wagon, amount: int) -> int:
    """Reduce condition by amount, clamped at 0.

    Returns:
        Condition actually lost
    """
    previous = wagon.condition
    wagon.condition = max(0, min(MAX_WAGON_CONDITION, wagon.condition - amount))
    return previous - wagon.condition


def repair(wagon: Wagon, full_repair: bool = False) -> int:
    """Repair the wagon with one set of spare parts.

    Args:
        wagon: Wagon to repair
        full_repair: Restore to full condition instead of WAGON_REPAIR_AMOUNT

    Returns:
        Condition actually restored, which is less than requested near the cap
    """
    amount = MAX_WAGON_CONDITION if full_repair else WAGON_REPAIR_AMOUNT
    previous = wagon.condition
    wagon.condition = max(0, min(MAX_WAGON_CONDITION, wagon.condition + amount))
    return wagon.condition - previous


def add_oxen(wagon: Wagon) -> bool:
    """Add an ox. Returns False if the team is already at MAX_OXEN."""
    if wagon.oxen >= MAX_OXEN:
        return False
    wagon.oxen += 1
    return True


def remove_oxen(wagon: Wagon) -> bool:
    """Sell or unhitch an ox. Returns False at MIN_OXEN."""
    if wagon.oxen <= MIN_OXEN:
        return False
    wagon.oxen -= 1
    return True


def lose_oxen(wagon: Wagon) -> bool:
    """Lose an ox to death or theft. May go below MIN_OXEN."""
    if wagon.oxen <= 0:
        return False
    wagon.oxen -= 1
    return True


def get_speed_modifier(wagon: Wagon) -> float:
    """Return the travel multiplier from the team (0 without the minimum team)."""
    if wagon.oxen < MIN_OXEN:
        return 0.0
    return 1 + (wagon.oxen - MIN_OXEN) * OXEN_SPEED_MOD


def is_broken(wagon: Wagon) -> bool:
    return wagon.condition <= 0


def can_travel(wagon: Wagon) -> bool:
    return not is_broken(wagon) and wagon.oxen >= MIN_OXEN


def get_condition_percent(wagon: Wagon) -> int:
    return round(wagon.condition / MAX_WAGON_CONDITION * 100)


def get_condition_status(wagon: Wagon) -> str:
    percent = get_condition_percent(wagon)
    if percent == 0:
        return "Broken"
    if percent <= 25:
        return "Poor"
    if percent <= 50:
        return "Fair"
    if percent <= 75:
        return "Good"
    return "Excellent"
