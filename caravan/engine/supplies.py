"""Supply ledger.

Spend operations are all-or-nothing: they either deduct the full amount
and return True, or leave the supplies untouched and return False. All
functions here mutate the Supplies they are given; callers that need an
untouched snapshot clone first.
"""

from dataclasses import replace

from ..models.game import RationsType
from ..models.supplies import SUPPLY_FIELDS, Supplies, SupplyDelta
from ..utils.constants import (
    RATION_AMOUNTS,
    STARTING_AMMO,
    STARTING_FOOD,
    STARTING_MEDICINE,
    STARTING_MONEY,
    STARTING_PARTS,
)


def create_supplies() -> Supplies:
    """Create the starting supplies."""
    return Supplies(
        food=STARTING_FOOD,
        ammunition=STARTING_AMMO,
        medicine=STARTING_MEDICINE,
        spare_parts=STARTING_PARTS,
        money=STARTING_MONEY,
    )


def create_empty_supplies() -> Supplies:
    return Supplies()


def clone_supplies(supplies: Supplies) -> Supplies:
    """Return an independent copy of supplies."""
    return replace(supplies)


def consume_food(supplies: Supplies, amount: int) -> bool:
    if supplies.food < amount:
        return False
    supplies.food -= amount
    return True


def use_ammo(supplies: Supplies, amount: int) -> bool:
    if supplies.ammunition < amount:
        return False
    supplies.ammunition -= amount
    return True


def use_medicine(supplies: Supplies) -> bool:
    """Use one dose of medicine."""
    if supplies.medicine < 1:
        return False
    supplies.medicine -= 1
    return True


def use_parts(supplies: Supplies) -> bool:
    """Use one set of spare parts."""
    if supplies.spare_parts < 1:
        return False
    supplies.spare_parts -= 1
    return True


def spend_money(supplies: Supplies, amount: float) -> bool:
    if supplies.money < amount:
        return False
    supplies.money -= amount
    return True


def add_supplies(supplies: Supplies, supply: str, amount: float) -> None:
    """Add to one pool, flooring the result at zero."""
    if supply not in SUPPLY_FIELDS:
        raise ValueError(f"Unknown supply: {supply}")
    setattr(supplies, supply, max(0, getattr(supplies, supply) + amount))


def has_enough(supplies: Supplies, supply: str, amount: float) -> bool:
    if supply not in SUPPLY_FIELDS:
        raise ValueError(f"Unknown supply: {supply}")
    return getattr(supplies, supply) >= amount


def apply_supply_delta(supplies: Supplies, delta: SupplyDelta) -> None:
    """Add every field of delta to supplies, flooring each pool at zero.

    This is the single place where signed supply changes are applied.

    Args:
        supplies: Supplies to mutate
        delta: Signed change; absent (zero) fields leave the pool as is
    """
    for name in SUPPLY_FIELDS:
        change = getattr(delta, name)
        if change:
            setattr(supplies, name, max(0, getattr(supplies, name) + change))


def subtract_supplies(supplies: Supplies, losses: SupplyDelta) -> None:
    """Remove losses (expressed as positive amounts), flooring at zero."""
    apply_supply_delta(supplies, losses.negated())


def get_daily_food_need(party_size: int, rations: RationsType) -> int:
    """Return lbs of food the given number of travelers eat in a day."""
    return party_size * RATION_AMOUNTS[rations]


def can_feed_party(supplies: Supplies, party_size: int, rations: RationsType) -> bool:
    return supplies.food >= get_daily_food_need(party_size, rations)


def feed_party(supplies: Supplies, party_size: int, rations: RationsType) -> int:
    """Feed the party for a day.

    Returns:
        Shortfall in lbs (0 if fully fed). On a shortfall food drops to 0.
    """
    needed = get_daily_food_need(party_size, rations)
    if supplies.food >= needed:
        supplies.food -= needed
        return 0
    shortfall = needed - supplies.food
    supplies.food = 0
    return shortfall


def get_supply_value(supplies: Supplies) -> float:
    """Return the total dollar value of supplies."""
    return (
        supplies.food * 0.2
        + supplies.ammunition * 0.1
        + supplies.medicine * 5
        + supplies.spare_parts * 10
        + supplies.money
    )
