"""Hunting: trade ammunition for a chance at food."""

from dataclasses import dataclass

from ..utils.constants import (
    HUNTING_AMMO_BONUS,
    HUNTING_AMMO_CEILING,
    HUNTING_BASE_SUCCESS,
    HUNTING_MAX_FOOD,
    HUNTING_MAX_SUCCESS,
    HUNTING_MIN_FOOD,
)
from ..utils.rng import RandomSource, roll_int


@dataclass
class HuntingResult:
    """Outcome of a hunting attempt.

    Attributes:
        ammo_used: Rounds spent (0 only when the hunt could not start)
        food_gained: Lbs of meat brought back
        message: Human-readable outcome
        success: True if game was bagged
    """

    ammo_used: int
    food_gained: int
    message: str
    success: bool = False


def calculate_success_chance(ammo_used: int) -> float:
    """Return the chance a hunt succeeds.

    Each round up to HUNTING_AMMO_CEILING adds HUNTING_AMMO_BONUS to the
    base chance, so the chance tops out at 0.7. HUNTING_MAX_SUCCESS is never
    reached with the current ceiling.
    """
    bonus = min(ammo_used, HUNTING_AMMO_CEILING) * HUNTING_AMMO_BONUS
    return min(HUNTING_MAX_SUCCESS, HUNTING_BASE_SUCCESS + bonus)


def calculate_food_gained(rng: RandomSource) -> int:
    """Return lbs of meat from a successful hunt, uniform in [min, max)."""
    return roll_int(rng, HUNTING_MIN_FOOD, HUNTING_MAX_FOOD)


def can_hunt(ammunition: int, ammo_to_use: int) -> bool:
    return ammo_to_use >= 1 and ammunition >= ammo_to_use


def hunt(ammo_to_use: int, current_ammo: int, rng: RandomSource) -> HuntingResult:
    """Perform a hunting attempt.

    The requested ammo is spent whether or not the hunt succeeds. One draw
    decides success; a second draw sizes the catch.

    Args:
        ammo_to_use: Rounds to commit to the hunt
        current_ammo: Rounds available
        rng: Random source

    Returns:
        HuntingResult. An invalid request spends nothing and draws nothing.
    """
    if not can_hunt(current_ammo, ammo_to_use):
        return HuntingResult(
            ammo_used=0,
            food_gained=0,
            message="Not enough ammunition to hunt.",
        )

    success_chance = calculate_success_chance(ammo_to_use)
    if rng.random() > success_chance:
        return HuntingResult(
            ammo_used=ammo_to_use,
            food_gained=0,
            message="The hunt was unsuccessful. The animals escaped.",
        )

    food_gained = calculate_food_gained(rng)

    if food_gained >= 80:
        message = f"Excellent hunt! You bagged {food_gained} pounds of meat."
    elif food_gained >= 50:
        message = f"Good hunt! You brought back {food_gained} pounds of meat."
    else:
        message = f"Modest hunt. You gathered {food_gained} pounds of meat."

    return HuntingResult(
        ammo_used=ammo_to_use,
        food_gained=food_gained,
        message=message,
        success=True,
    )


def get_recommended_ammo(current_ammo: int) -> int:
    """Suggest 10% of current ammo within [5, 20], or everything if 5 or less."""
    if current_ammo <= 5:
        return current_ammo
    return max(5, min(20, int(current_ammo * 0.1)))


def get_expected_food(ammo_to_use: int) -> dict[str, int]:
    """Return the food range and success percentage for an ammo commitment."""
    return {
        "min": HUNTING_MIN_FOOD,
        "max": HUNTING_MAX_FOOD,
        "chance": round(calculate_success_chance(ammo_to_use) * 100),
    }
