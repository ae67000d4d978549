"""River crossings.

Four strategies, each with its own cost and risk model:
1. Ford - free, risk grows 10% per difficulty level
2. Caulk and float - one spare part, half the ford risk, gentler failures
3. Ferry - deterministic, costs money
4. Wait - lowers the difficulty at the cost of calendar days

Losses are reported as a SupplyDelta of positive amounts plus the ids of
drowned members; the orchestrator applies them.
"""

from dataclasses import dataclass, field
from enum import Enum

from ..models.party import PartyMember
from ..models.supplies import Supplies, SupplyDelta
from ..utils.constants import (
    CAULK_BASE_RISK,
    DEFAULT_WAIT_DAYS,
    FERRY_COST_PER_DIFFICULTY,
    FORD_BASE_RISK,
    MAX_FERRY_COST,
    MIN_RIVER_DIFFICULTY,
    WAIT_DIFFICULTY_REDUCTION,
)
from ..utils.rng import RandomSource, pick
from .party import get_alive_members


class CrossingMethod(str, Enum):
    FORD = "ford"
    CAULK = "caulk"
    FERRY = "ferry"
    WAIT = "wait"


class Severity(str, Enum):
    MINOR = "minor"
    MAJOR = "major"
    CATASTROPHIC = "catastrophic"


# Upper bounds of the severity draw for (minor, major); anything above is catastrophic
FORD_SEVERITY_THRESHOLDS = (0.5, 0.85)
CAULK_SEVERITY_THRESHOLDS = (0.6, 0.95)

DROWNING_CHANCE = 0.5


@dataclass
class RiverResult:
    """Outcome of a crossing attempt.

    Attributes:
        success: True if the party reached the far bank
        message: Human-readable outcome
        supplies_lost: Amounts to remove from supplies (absent fields are 0)
        members_lost: IDs of members who drowned
        days_lost: Calendar days spent
    """

    success: bool
    message: str
    supplies_lost: SupplyDelta = field(default_factory=SupplyDelta)
    members_lost: list[int] = field(default_factory=list)
    days_lost: int = 0


@dataclass
class WaitResult:
    new_difficulty: int
    days_lost: int
    message: str


def calculate_ford_risk(difficulty: int) -> float:
    return min(1.0, difficulty * FORD_BASE_RISK)


def calculate_caulk_risk(difficulty: int) -> float:
    return min(1.0, difficulty * CAULK_BASE_RISK)


def calculate_ferry_cost(difficulty: int) -> int:
    return min(MAX_FERRY_COST, difficulty * FERRY_COST_PER_DIFFICULTY)


def can_afford_ferry(money: float, difficulty: int) -> bool:
    return money >= calculate_ferry_cost(difficulty)


def can_caulk(spare_parts: int) -> bool:
    return spare_parts >= 1


def _roll_severity(rng: RandomSource, thresholds: tuple[float, float]) -> Severity:
    roll = rng.random()
    if roll < thresholds[0]:
        return Severity.MINOR
    if roll < thresholds[1]:
        return Severity.MAJOR
    return Severity.CATASTROPHIC


def calculate_disaster_loss(
    severity: Severity,
    supplies: Supplies,
    party: list[PartyMember],
    rng: RandomSource,
) -> tuple[SupplyDelta, list[int]]:
    """Determine what a failed crossing costs.

    - Minor: 10% of food
    - Major: 25% of food and ammunition
    - Catastrophic: 50% of food, ammunition and spare parts, and a
      DROWNING_CHANCE that one random living member drowns

    Returns:
        Tuple of (supplies lost, drowned member IDs)
    """
    members_lost: list[int] = []

    if severity == Severity.MINOR:
        losses = SupplyDelta(food=int(supplies.food * 0.1))
    elif severity == Severity.MAJOR:
        losses = SupplyDelta(
            food=int(supplies.food * 0.25),
            ammunition=int(supplies.ammunition * 0.25),
        )
    else:
        losses = SupplyDelta(
            food=int(supplies.food * 0.5),
            ammunition=int(supplies.ammunition * 0.5),
            spare_parts=int(supplies.spare_parts * 0.5),
        )
        if rng.random() < DROWNING_CHANCE:
            victim = pick(rng, get_alive_members(party))
            if victim is not None:
                members_lost.append(victim.id)

    return losses, members_lost


def ford(
    difficulty: int,
    supplies: Supplies,
    party: list[PartyMember],
    rng: RandomSource,
) -> RiverResult:
    """Ford the river: free but risky."""
    if rng.random() > calculate_ford_risk(difficulty):
        return RiverResult(success=True, message="You successfully forded the river.")

    severity = _roll_severity(rng, FORD_SEVERITY_THRESHOLDS)
    losses, members_lost = calculate_disaster_loss(severity, supplies, party, rng)

    if severity == Severity.MINOR:
        message = "The crossing was rough. You lost some supplies."
    elif severity == Severity.MAJOR:
        message = "The wagon nearly capsized! You lost significant supplies."
    else:
        message = "Disaster! The wagon overturned in the river."
        if members_lost:
            message += " Someone drowned."

    return RiverResult(
        success=False,
        message=message,
        supplies_lost=losses,
        members_lost=members_lost,
    )


def caulk_and_float(
    difficulty: int,
    supplies: Supplies,
    party: list[PartyMember],
    rng: RandomSource,
) -> RiverResult:
    """Caulk the wagon and float across.

    Needs a spare part; without one the attempt fails before any draw. The
    part is used up whatever the outcome.
    """
    if not can_caulk(supplies.spare_parts):
        return RiverResult(success=False, message="You need spare parts to caulk the wagon.")

    if rng.random() > calculate_caulk_risk(difficulty):
        return RiverResult(
            success=True,
            message="You successfully floated across the river.",
            supplies_lost=SupplyDelta(spare_parts=1),
        )

    severity = _roll_severity(rng, CAULK_SEVERITY_THRESHOLDS)
    losses, members_lost = calculate_disaster_loss(severity, supplies, party, rng)
    losses.spare_parts += 1

    if severity == Severity.MINOR:
        message = "The floating was unstable. You lost some supplies."
    elif severity == Severity.MAJOR:
        message = "The wagon took on water! You lost significant supplies."
    else:
        message = "The wagon sank! You barely escaped."
        if members_lost:
            message += " Someone drowned."

    return RiverResult(
        success=False,
        message=message,
        supplies_lost=losses,
        members_lost=members_lost,
    )


def take_ferry(difficulty: int, money: float) -> RiverResult:
    """Pay for the ferry. Safe whenever it is affordable."""
    cost = calculate_ferry_cost(difficulty)

    if not can_afford_ferry(money, difficulty):
        return RiverResult(success=False, message=f"You need ${cost} for the ferry.")

    return RiverResult(
        success=True,
        message=f"You paid ${cost} and crossed safely on the ferry.",
        supplies_lost=SupplyDelta(money=cost),
    )


def wait(current_difficulty: int, days_to_wait: int = DEFAULT_WAIT_DAYS) -> WaitResult:
    """Wait for better conditions.

    Lowers the difficulty by up to days_to_wait * WAIT_DIFFICULTY_REDUCTION,
    never below MIN_RIVER_DIFFICULTY.
    """
    reduction = min(
        current_difficulty - MIN_RIVER_DIFFICULTY,
        days_to_wait * WAIT_DIFFICULTY_REDUCTION,
    )
    reduction = max(0, reduction)
    new_difficulty = max(MIN_RIVER_DIFFICULTY, current_difficulty - reduction)

    if reduction > 0:
        message = f"After {days_to_wait} days, the river conditions improved."
    else:
        message = f"After {days_to_wait} days, conditions are unchanged."

    return WaitResult(new_difficulty=new_difficulty, days_lost=days_to_wait, message=message)


def get_crossing_options(difficulty: int, supplies: Supplies) -> dict[str, dict]:
    """Summarize each crossing method for display."""
    return {
        CrossingMethod.FORD.value: {
            "available": True,
            "risk": round(calculate_ford_risk(difficulty) * 100),
        },
        CrossingMethod.CAULK.value: {
            "available": can_caulk(supplies.spare_parts),
            "risk": round(calculate_caulk_risk(difficulty) * 100),
        },
        CrossingMethod.FERRY.value: {
            "available": can_afford_ferry(supplies.money, difficulty),
            "cost": calculate_ferry_cost(difficulty),
        },
        CrossingMethod.WAIT.value: {
            "available": difficulty > MIN_RIVER_DIFFICULTY,
            "daysLost": DEFAULT_WAIT_DAYS,
        },
    }
