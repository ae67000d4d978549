"""Random events: selection, generation and choice resolution.

Each day the turn orchestrator makes one weighted draw over the per-type
event chances. A generated event carries flavor text and one or two
choices; resolving a choice yields an EventResult describing supply,
health, status, wagon and calendar changes for the orchestrator to apply.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from ..models.event import EventChoice, EventType, GameEvent
from ..models.game import GameData
from ..models.party import PartyStatus
from ..models.supplies import SupplyDelta
from ..utils.constants import EVENT_CHANCES
from ..utils.rng import RandomSource, pick, roll_int
from .party import get_alive_members

logger = logging.getLogger(__name__)

ILLNESSES = ["cholera", "dysentery", "typhoid", "measles"]
INJURIES = ["broken arm", "sprained ankle", "deep cut", "snake bite"]
WAGON_PARTS = ["wagon wheel", "axle", "tongue", "canvas cover"]

WEATHER_EVENTS = [
    ("Sudden Storm", "A violent storm has damaged your supplies!"),
    ("Flash Flood", "Rising waters have swept away some of your food!"),
    ("Heavy Winds", "Strong winds have scattered some supplies!"),
]
DISCOVERIES = [
    ("Abandoned Wagon", "You found an abandoned wagon with supplies!"),
    ("Wild Fruit", "You discovered a patch of wild berries!"),
    ("Helpful Traveler", "A friendly traveler shares some supplies!"),
    ("Fresh Spring", "You found a fresh water spring and everyone feels refreshed!"),
]
ANIMAL_EVENTS = [
    ("Buffalo Stampede", "A herd of buffalo nearly tramples the wagon!"),
    ("Wild Animals", "Wolves were spotted near camp last night!"),
    ("Ox Problem", "One of your oxen has wandered off!"),
]

# Untreated outcomes
ILLNESS_HEALTH_PENALTY = -20
ILLNESS_DAYS_LOST = 2
INJURY_HEALTH_PENALTY = -15
INJURY_DAYS_LOST = 1
BREAKDOWN_DAYS_LOST = 1
MAKESHIFT_DAMAGE_MIN = 10
MAKESHIFT_DAMAGE_MAX = 25  # Exclusive

DISCOVERY_HEALTH_BOOST = 10


@dataclass
class EventResult:
    """Outcome of resolving an event choice.

    Only entries present in the mappings are applied; absent means no
    change.

    Attributes:
        message: Human-readable outcome
        health_changes: Member ID -> health delta
        supply_change: Signed supply delta
        days_lost: Idle days the event costs
        status_changes: Member ID -> new status (sick or injured)
        wagon_damage: Condition the wagon loses
    """

    message: str
    health_changes: dict[int, int] = field(default_factory=dict)
    supply_change: SupplyDelta = field(default_factory=SupplyDelta)
    days_lost: int = 0
    status_changes: dict[int, PartyStatus] = field(default_factory=dict)
    wagon_damage: int = 0


def roll_for_event(rng: RandomSource, multiplier: float = 1.0) -> EventType | None:
    """Roll for today's event.

    One draw is walked over the per-type chances in EventType order, each
    scaled by multiplier. The leftover probability mass means no event.

    Args:
        rng: Random source
        multiplier: Difficulty event-frequency multiplier

    Returns:
        Event type, or None for a quiet day
    """
    roll = rng.random()
    cumulative = 0.0

    for event_type in EventType:
        cumulative += EVENT_CHANCES[event_type] * multiplier
        if roll < cumulative:
            return event_type

    return None


def _member_name(state: GameData, member_id: int | None) -> str:
    for member in state.party:
        if member.id == member_id:
            return member.name
    return "A party member"


def _illness_event(event_id: int, state: GameData, rng: RandomSource) -> GameEvent:
    target = pick(rng, get_alive_members(state.party))
    target_id = target.id if target else None
    illness = pick(rng, ILLNESSES)
    return GameEvent(
        id=event_id,
        type=EventType.ILLNESS,
        title="Illness Strikes",
        description=f"{_member_name(state, target_id)} has come down with {illness}!",
        choices=[
            EventChoice(0, "Use medicine to treat"),
            EventChoice(1, "Rest and hope for the best"),
        ],
        target_member_id=target_id,
    )


def _injury_event(event_id: int, state: GameData, rng: RandomSource) -> GameEvent:
    target = pick(rng, get_alive_members(state.party))
    target_id = target.id if target else None
    injury = pick(rng, INJURIES)
    return GameEvent(
        id=event_id,
        type=EventType.INJURY,
        title="Injury",
        description=f"{_member_name(state, target_id)} suffered a {injury}!",
        choices=[
            EventChoice(0, "Use medicine to treat"),
            EventChoice(1, "Bandage it and continue"),
        ],
        target_member_id=target_id,
    )


def _weather_event(event_id: int, state: GameData, rng: RandomSource) -> GameEvent:
    title, description = pick(rng, WEATHER_EVENTS)
    return GameEvent(
        id=event_id,
        type=EventType.WEATHER,
        title=title,
        description=description,
        choices=[EventChoice(0, "Salvage what you can")],
    )


def _breakdown_event(event_id: int, state: GameData, rng: RandomSource) -> GameEvent:
    part = pick(rng, WAGON_PARTS)
    return GameEvent(
        id=event_id,
        type=EventType.BREAKDOWN,
        title="Wagon Trouble",
        description=f"The {part} has broken!",
        choices=[
            EventChoice(0, "Use spare parts to repair"),
            EventChoice(1, "Try a makeshift fix"),
        ],
    )


def _theft_event(event_id: int, state: GameData, rng: RandomSource) -> GameEvent:
    return GameEvent(
        id=event_id,
        type=EventType.THEFT,
        title="Thieves in the Night",
        description="Someone has raided your supplies while you slept!",
        choices=[EventChoice(0, "Accept the loss")],
    )


def _discovery_event(event_id: int, state: GameData, rng: RandomSource) -> GameEvent:
    title, description = pick(rng, DISCOVERIES)
    return GameEvent(
        id=event_id,
        type=EventType.DISCOVERY,
        title=title,
        description=description,
        choices=[EventChoice(0, "Continue on")],
    )


def _animal_event(event_id: int, state: GameData, rng: RandomSource) -> GameEvent:
    title, description = pick(rng, ANIMAL_EVENTS)
    return GameEvent(
        id=event_id,
        type=EventType.ANIMAL,
        title=title,
        description=description,
        choices=[EventChoice(0, "Handle the situation")],
    )


_GENERATORS: dict[EventType, Callable[[int, GameData, RandomSource], GameEvent]] = {
    EventType.ILLNESS: _illness_event,
    EventType.INJURY: _injury_event,
    EventType.WEATHER: _weather_event,
    EventType.BREAKDOWN: _breakdown_event,
    EventType.THEFT: _theft_event,
    EventType.DISCOVERY: _discovery_event,
    EventType.ANIMAL: _animal_event,
}


def generate_event(
    event_type: EventType,
    state: GameData,
    rng: RandomSource,
    event_id: int,
) -> GameEvent:
    """Build an event of the given type.

    Args:
        event_type: Kind of event to build
        state: Current game state (for choosing a target member)
        rng: Random source for target and flavor
        event_id: ID to assign; the caller owns the counter

    Returns:
        New GameEvent
    """
    event = _GENERATORS[event_type](event_id, state, rng)
    logger.debug(f"Generated event {event.id}: {event.title}")
    return event


def _untreated_penalty(state: GameData, rng: RandomSource, amount: int) -> dict[int, int]:
    victim = pick(rng, get_alive_members(state.party))
    if victim is None:
        return {}
    return {victim.id: amount}


def _resolve_illness(
    event: GameEvent, choice_id: int, state: GameData, rng: RandomSource
) -> EventResult:
    if choice_id == 0 and state.supplies.medicine > 0:
        return EventResult(
            message="The medicine helped! The patient is recovering.",
            supply_change=SupplyDelta(medicine=-1),
        )

    status_changes = {}
    if event.target_member_id is not None:
        status_changes[event.target_member_id] = PartyStatus.SICK
    return EventResult(
        message="Without medicine, the illness takes its toll.",
        health_changes=_untreated_penalty(state, rng, ILLNESS_HEALTH_PENALTY),
        days_lost=ILLNESS_DAYS_LOST,
        status_changes=status_changes,
    )


def _resolve_injury(
    event: GameEvent, choice_id: int, state: GameData, rng: RandomSource
) -> EventResult:
    if choice_id == 0 and state.supplies.medicine > 0:
        return EventResult(
            message="The wound is treated properly.",
            supply_change=SupplyDelta(medicine=-1),
        )

    status_changes = {}
    if event.target_member_id is not None:
        status_changes[event.target_member_id] = PartyStatus.INJURED
    return EventResult(
        message="The injury will slow recovery.",
        health_changes=_untreated_penalty(state, rng, INJURY_HEALTH_PENALTY),
        days_lost=INJURY_DAYS_LOST,
        status_changes=status_changes,
    )


def _resolve_weather(
    event: GameEvent, choice_id: int, state: GameData, rng: RandomSource
) -> EventResult:
    food_loss = roll_int(rng, 10, 40)
    return EventResult(
        message=f"You lost {food_loss} lbs of food to the weather.",
        supply_change=SupplyDelta(food=-food_loss),
    )


def _resolve_breakdown(
    event: GameEvent, choice_id: int, state: GameData, rng: RandomSource
) -> EventResult:
    if choice_id == 0 and state.supplies.spare_parts > 0:
        return EventResult(
            message="You used spare parts to fix the wagon.",
            supply_change=SupplyDelta(spare_parts=-1),
        )

    return EventResult(
        message="Your makeshift fix holds, but the wagon is weakened.",
        days_lost=BREAKDOWN_DAYS_LOST,
        wagon_damage=roll_int(rng, MAKESHIFT_DAMAGE_MIN, MAKESHIFT_DAMAGE_MAX),
    )


def _resolve_theft(
    event: GameEvent, choice_id: int, state: GameData, rng: RandomSource
) -> EventResult:
    food_loss = roll_int(rng, 20, 60)
    ammo_loss = roll_int(rng, 5, 25)
    return EventResult(
        message=f"Thieves stole {food_loss} lbs of food and {ammo_loss} rounds of ammunition.",
        supply_change=SupplyDelta(food=-food_loss, ammunition=-ammo_loss),
    )


def _resolve_discovery(
    event: GameEvent, choice_id: int, state: GameData, rng: RandomSource
) -> EventResult:
    roll = rng.random()

    if roll < 0.5:
        food = roll_int(rng, 10, 40)
        return EventResult(
            message=f"You found {food} lbs of food!",
            supply_change=SupplyDelta(food=food),
        )

    if roll < 0.8:
        return EventResult(
            message="Everyone feels refreshed!",
            health_changes={m.id: DISCOVERY_HEALTH_BOOST for m in get_alive_members(state.party)},
        )

    money = roll_int(rng, 10, 40)
    return EventResult(
        message=f"You found ${money}!",
        supply_change=SupplyDelta(money=money),
    )


def _resolve_animal(
    event: GameEvent, choice_id: int, state: GameData, rng: RandomSource
) -> EventResult:
    # Losing an ox is flavor only; the wagon keeps its team.
    if rng.random() < 0.3:
        return EventResult(message="You lost an ox to the wildlife.")

    return EventResult(
        message="The situation was handled without major incident.",
        days_lost=1 if rng.random() < 0.5 else 0,
    )


_RESOLVERS: dict[
    EventType, Callable[[GameEvent, int, GameData, RandomSource], EventResult]
] = {
    EventType.ILLNESS: _resolve_illness,
    EventType.INJURY: _resolve_injury,
    EventType.WEATHER: _resolve_weather,
    EventType.BREAKDOWN: _resolve_breakdown,
    EventType.THEFT: _resolve_theft,
    EventType.DISCOVERY: _resolve_discovery,
    EventType.ANIMAL: _resolve_animal,
}


def apply_event_choice(
    event: GameEvent,
    choice_id: int,
    state: GameData,
    rng: RandomSource,
) -> EventResult:
    """Resolve the player's choice for an event.

    Choice 0 on Illness, Injury or Breakdown spends one unit of medicine or
    spare parts when available and costs nothing else. Any other path takes
    the untreated outcome. Weather, Theft, Discovery and Animal ignore the
    choice.

    Args:
        event: Event being resolved
        choice_id: Selected choice
        state: Current game state (read only)
        rng: Random source

    Returns:
        EventResult for the orchestrator to apply
    """
    result = _RESOLVERS[event.type](event, choice_id, state, rng)
    logger.debug(f"Event {event.id} choice {choice_id}: {result.message}")
    return result
