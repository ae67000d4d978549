"""Player actions outside the daily turn.

Every action takes the current snapshot and returns a new one; party,
supplies and wagon are cloned before any ledger mutator touches them.
Actions that take time (resting, hunting, waiting at a river, days lost to
an event) pass idle days: the calendar advances and the living party eats
one day of food per day.
"""

import logging
from dataclasses import replace

from ..models.event import GameEvent
from ..models.game import GameData, GameScreen, PaceType, RationsType
from ..models.location import LocationType
from ..models.party import PartyMember, PartyStatus
from ..models.supplies import Supplies
from ..utils.constants import (
    DAYS_PER_WEEK,
    DIFFICULTY_SETTINGS,
    MAX_OXEN,
    MAX_WAGON_CONDITION,
    MIN_OXEN,
    REST_HEALTH_BONUS,
)
from ..utils.rng import RandomSource
from .events import apply_event_choice
from .hunting import hunt
from .party import (
    afflict,
    apply_weekly_effects,
    clone_party,
    get_alive_count,
    get_alive_members,
    get_member,
    heal_member,
    is_party_alive,
    mark_dead,
    set_status,
    update_health,
)
from .river import CrossingMethod, caulk_and_float, ford, take_ferry
from .river import wait as river_wait
from .route import get_location
from .store import (
    StoreItem,
    apply_purchase,
    apply_sale,
    buy,
    get_owned_quantity,
    sell,
)
from .supplies import apply_supply_delta, clone_supplies, feed_party, subtract_supplies
from .travel import advance_day
from .wagon import clone_wagon, damage, repair

logger = logging.getLogger(__name__)


def _pass_idle_days(
    state: GameData,
    party: list[PartyMember],
    supplies: Supplies,
    days: int,
) -> dict:
    """Advance the calendar by days, feeding the living party each day.

    Mutates party and supplies. Food floors at zero; idle days do not starve
    anyone. An idle day that is a DAYS_PER_WEEK-th day on the trail carries
    the weekly pace and ration effects, as a travel day would.

    Returns:
        Calendar fields to pass to dataclasses.replace
    """
    date = state.date
    for offset in range(1, days + 1):
        date = advance_day(date)
        feed_party(supplies, get_alive_count(party), state.rations)
        if (state.days_elapsed + offset) % DAYS_PER_WEEK == 0:
            apply_weekly_effects(party, state.rations, state.pace)
    return {
        "day": date.day,
        "month": date.month,
        "year": date.year,
        "days_elapsed": state.days_elapsed + days,
    }


def _after_action_screen(state: GameData, party: list[PartyMember]) -> GameScreen:
    if not is_party_alive(party):
        return GameScreen.GAME_OVER
    return GameScreen.TRAVELING


def handle_event(state: GameData, choice_id: int, rng: RandomSource | None = None) -> GameData:
    """Resolve the pending event with the chosen option.

    Health changes, status changes, the supply delta, wagon damage and any
    days lost are applied in that order. Afterwards the game returns to the
    river if a crossing is pending, to the landmark if the event interrupted
    an arrival, otherwise to the trail.

    Args:
        state: Game on the event screen
        choice_id: Selected choice
        rng: Random source, defaults to the game's seeded RNG

    Returns:
        New game state (unchanged if there is no pending event)
    """
    if state.current_event is None:
        return state
    if rng is None:
        rng = state.rng

    result = apply_event_choice(state.current_event, choice_id, state, rng)

    party = clone_party(state.party)
    supplies = clone_supplies(state.supplies)
    wagon = clone_wagon(state.wagon)
    messages = state.messages + [result.message]

    for member_id, delta in result.health_changes.items():
        update_health(party, member_id, delta)

    for member_id, status in result.status_changes.items():
        afflict(party, member_id, status, rng)

    apply_supply_delta(supplies, result.supply_change)

    if result.wagon_damage:
        damage(wagon, result.wagon_damage)

    calendar = _pass_idle_days(state, party, supplies, result.days_lost)

    screen = _after_action_screen(state, party)
    if screen == GameScreen.TRAVELING and state.river_difficulty is not None:
        screen = GameScreen.RIVER
    elif screen == GameScreen.TRAVELING and state.landmark_pending:
        screen = GameScreen.LANDMARK

    return replace(
        state,
        **calendar,
        party=party,
        supplies=supplies,
        wagon=wagon,
        current_event=None,
        landmark_pending=False,
        screen=screen,
        messages=messages,
    )


def handle_river(
    state: GameData,
    method: CrossingMethod,
    rng: RandomSource | None = None,
) -> GameData:
    """Attempt to cross the river at the current location.

    Waiting lowers the tracked river difficulty and stays on the river
    screen. A successful crossing returns to the trail; a failed one stays
    on the river screen with the losses applied.

    Args:
        state: Game at a river
        method: Crossing method
        rng: Random source, defaults to the game's seeded RNG

    Returns:
        New game state (unchanged if not at a river)
    """
    location = get_location(state.current_location_index)
    if location is None or location.type != LocationType.RIVER:
        return state
    if rng is None:
        rng = state.rng

    method = CrossingMethod(method)
    difficulty = state.river_difficulty or location.river_difficulty or 1

    party = clone_party(state.party)
    supplies = clone_supplies(state.supplies)

    if method == CrossingMethod.WAIT:
        wait_result = river_wait(difficulty)
        calendar = _pass_idle_days(state, party, supplies, wait_result.days_lost)
        return replace(
            state,
            **calendar,
            party=party,
            supplies=supplies,
            river_difficulty=wait_result.new_difficulty,
            screen=GameScreen.RIVER if is_party_alive(party) else GameScreen.GAME_OVER,
            messages=state.messages + [wait_result.message],
        )

    if method == CrossingMethod.FORD:
        result = ford(difficulty, state.supplies, state.party, rng)
    elif method == CrossingMethod.CAULK:
        result = caulk_and_float(difficulty, state.supplies, state.party, rng)
    else:
        result = take_ferry(difficulty, state.supplies.money)

    messages = state.messages + [result.message]
    subtract_supplies(supplies, result.supplies_lost)

    for member_id in result.members_lost:
        if mark_dead(party, member_id):
            member = get_member(party, member_id)
            messages.append(f"{member.name} drowned in the crossing.")

    logger.info(
        f"River crossing at {location.name} by {method.value}: "
        f"{'success' if result.success else 'failure'}"
    )

    if not is_party_alive(party):
        screen = GameScreen.GAME_OVER
    elif result.success:
        screen = GameScreen.TRAVELING
    else:
        screen = GameScreen.RIVER

    return replace(
        state,
        party=party,
        supplies=supplies,
        river_difficulty=None if result.success else difficulty,
        screen=screen,
        messages=messages,
    )


def handle_hunting(
    state: GameData,
    ammo_to_use: int,
    rng: RandomSource | None = None,
) -> GameData:
    """Go hunting. A hunt that starts takes one idle day.

    Args:
        state: Current game state
        ammo_to_use: Rounds to commit
        rng: Random source, defaults to the game's seeded RNG

    Returns:
        New game state on the trail
    """
    if rng is None:
        rng = state.rng

    result = hunt(ammo_to_use, state.supplies.ammunition, rng)
    if result.ammo_used == 0:
        return replace(state, messages=state.messages + [result.message])

    party = clone_party(state.party)
    supplies = clone_supplies(state.supplies)
    supplies.ammunition -= result.ammo_used
    supplies.food += result.food_gained
    calendar = _pass_idle_days(state, party, supplies, 1)

    return replace(
        state,
        **calendar,
        party=party,
        supplies=supplies,
        screen=_after_action_screen(state, party),
        messages=state.messages + [result.message],
    )


def rest(state: GameData) -> GameData:
    """Rest for a day.

    Every living member heals REST_HEALTH_BONUS plus the difficulty bonus,
    and injured members recover.
    """
    heal_amount = REST_HEALTH_BONUS + DIFFICULTY_SETTINGS[state.difficulty].health_regen_bonus

    party = clone_party(state.party)
    for member in get_alive_members(party):
        update_health(party, member.id, heal_amount)
        if member.status == PartyStatus.INJURED:
            set_status(party, member.id, PartyStatus.HEALTHY, state.rng)

    supplies = clone_supplies(state.supplies)
    calendar = _pass_idle_days(state, party, supplies, 1)

    return replace(
        state,
        **calendar,
        party=party,
        supplies=supplies,
        screen=state.screen if is_party_alive(party) else GameScreen.GAME_OVER,
        messages=state.messages + ["The party rests and recovers."],
    )


def use_medicine_on_member(state: GameData, member_id: int) -> GameData:
    """Spend one dose of medicine to cure a sick member.

    Nothing changes if the member is unknown, dead or not sick.
    """
    if state.supplies.medicine <= 0:
        return replace(state, messages=state.messages + ["No medicine available."])

    party = clone_party(state.party)
    member = get_member(party, member_id)
    if member is None or not heal_member(party, member_id):
        return state

    supplies = clone_supplies(state.supplies)
    supplies.medicine -= 1
    return replace(
        state,
        party=party,
        supplies=supplies,
        messages=state.messages + [f"{member.name} has been treated and is recovering."],
    )


def repair_wagon_action(state: GameData) -> GameData:
    """Spend one set of spare parts to repair the wagon."""
    if state.supplies.spare_parts <= 0:
        return replace(state, messages=state.messages + ["No spare parts available."])

    if state.wagon.condition >= MAX_WAGON_CONDITION:
        return replace(state, messages=state.messages + ["Wagon is already in good condition."])

    wagon = clone_wagon(state.wagon)
    restored = repair(wagon)
    supplies = clone_supplies(state.supplies)
    supplies.spare_parts -= 1

    return replace(
        state,
        wagon=wagon,
        supplies=supplies,
        messages=state.messages + [f"Wagon has been repaired (+{restored} condition)."],
    )


def buy_item(state: GameData, item: StoreItem, quantity: int) -> GameData:
    """Buy from the store at the current location.

    Oxen go to the wagon, up to MAX_OXEN.
    """
    item = StoreItem(item)
    location = get_location(state.current_location_index)
    if location is None or not location.has_store:
        return replace(state, messages=state.messages + ["There is no store here."])

    if item == StoreItem.OXEN and state.wagon.oxen + quantity > MAX_OXEN:
        return replace(
            state,
            messages=state.messages + [f"Your wagon can only be pulled by {MAX_OXEN} oxen."],
        )

    result = buy(item, quantity, state.supplies.money)
    if not result.success:
        return replace(state, messages=state.messages + [result.message])

    wagon = clone_wagon(state.wagon)
    if item == StoreItem.OXEN:
        wagon.oxen += quantity

    return replace(
        state,
        supplies=apply_purchase(state.supplies, item, quantity),
        wagon=wagon,
        messages=state.messages + [result.message],
    )


def sell_item(state: GameData, item: StoreItem, quantity: int) -> GameData:
    """Sell to the store at the current location at half price.

    The wagon keeps at least MIN_OXEN oxen.
    """
    item = StoreItem(item)
    location = get_location(state.current_location_index)
    if location is None or not location.has_store:
        return replace(state, messages=state.messages + ["There is no store here."])

    if item == StoreItem.OXEN and state.wagon.oxen - quantity < MIN_OXEN:
        return replace(
            state,
            messages=state.messages + [f"You need at least {MIN_OXEN} ox to pull the wagon."],
        )

    result = sell(item, quantity, get_owned_quantity(state.supplies, state.wagon, item))
    if not result.success:
        return replace(state, messages=state.messages + [result.message])

    wagon = clone_wagon(state.wagon)
    if item == StoreItem.OXEN:
        wagon.oxen -= quantity

    return replace(
        state,
        supplies=apply_sale(state.supplies, item, quantity),
        wagon=wagon,
        messages=state.messages + [result.message],
    )


def set_pace(state: GameData, pace: PaceType) -> GameData:
    return replace(state, pace=PaceType(pace))


def set_rations(state: GameData, rations: RationsType) -> GameData:
    return replace(state, rations=RationsType(rations))


def set_screen(state: GameData, screen: GameScreen) -> GameData:
    return replace(state, screen=GameScreen(screen))


def set_current_event(state: GameData, event: GameEvent | None) -> GameData:
    return replace(state, current_event=event)


def clear_messages(state: GameData) -> GameData:
    return replace(state, messages=[])


def add_message(state: GameData, message: str) -> GameData:
    return replace(state, messages=state.messages + [message])
