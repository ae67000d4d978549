"""Daily turn orchestrator.

A turn is one simulated day, computed and committed in two steps:

advance_turn computes the day without touching the snapshot, running
these phases in a fixed order:
1. Weather draw
2. Travel-eligibility gate
3. Movement
4. Food consumption and starvation
5. Weather health damage (scaled by difficulty harshness)
6. Weekly pace/ration effects, sickness/injury progression and contagion
7. Event roll (scaled by the difficulty event multiplier)

apply_turn_result commits a TurnResult: deducts the day's food, advances
the calendar and route, redraws the weather and routes the screen.

Architecture:
Each phase is an independent method on TurnExecutor. The orchestration
methods compose them; changing the order changes outcomes.
"""

import logging
import math
from dataclasses import dataclass, field, replace

from ..models.event import GameEvent
from ..models.game import GameData, GameScreen
from ..models.location import Location, LocationType
from ..models.party import PartyMember
from ..models.weather import WeatherType
from ..utils.constants import DAYS_PER_WEEK, DIFFICULTY_SETTINGS, STARVATION_DAMAGE
from ..utils.rng import RandomSource
from .events import generate_event, roll_for_event
from .party import (
    apply_daily_effects,
    clone_party,
    get_alive_count,
    get_alive_members,
    is_party_alive,
    update_health,
)
from .route import is_destination
from .supplies import clone_supplies, get_daily_food_need
from .travel import TravelCheck, TravelDayResult, advance_day, can_continue, travel_one_day
from .weather import generate_weather, get_weather_effect

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Outcome of one day, computed by advance_turn and not yet committed.

    Attributes:
        distance_traveled: Miles covered today
        reached_location: Location reached today, if any
        event: Event rolled today, if any
        messages: Messages produced today
        weather: Weather the day was played in
        party: Party after today's health and status effects
        food_consumed: Lbs of food the party ate (deducted on commit)
        starved: True if there was not enough food
        next_event_id: Event counter after today
        blocked: True if the travel gate stopped the day; no day passes
        blocked_reason: Why the gate stopped the day
    """

    distance_traveled: int
    reached_location: Location | None
    event: GameEvent | None
    messages: list[str] = field(default_factory=list)
    weather: WeatherType = WeatherType.CLEAR
    party: list[PartyMember] = field(default_factory=list)
    food_consumed: int = 0
    starved: bool = False
    next_event_id: int = 0
    blocked: bool = False
    blocked_reason: str | None = None


class TurnExecutor:
    """Orchestrates the daily phases in the correct order.

    Phases that change health work on a cloned party handed in by the
    caller; none of them mutate the GameData they are given.
    """

    # =========================================================================
    # INDEPENDENT PHASE METHODS
    # =========================================================================

    def execute_phase_weather(self, state: GameData, rng: RandomSource) -> WeatherType:
        """Phase 1: draw the day's weather for the current month."""
        return generate_weather(state.month, rng)

    def execute_phase_travel_gate(self, state: GameData) -> TravelCheck:
        """Phase 2: check whether the party can set out at all."""
        return can_continue(state.party, state.supplies, state.wagon, state.current_location_index)

    def execute_phase_movement(
        self, state: GameData, weather: WeatherType
    ) -> tuple[TravelDayResult, list[str]]:
        """Phase 3: move along the route.

        Args:
            state: Current game state
            weather: Today's weather

        Returns:
            Tuple of (travel result, messages)
        """
        travel = travel_one_day(
            state.distance_traveled,
            state.current_location_index,
            state.pace,
            weather,
            state.wagon,
        )

        messages = []
        if travel.distance_traveled > 0:
            messages.append(f"Traveled {travel.distance_traveled} miles.")
        elif weather == WeatherType.BLIZZARD:
            messages.append("Blizzard! Cannot travel today.")

        return travel, messages

    def execute_phase_food(
        self, state: GameData, party: list[PartyMember]
    ) -> tuple[int, bool, list[str]]:
        """Phase 4: work out the day's food and apply starvation.

        The living party eats its ration. If there is not enough, all
        remaining food is eaten and every living member takes
        STARVATION_DAMAGE.

        Args:
            state: Current game state (supplies are read, not changed)
            party: Working copy of the party

        Returns:
            Tuple of (food consumed, starved flag, messages)
        """
        food_needed = get_daily_food_need(get_alive_count(party), state.rations)

        if state.supplies.food >= food_needed:
            return food_needed, False, []

        for member in get_alive_members(party):
            update_health(party, member.id, -STARVATION_DAMAGE)

        return state.supplies.food, True, ["Not enough food! The party is starving."]

    def execute_phase_weather_health(
        self, state: GameData, party: list[PartyMember], weather: WeatherType
    ) -> list[str]:
        """Phase 5: apply the weather's health modifier to the living party.

        Negative modifiers are scaled by the difficulty's weather harshness
        and floored; positive ones are applied as is.
        """
        health_mod = get_weather_effect(weather).health_mod
        if health_mod == 0:
            return []

        if health_mod < 0:
            harshness = DIFFICULTY_SETTINGS[state.difficulty].weather_harshness
            health_mod = math.floor(health_mod * harshness)

        for member in get_alive_members(party):
            update_health(party, member.id, health_mod)

        if health_mod < 0:
            return [f"The {weather.value} weather is taking a toll on the party."]
        return []

    def execute_phase_daily_effects(
        self, state: GameData, party: list[PartyMember], rng: RandomSource
    ) -> list[str]:
        """Phase 6: weekly pace/ration effects, sickness and injury.

        The weekly effects land on every DAYS_PER_WEEK-th day on the trail,
        counted from days_elapsed rather than the calendar.
        """
        day_of_week = state.days_elapsed % DAYS_PER_WEEK + 1
        return apply_daily_effects(party, state.rations, state.pace, day_of_week, rng)

    def execute_phase_event(
        self, state: GameData, party: list[PartyMember], rng: RandomSource
    ) -> tuple[GameEvent | None, int]:
        """Phase 7: roll for a random event.

        Args:
            state: Current game state
            party: Working copy of the party, used to pick event targets
            rng: Random source

        Returns:
            Tuple of (event or None, next event id)
        """
        multiplier = DIFFICULTY_SETTINGS[state.difficulty].event_multiplier
        event_type = roll_for_event(rng, multiplier)
        if event_type is None:
            return None, state.next_event_id

        event = generate_event(event_type, replace(state, party=party), rng, state.next_event_id)
        return event, state.next_event_id + 1

    # =========================================================================
    # ORCHESTRATION METHODS
    # =========================================================================

    def advance_turn(self, state: GameData, rng: RandomSource | None = None) -> TurnResult:
        """Compute one day on the trail without committing it.

        Args:
            state: Current game state (not modified)
            rng: Random source, defaults to the game's seeded RNG

        Returns:
            TurnResult for apply_turn_result
        """
        if rng is None:
            rng = state.rng

        weather = self.execute_phase_weather(state, rng)

        check = self.execute_phase_travel_gate(state)
        if not check.can_travel:
            logger.debug(f"Travel blocked: {check.reason}")
            return TurnResult(
                distance_traveled=0,
                reached_location=None,
                event=None,
                messages=[check.reason],
                weather=weather,
                party=clone_party(state.party),
                next_event_id=state.next_event_id,
                blocked=True,
                blocked_reason=check.reason,
            )

        party = clone_party(state.party)
        messages: list[str] = []

        travel, travel_messages = self.execute_phase_movement(state, weather)
        messages.extend(travel_messages)

        food_consumed, starved, food_messages = self.execute_phase_food(state, party)
        messages.extend(food_messages)

        messages.extend(self.execute_phase_weather_health(state, party, weather))
        messages.extend(self.execute_phase_daily_effects(state, party, rng))

        event = None
        next_event_id = state.next_event_id
        if is_party_alive(party):
            event, next_event_id = self.execute_phase_event(state, party, rng)
        else:
            messages.append("Your entire party has perished.")

        logger.debug(
            f"Day {state.days_elapsed + 1}: {travel.distance_traveled} miles, "
            f"{weather.value}, ate {food_consumed} lbs"
        )

        return TurnResult(
            distance_traveled=travel.distance_traveled,
            reached_location=travel.reached_location,
            event=event,
            messages=messages,
            weather=weather,
            party=party,
            food_consumed=food_consumed,
            starved=starved,
            next_event_id=next_event_id,
        )

    def apply_turn_result(
        self,
        state: GameData,
        result: TurnResult,
        rng: RandomSource | None = None,
    ) -> GameData:
        """Commit a TurnResult and route the screen.

        The day's food is deducted here and only here. Screen priority:
        GameOver, Victory, Event, River, Landmark, Traveling.

        Args:
            state: Game state the result was computed from
            result: Output of advance_turn
            rng: Random source for the weather redraw, defaults to the game's RNG

        Returns:
            New game state
        """
        if rng is None:
            rng = state.rng
        messages = state.messages + result.messages

        if result.blocked:
            screen = state.screen
            if not is_party_alive(state.party):
                screen = GameScreen.GAME_OVER
            elif is_destination(state.current_location_index):
                screen = GameScreen.VICTORY
            return replace(state, screen=screen, messages=messages)

        supplies = clone_supplies(state.supplies)
        supplies.food = max(0, supplies.food - result.food_consumed)

        date = advance_day(state.date)

        location_index = state.current_location_index
        river_difficulty = state.river_difficulty
        reached = result.reached_location
        if reached is not None:
            location_index += 1
            logger.info(f"Reached {reached.name} after {state.days_elapsed + 1} days")
            if reached.type == LocationType.RIVER:
                river_difficulty = reached.river_difficulty

        if not is_party_alive(result.party):
            screen = GameScreen.GAME_OVER
            logger.info("The entire party has perished")
        elif is_destination(location_index):
            screen = GameScreen.VICTORY
        elif result.event is not None:
            screen = GameScreen.EVENT
        elif reached is not None and reached.type == LocationType.RIVER:
            screen = GameScreen.RIVER
        elif reached is not None:
            screen = GameScreen.LANDMARK
        else:
            screen = GameScreen.TRAVELING

        event = result.event if screen == GameScreen.EVENT else None
        landmark_pending = (
            screen == GameScreen.EVENT
            and reached is not None
            and reached.type != LocationType.RIVER
        )

        return replace(
            state,
            day=date.day,
            month=date.month,
            year=date.year,
            days_elapsed=state.days_elapsed + 1,
            distance_traveled=state.distance_traveled + result.distance_traveled,
            current_location_index=location_index,
            party=result.party,
            supplies=supplies,
            weather=generate_weather(date.month, rng),
            current_event=event,
            river_difficulty=river_difficulty,
            landmark_pending=landmark_pending,
            screen=screen,
            messages=messages,
            next_event_id=result.next_event_id,
        )


_executor = TurnExecutor()


def advance_turn(state: GameData, rng: RandomSource | None = None) -> TurnResult:
    """Compute one day with the default executor."""
    return _executor.advance_turn(state, rng)


def apply_turn_result(
    state: GameData, result: TurnResult, rng: RandomSource | None = None
) -> GameData:
    """Commit one day with the default executor."""
    return _executor.apply_turn_result(state, result, rng)
