"""Tests for player actions outside the daily turn."""

import pytest

from caravan.engine.actions import (
    add_message,
    buy_item,
    clear_messages,
    handle_event,
    handle_hunting,
    handle_river,
    repair_wagon_action,
    rest,
    sell_item,
    set_current_event,
    set_pace,
    set_rations,
    set_screen,
    use_medicine_on_member,
)
from caravan.engine.events import generate_event
from caravan.engine.river import CrossingMethod
from caravan.engine.store import StoreItem
from caravan.models.event import EventType
from caravan.models.game import Difficulty, GameScreen, PaceType, RationsType
from caravan.models.party import PartyStatus
from caravan.models.wagon import Wagon
from helpers import FixedRNG, ScriptedRNG, make_state


def at_event(event_type, target_draw=0.5, **overrides):
    """A game on the event screen; target_draw 0.5 targets Ben."""
    state = make_state(screen=GameScreen.EVENT, **overrides)
    state.current_event = generate_event(event_type, state, FixedRNG(target_draw), event_id=0)
    return state


def at_river(**overrides):
    fields = {
        "screen": GameScreen.RIVER,
        "current_location_index": 1,
        "distance_traveled": 102,
        "river_difficulty": 2,
    }
    fields.update(overrides)
    return make_state(**fields)


class TestHandleEvent:
    def test_untreated_illness(self):
        state = at_event(EventType.ILLNESS)
        rng = ScriptedRNG([0.0, 0.0])

        new_state = handle_event(state, 1, rng)

        assert rng.exhausted
        ann, ben, cal = new_state.party
        assert ann.health == 80
        assert ben.status == PartyStatus.SICK
        assert ben.sickness_turns == 3
        assert cal.health == 100
        assert new_state.supplies.food == 188
        assert new_state.days_elapsed == 2
        assert new_state.day == 3
        assert new_state.current_event is None
        assert new_state.screen == GameScreen.TRAVELING
        assert new_state.messages == ["Without medicine, the illness takes its toll."]

    def test_treated_illness(self):
        state = at_event(EventType.ILLNESS)

        new_state = handle_event(state, 0, ScriptedRNG([]))

        assert new_state.supplies.medicine == 4
        assert new_state.days_elapsed == 0
        assert all(m.status == PartyStatus.HEALTHY for m in new_state.party)

    def test_does_not_mutate_state(self):
        state = at_event(EventType.ILLNESS)

        handle_event(state, 1, ScriptedRNG([0.0, 0.0]))

        assert state.party[0].health == 100
        assert state.party[1].status == PartyStatus.HEALTHY
        assert state.supplies.food == 200
        assert state.current_event is not None

    def test_makeshift_fix_damages_wagon(self):
        state = at_event(EventType.BREAKDOWN)

        new_state = handle_event(state, 1, FixedRNG(0.0))

        assert new_state.wagon.condition == 90
        assert new_state.supplies.food == 194
        assert state.wagon.condition == 100

    def test_returns_to_pending_river(self):
        state = at_event(
            EventType.ILLNESS,
            current_location_index=1,
            distance_traveled=107,
            river_difficulty=2,
        )

        new_state = handle_event(state, 0, ScriptedRNG([]))

        assert new_state.screen == GameScreen.RIVER
        assert new_state.river_difficulty == 2

    def test_returns_to_interrupted_landmark(self):
        state = at_event(
            EventType.ILLNESS,
            current_location_index=2,
            distance_traveled=307,
            landmark_pending=True,
        )

        new_state = handle_event(state, 0, ScriptedRNG([]))

        assert new_state.screen == GameScreen.LANDMARK
        assert new_state.landmark_pending is False

    def test_no_pending_event(self):
        state = make_state()

        assert handle_event(state, 0, ScriptedRNG([])) is state


class TestHandleRiver:
    def test_successful_ford(self):
        new_state = handle_river(at_river(), CrossingMethod.FORD, FixedRNG(0.99))

        assert new_state.screen == GameScreen.TRAVELING
        assert new_state.river_difficulty is None
        assert new_state.messages == ["You successfully forded the river."]

    def test_ford_catastrophe(self):
        state = at_river()

        new_state = handle_river(state, CrossingMethod.FORD, ScriptedRNG([0.0, 0.9, 0.1, 0.0]))

        assert new_state.supplies.food == 100
        assert new_state.supplies.ammunition == 50
        assert new_state.supplies.spare_parts == 1
        assert new_state.party[0].status == PartyStatus.DEAD
        assert new_state.messages[-1] == "Ann drowned in the crossing."
        assert new_state.screen == GameScreen.RIVER
        assert new_state.river_difficulty == 2
        assert state.party[0].status == PartyStatus.HEALTHY

    def test_last_member_drowning_ends_the_game(self):
        state = at_river(names=("Ann",))

        new_state = handle_river(state, CrossingMethod.FORD, ScriptedRNG([0.0, 0.9, 0.1, 0.0]))

        assert new_state.screen == GameScreen.GAME_OVER

    def test_wait_lowers_difficulty_and_passes_days(self):
        new_state = handle_river(at_river(), CrossingMethod.WAIT, ScriptedRNG([]))

        assert new_state.river_difficulty == 1
        assert new_state.supplies.food == 182
        assert new_state.days_elapsed == 3
        assert new_state.screen == GameScreen.RIVER

    def test_waiting_through_the_end_of_a_week(self):
        state = at_river(days_elapsed=5)

        new_state = handle_river(state, CrossingMethod.WAIT, ScriptedRNG([]))

        assert [m.health for m in new_state.party] == [98, 98, 98]
        assert [m.health for m in state.party] == [100, 100, 100]

    def test_ferry(self):
        new_state = handle_river(at_river(), CrossingMethod.FERRY, ScriptedRNG([]))

        assert new_state.supplies.money == 390
        assert new_state.screen == GameScreen.TRAVELING

    def test_caulk(self):
        new_state = handle_river(at_river(), "caulk", FixedRNG(0.99))

        assert new_state.supplies.spare_parts == 1
        assert new_state.screen == GameScreen.TRAVELING

    def test_difficulty_falls_back_to_location(self):
        state = at_river(river_difficulty=None)

        new_state = handle_river(state, CrossingMethod.FERRY, ScriptedRNG([]))

        assert new_state.supplies.money == 390

    def test_not_at_a_river(self):
        state = make_state()

        assert handle_river(state, CrossingMethod.FORD, ScriptedRNG([])) is state


class TestHunting:
    def test_successful_hunt_takes_a_day(self):
        new_state = handle_hunting(make_state(), 20, ScriptedRNG([0.0, 0.5]))

        assert new_state.supplies.ammunition == 80
        assert new_state.supplies.food == 249
        assert new_state.days_elapsed == 1
        assert new_state.screen == GameScreen.TRAVELING

    def test_invalid_hunt_costs_nothing(self):
        state = make_state()

        new_state = handle_hunting(state, 500, ScriptedRNG([]))

        assert new_state.supplies == state.supplies
        assert new_state.days_elapsed == 0
        assert new_state.messages == ["Not enough ammunition to hunt."]

    def test_hunting_day_ends_the_week(self):
        state = make_state(days_elapsed=6)

        new_state = handle_hunting(state, 20, ScriptedRNG([0.99]))

        assert new_state.days_elapsed == 7
        assert [m.health for m in new_state.party] == [98, 98, 98]
        assert [m.health for m in state.party] == [100, 100, 100]


class TestRest:
    @pytest.mark.parametrize(
        "difficulty, health",
        [(Difficulty.NORMAL, 60), (Difficulty.EASY, 65), (Difficulty.HARD, 57)],
    )
    def test_heal_amount_by_difficulty(self, difficulty, health):
        state = make_state(difficulty=difficulty)
        for member in state.party:
            member.health = 50

        new_state = rest(state)

        assert [m.health for m in new_state.party] == [health] * 3
        assert new_state.supplies.food == 194
        assert new_state.messages == ["The party rests and recovers."]

    def test_rest_cures_injuries(self):
        state = make_state()
        state.party[2].status = PartyStatus.INJURED

        new_state = rest(state)

        assert new_state.party[2].status == PartyStatus.HEALTHY
        assert state.party[2].status == PartyStatus.INJURED

    def test_rest_day_ends_the_week(self):
        new_state = rest(make_state(days_elapsed=6))

        assert [m.health for m in new_state.party] == [98, 98, 98]
        assert new_state.screen == GameScreen.TRAVELING


class TestMedicineAndRepair:
    def test_cures_sick_member(self):
        state = make_state()
        state.party[1].status = PartyStatus.SICK
        state.party[1].sickness_turns = 4

        new_state = use_medicine_on_member(state, 1)

        assert new_state.party[1].status == PartyStatus.HEALTHY
        assert new_state.party[1].sickness_turns == 0
        assert new_state.supplies.medicine == 4
        assert new_state.messages == ["Ben has been treated and is recovering."]

    def test_healthy_member_is_left_alone(self):
        state = make_state()

        assert use_medicine_on_member(state, 1) is state
        assert use_medicine_on_member(state, 99) is state

    def test_no_medicine(self):
        state = make_state()
        state.supplies.medicine = 0

        new_state = use_medicine_on_member(state, 1)

        assert new_state.messages == ["No medicine available."]

    @pytest.mark.parametrize("condition, restored", [(60, 25), (90, 10)])
    def test_repair(self, condition, restored):
        state = make_state(wagon=Wagon(condition=condition, oxen=2))

        new_state = repair_wagon_action(state)

        assert new_state.wagon.condition == condition + restored
        assert new_state.supplies.spare_parts == 1
        assert new_state.messages == [f"Wagon has been repaired (+{restored} condition)."]
        assert state.wagon.condition == condition

    def test_repair_refused(self):
        state = make_state()
        assert repair_wagon_action(state).messages == ["Wagon is already in good condition."]

        state = make_state(wagon=Wagon(condition=50, oxen=2))
        state.supplies.spare_parts = 0
        assert repair_wagon_action(state).messages == ["No spare parts available."]


class TestStoreActions:
    def test_buy_food(self):
        new_state = buy_item(make_state(), StoreItem.FOOD, 100)

        assert new_state.supplies.food == 300
        assert new_state.supplies.money == pytest.approx(380)
        assert new_state.messages == ["Purchased 100 lbs for $20.00."]

    def test_buy_ammunition_by_the_box(self):
        new_state = buy_item(make_state(), StoreItem.AMMUNITION, 2)

        assert new_state.supplies.ammunition == 140
        assert new_state.supplies.money == pytest.approx(396)

    def test_buy_oxen_goes_to_wagon(self):
        new_state = buy_item(make_state(), StoreItem.OXEN, 2)

        assert new_state.wagon.oxen == 4
        assert new_state.supplies.money == pytest.approx(320)

    def test_oxen_capped(self):
        new_state = buy_item(make_state(), StoreItem.OXEN, 3)

        assert new_state.wagon.oxen == 2
        assert new_state.messages == ["Your wagon can only be pulled by 4 oxen."]

    def test_not_enough_money(self):
        new_state = buy_item(make_state(), StoreItem.SPARE_PARTS, 50)

        assert new_state.supplies.spare_parts == 2
        assert new_state.messages == ["Not enough money. Need $500.00."]

    def test_no_store_at_landmark(self):
        state = make_state(current_location_index=3, distance_traveled=554)

        assert buy_item(state, StoreItem.FOOD, 10).messages == ["There is no store here."]
        assert sell_item(state, StoreItem.FOOD, 10).messages == ["There is no store here."]

    def test_sell_food(self):
        new_state = sell_item(make_state(), StoreItem.FOOD, 100)

        assert new_state.supplies.food == 100
        assert new_state.supplies.money == pytest.approx(410)

    def test_sell_oxen_comes_off_wagon(self):
        new_state = sell_item(make_state(), StoreItem.OXEN, 1)

        assert new_state.wagon.oxen == 1
        assert new_state.supplies.money == pytest.approx(420)

    def test_cannot_sell_the_last_ox(self):
        state = make_state()

        new_state = sell_item(state, StoreItem.OXEN, 2)

        assert new_state.wagon.oxen == 2
        assert new_state.supplies.money == 400
        assert new_state.messages == ["You need at least 1 ox to pull the wagon."]

    def test_cannot_sell_more_than_owned(self):
        new_state = sell_item(make_state(), StoreItem.MEDICINE, 10)

        assert new_state.supplies.medicine == 5
        assert new_state.messages == ["You only have 5 to sell."]


def test_setters_return_new_state():
    state = make_state()

    assert set_pace(state, PaceType.GRUELING).pace == PaceType.GRUELING
    assert set_rations(state, "filling").rations == RationsType.FILLING
    assert set_screen(state, GameScreen.STORE).screen == GameScreen.STORE
    assert set_current_event(state, None).current_event is None
    assert add_message(state, "Hello").messages == ["Hello"]
    assert clear_messages(add_message(state, "Hello")).messages == []
    assert state.pace == PaceType.STEADY
    assert state.messages == []
