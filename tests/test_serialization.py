"""Tests for game state serialization."""

import json

from caravan.engine.events import generate_event
from caravan.engine.turn_executor import advance_turn, apply_turn_result
from caravan.models.event import EventType
from caravan.models.game import Difficulty, GameScreen
from caravan.models.party import PartyStatus
from caravan.utils.serialization import (
    deserialize_game,
    load_game,
    save_game,
    serialize_game,
)
from helpers import FixedRNG, make_state


def test_save_and_load_round_trip(tmp_path):
    state = make_state(
        difficulty=Difficulty.HARD, river_difficulty=3, landmark_pending=True, next_event_id=2
    )
    state.party[1].status = PartyStatus.SICK
    state.party[1].sickness_turns = 4
    state.current_event = generate_event(EventType.INJURY, state, FixedRNG(0.0), event_id=1)
    state.messages.append("Traveled 17 miles.")
    path = tmp_path / "game.json"

    save_game(state, str(path))
    loaded = load_game(str(path))

    assert serialize_game(loaded) == serialize_game(state)
    assert loaded.party[1].sickness_turns == 4
    assert loaded.current_event.target_member_id == 0
    assert loaded.difficulty == Difficulty.HARD
    assert loaded.landmark_pending is True


def test_loaded_game_continues_the_random_stream(tmp_path):
    """A game saved mid-journey plays out exactly as if it never stopped."""
    state = make_state()
    for _ in range(3):
        state = apply_turn_result(state, advance_turn(state))

    path = tmp_path / "midway.json"
    save_game(state, str(path))
    resumed = load_game(str(path))

    for _ in range(5):
        state = apply_turn_result(state, advance_turn(state))
        resumed = apply_turn_result(resumed, advance_turn(resumed))

    assert serialize_game(resumed) == serialize_game(state)


def test_serialized_game_is_json():
    data = serialize_game(make_state(screen=GameScreen.STORE))

    restored = deserialize_game(json.loads(json.dumps(data)))

    assert restored.screen == GameScreen.STORE
    assert restored.next_member_id == 3
    assert restored.rng.random() == make_state().rng.random()
