"""Game state serialization to/from JSON.

This module provides functions to save and load game state to JSON files,
so a journey can be suspended and resumed with the same random stream.
"""

import json
from pathlib import Path
from typing import Any

from ..models.event import EventChoice, GameEvent
from ..models.game import Difficulty, GameData, GameScreen, PaceType, RationsType
from ..models.party import PartyMember, PartyStatus
from ..models.supplies import SUPPLY_FIELDS, Supplies
from ..models.wagon import Wagon
from ..models.weather import WeatherType
from .rng import GameRNG

STATE_DIR = Path(__file__).parent.parent.parent / "state"


def _resolve(filepath: str, create_dir: bool = False) -> Path:
    path = Path(filepath)
    if not path.is_absolute():
        if create_dir:
            STATE_DIR.mkdir(exist_ok=True)
        path = STATE_DIR / filepath
    return path


def save_game(game: GameData, filepath: str) -> None:
    """Save game state to JSON file.

    Args:
        game: Game state to save
        filepath: Path to save file (will be created in /state directory if relative)

    Example:
        save_game(game, "my_game.json")  # Saves to state/my_game.json
        save_game(game, "/absolute/path/game.json")  # Saves to absolute path
    """
    path = _resolve(filepath, create_dir=True)
    with open(path, "w") as f:
        json.dump(serialize_game(game), f, indent=2)


def load_game(filepath: str) -> GameData:
    """Load game state from JSON file.

    Args:
        filepath: Path to saved game file

    Returns:
        Loaded GameData

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
    """
    path = _resolve(filepath)
    with open(path) as f:
        game_dict = json.load(f)
    return deserialize_game(game_dict)


def serialize_game(game: GameData) -> dict[str, Any]:
    """Convert GameData to a JSON-compatible dictionary."""
    return {
        "seed": game.seed,
        "screen": game.screen.value,
        "difficulty": game.difficulty.value,
        "day": game.day,
        "month": game.month,
        "year": game.year,
        "days_elapsed": game.days_elapsed,
        "distance_traveled": game.distance_traveled,
        "current_location_index": game.current_location_index,
        "party": [_serialize_member(m) for m in game.party],
        "supplies": {name: getattr(game.supplies, name) for name in SUPPLY_FIELDS},
        "wagon": {"condition": game.wagon.condition, "oxen": game.wagon.oxen},
        "pace": game.pace.value,
        "rations": game.rations.value,
        "weather": game.weather.value,
        "current_event": _serialize_event(game.current_event) if game.current_event else None,
        "river_difficulty": game.river_difficulty,
        "landmark_pending": game.landmark_pending,
        "messages": list(game.messages),
        "next_member_id": game.next_member_id,
        "next_event_id": game.next_event_id,
        "rng_state": game.rng.get_state(),  # Save RNG state for determinism
    }


def deserialize_game(data: dict[str, Any]) -> GameData:
    """Reconstruct GameData from a dictionary.

    Raises:
        ValueError: If a field holds an impossible value
        KeyError: If a required field is missing
    """
    rng = GameRNG(data["seed"])
    if "rng_state" in data:
        # JSON turns the RNG state tuples into lists
        state = data["rng_state"]
        if isinstance(state, list):
            state = (state[0], tuple(state[1]), state[2])
        rng.set_state(state)

    event_data = data.get("current_event")

    return GameData(
        seed=data["seed"],
        screen=GameScreen(data["screen"]),
        difficulty=Difficulty(data["difficulty"]),
        day=data["day"],
        month=data["month"],
        year=data["year"],
        days_elapsed=data.get("days_elapsed", 0),
        distance_traveled=data["distance_traveled"],
        current_location_index=data["current_location_index"],
        party=[_deserialize_member(m) for m in data["party"]],
        supplies=Supplies(**data["supplies"]),
        wagon=Wagon(**data["wagon"]),
        pace=PaceType(data["pace"]),
        rations=RationsType(data["rations"]),
        weather=WeatherType(data["weather"]),
        current_event=_deserialize_event(event_data) if event_data else None,
        river_difficulty=data.get("river_difficulty"),
        landmark_pending=data.get("landmark_pending", False),
        messages=data.get("messages", []),
        next_member_id=data.get("next_member_id", len(data["party"])),
        next_event_id=data.get("next_event_id", 0),
        rng=rng,
    )


def _serialize_member(member: PartyMember) -> dict[str, Any]:
    return {
        "id": member.id,
        "name": member.name,
        "health": member.health,
        "status": member.status.value,
        "sickness_turns": member.sickness_turns,
    }


def _deserialize_member(data: dict[str, Any]) -> PartyMember:
    return PartyMember(
        id=data["id"],
        name=data["name"],
        health=data["health"],
        status=PartyStatus(data["status"]),
        sickness_turns=data.get("sickness_turns", 0),
    )


def _serialize_event(event: GameEvent) -> dict[str, Any]:
    return {
        "id": event.id,
        "type": event.type.value,
        "title": event.title,
        "description": event.description,
        "choices": [{"id": c.id, "text": c.text} for c in event.choices],
        "target_member_id": event.target_member_id,
    }


def _deserialize_event(data: dict[str, Any]) -> GameEvent:
    return GameEvent(
        id=data["id"],
        type=data["type"],
        title=data["title"],
        description=data["description"],
        choices=[EventChoice(c["id"], c["text"]) for c in data["choices"]],
        target_member_id=data.get("target_member_id"),
    )
