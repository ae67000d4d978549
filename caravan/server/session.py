"""Game session management for the HTTP API."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date

from ..engine.route import ROUTE
from ..engine.turn_executor import TurnExecutor, TurnResult
from ..engine.game_setup import create_game
from ..engine.victory import (
    get_current_location,
    get_remaining_distance,
    is_victory,
    score_game,
)
from ..engine.party import get_alive_count
from ..engine.river import get_crossing_options
from ..engine.store import get_store_inventory
from ..models.event import GameEvent
from ..models.game import TERMINAL_SCREENS, Difficulty, GameData
from ..models.location import Location
from ..utils.leaderboard import Leaderboard, LeaderboardEntry

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """One journey played through the API.

    Holds the current snapshot and, between the two halves of a turn, the
    computed but uncommitted TurnResult.
    """

    id: str
    game: GameData
    executor: TurnExecutor
    pending_turn: TurnResult | None = None
    scored: bool = False  # Set once the final score is on the leaderboard

    @property
    def is_finished(self) -> bool:
        return self.game.screen in TERMINAL_SCREENS

    def compute_turn(self) -> TurnResult:
        """Compute the next day and keep it pending until applied."""
        self.pending_turn = self.executor.advance_turn(self.game)
        return self.pending_turn

    def apply_pending_turn(self) -> GameData:
        """Commit the pending day.

        Raises:
            ValueError: If no turn has been computed
        """
        if self.pending_turn is None:
            raise ValueError("No turn has been computed")
        self.game = self.executor.apply_turn_result(self.game, self.pending_turn)
        self.pending_turn = None
        return self.game

    def get_state(self) -> dict:
        """Serialize the game state for API responses."""
        game = self.game
        location = get_current_location(game)

        state = {
            "screen": game.screen.value,
            "difficulty": game.difficulty.value,
            "date": {"day": game.day, "month": game.month, "year": game.year},
            "daysElapsed": game.days_elapsed,
            "distanceTraveled": game.distance_traveled,
            "distanceRemaining": get_remaining_distance(game),
            "location": self._serialize_location(location) if location else None,
            "party": [
                {
                    "id": m.id,
                    "name": m.name,
                    "health": m.health,
                    "status": m.status.value,
                }
                for m in game.party
            ],
            "supplies": {
                "food": game.supplies.food,
                "ammunition": game.supplies.ammunition,
                "medicine": game.supplies.medicine,
                "spareParts": game.supplies.spare_parts,
                "money": round(game.supplies.money, 2),
            },
            "wagon": {"condition": game.wagon.condition, "oxen": game.wagon.oxen},
            "pace": game.pace.value,
            "rations": game.rations.value,
            "weather": game.weather.value,
            "currentEvent": self.serialize_event(game.current_event),
            "messages": list(game.messages),
            "pendingTurn": self.pending_turn is not None,
        }

        if location is not None and location.has_store:
            state["store"] = get_store_inventory()
        if game.river_difficulty is not None:
            state["river"] = {
                "difficulty": game.river_difficulty,
                "options": get_crossing_options(game.river_difficulty, game.supplies),
            }
        if self.is_finished:
            state["score"] = score_game(game)

        return state

    def serialize_turn(self, result: TurnResult) -> dict:
        """Convert a TurnResult to a dict for API response."""
        reached = result.reached_location
        return {
            "distanceTraveled": result.distance_traveled,
            "reachedLocation": self._serialize_location(reached) if reached else None,
            "event": self.serialize_event(result.event),
            "messages": list(result.messages),
            "weather": result.weather.value,
            "foodConsumed": result.food_consumed,
            "starved": result.starved,
            "blocked": result.blocked,
            "blockedReason": result.blocked_reason,
        }

    @staticmethod
    def serialize_event(event: GameEvent | None) -> dict | None:
        if event is None:
            return None
        return {
            "id": event.id,
            "type": event.type.value,
            "title": event.title,
            "description": event.description,
            "choices": [{"id": c.id, "text": c.text} for c in event.choices],
        }

    @staticmethod
    def _serialize_location(location: Location) -> dict:
        return {
            "id": location.id,
            "name": location.name,
            "type": location.type.value,
            "distanceFromStart": location.distance_from_start,
            "hasStore": location.has_store,
            "routeIndex": ROUTE.index(location),
        }


class GameSessionManager:
    """Manages all active game sessions.

    In-memory storage; sessions are lost when the server stops.
    """

    def __init__(self, leaderboard: Leaderboard | None = None):
        self.sessions: dict[str, GameSession] = {}
        self.leaderboard = leaderboard or Leaderboard()

    def create_session(
        self,
        difficulty: Difficulty = Difficulty.NORMAL,
        seed: int | None = None,
    ) -> GameSession:
        """Create a new game session.

        Args:
            difficulty: Difficulty mode for the game
            seed: Optional RNG seed for determinism

        Returns:
            Newly created GameSession
        """
        game_id = f"game-{uuid.uuid4().hex[:8]}"

        if seed is None:
            seed = uuid.uuid4().int % (2**32)

        session = GameSession(
            id=game_id,
            game=create_game(difficulty, seed=seed),
            executor=TurnExecutor(),
        )
        self.sessions[game_id] = session

        logger.info(f"Created game {game_id}: difficulty={difficulty.value}, seed={seed}")

        return session

    def get(self, game_id: str) -> GameSession | None:
        return self.sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Delete a game session.

        Returns:
            True if deleted, False if not found
        """
        if game_id in self.sessions:
            del self.sessions[game_id]
            logger.info(f"Deleted game {game_id}")
            return True
        return False

    def submit_score(self, session: GameSession, name: str) -> tuple[int, int | None]:
        """Record a finished game on the leaderboard.

        Args:
            session: Session on a terminal screen
            name: Name to record

        Returns:
            Tuple of (score, 1-based rank or None if it did not place)

        Raises:
            ValueError: If the game is still running or was already scored
        """
        if not session.is_finished:
            raise ValueError("Game is not finished")
        if session.scored:
            raise ValueError("Score already submitted")

        game = session.game
        score = score_game(game)
        entry = LeaderboardEntry(
            name=name,
            score=score,
            survived=is_victory(game),
            party_survivors=get_alive_count(game.party),
            distance_traveled=game.distance_traveled,
            date=date.today().isoformat(),
        )
        entries = self.leaderboard.add_entry(entry)
        session.scored = True

        rank = next((i + 1 for i, e in enumerate(entries) if e is entry), None)
        logger.info(f"Game {session.id} scored {score} (rank {rank})")
        return score, rank

    def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} game sessions")
        self.sessions.clear()
