"""Leaderboard of finished journeys, persisted as a JSON file.

The leaderboard is auxiliary state: a missing, unreadable or malformed file
is treated as an empty leaderboard and logged, never raised.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from .constants import MAX_LEADERBOARD_ENTRIES
from .serialization import STATE_DIR

logger = logging.getLogger(__name__)

DEFAULT_LEADERBOARD_FILE = "leaderboard.json"


@dataclass
class LeaderboardEntry:
    name: str
    score: int
    survived: bool
    party_survivors: int
    distance_traveled: int
    date: str  # ISO date the journey ended


class Leaderboard:
    """Top scores, sorted by score then by survivors, capped at MAX_LEADERBOARD_ENTRIES."""

    def __init__(self, path: str | Path | None = None):
        """Open a leaderboard file.

        Args:
            path: JSON file; relative paths go under the state directory.
                Defaults to state/leaderboard.json
        """
        path = Path(path or DEFAULT_LEADERBOARD_FILE)
        if not path.is_absolute():
            path = STATE_DIR / path
        self.path = path

    def get_entries(self) -> list[LeaderboardEntry]:
        if not self.path.exists():
            return []
        try:
            with open(self.path) as f:
                data = json.load(f)
            return [LeaderboardEntry(**entry) for entry in data]
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Ignoring unreadable leaderboard {self.path}: {e}")
            return []

    def _save(self, entries: list[LeaderboardEntry]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump([asdict(e) for e in entries], f, indent=2)
        except OSError as e:
            logger.warning(f"Could not write leaderboard {self.path}: {e}")

    def add_entry(self, entry: LeaderboardEntry) -> list[LeaderboardEntry]:
        """Insert an entry and return the trimmed, sorted leaderboard."""
        entries = self.get_entries()
        entries.append(entry)
        entries.sort(key=lambda e: (-e.score, -e.party_survivors))
        trimmed = entries[:MAX_LEADERBOARD_ENTRIES]
        self._save(trimmed)
        return trimmed

    def get_top(self, n: int = MAX_LEADERBOARD_ENTRIES) -> list[LeaderboardEntry]:
        return self.get_entries()[:n]

    def would_rank(self, score: int) -> int | None:
        """Return the 1-based position a score would take, or None if it would not place.

        A score equal to an existing one places below it.
        """
        entries = self.get_entries()
        for position, entry in enumerate(entries):
            if score > entry.score:
                return position + 1
        if len(entries) < MAX_LEADERBOARD_ENTRIES:
            return len(entries) + 1
        return None

    def get_rank(self, score: int) -> int | None:
        """Return the 1-based position of the first entry with this score."""
        for position, entry in enumerate(self.get_entries()):
            if entry.score == score:
                return position + 1
        return None

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
