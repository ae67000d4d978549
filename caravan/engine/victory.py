"""End-of-game queries and scoring.

All functions here are pure reads of the game state.
"""

from ..models.game import GameData, GameScreen
from ..models.location import Location
from ..utils.constants import (
    SCORE_PER_DAY_SAVED,
    SCORE_PER_SURVIVOR,
    SCORE_SURVIVAL_BONUS,
    SCORE_TIME_TARGET_DAYS,
)
from .party import get_alive_count, is_party_alive
from .route import get_location, is_destination
from .travel import get_distance_remaining


def is_game_over(state: GameData) -> bool:
    """Return True if the whole party has died."""
    return not is_party_alive(state.party)


def is_victory(state: GameData) -> bool:
    """Return True if a living party has reached the destination."""
    return is_destination(state.current_location_index) and is_party_alive(state.party)


def get_current_location(state: GameData) -> Location | None:
    return get_location(state.current_location_index)


def get_remaining_distance(state: GameData) -> int:
    return get_distance_remaining(state.distance_traveled)


def check_game_end(state: GameData) -> GameScreen | None:
    """Return the terminal screen the game should be on, or None if it continues."""
    if is_game_over(state):
        return GameScreen.GAME_OVER
    if is_victory(state):
        return GameScreen.VICTORY
    return None


def calculate_score(
    survived: bool,
    party_survivors: int,
    distance_traveled: int,
    days_on_trail: int,
) -> int:
    """Calculate a leaderboard score.

    Score is the distance traveled, plus SCORE_SURVIVAL_BONUS for reaching
    the destination, plus SCORE_PER_SURVIVOR per living member, plus
    SCORE_PER_DAY_SAVED for each day under SCORE_TIME_TARGET_DAYS when the
    party arrived.

    Args:
        survived: True if the party reached the destination
        party_survivors: Living members at the end
        distance_traveled: Miles covered
        days_on_trail: Days spent traveling

    Returns:
        Integer score
    """
    score = distance_traveled

    if survived:
        score += SCORE_SURVIVAL_BONUS

    score += party_survivors * SCORE_PER_SURVIVOR

    if survived and days_on_trail < SCORE_TIME_TARGET_DAYS:
        score += (SCORE_TIME_TARGET_DAYS - days_on_trail) * SCORE_PER_DAY_SAVED

    return score


def score_game(state: GameData) -> int:
    """Score a game from its current state."""
    return calculate_score(
        survived=is_victory(state),
        party_survivors=get_alive_count(state.party),
        distance_traveled=state.distance_traveled,
        days_on_trail=state.days_elapsed,
    )
