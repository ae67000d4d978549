"""Game creation and the opening transitions."""

import logging
import uuid
from dataclasses import replace

from ..models.game import Difficulty, GameData, GameScreen
from ..utils.constants import DIFFICULTY_SETTINGS, STARTING_MONTH, STARTING_YEAR
from .party import create_party
from .supplies import create_supplies
from .wagon import create_wagon

logger = logging.getLogger(__name__)


def create_game(difficulty: Difficulty = Difficulty.NORMAL, seed: int | None = None) -> GameData:
    """Create a new game on the title screen.

    Args:
        difficulty: Difficulty mode, fixed for the whole game
        seed: RNG seed; a random one is chosen if None

    Returns:
        New GameData with starting supplies and an empty party
    """
    difficulty = Difficulty(difficulty)
    if seed is None:
        seed = uuid.uuid4().int % (2**32)

    supplies = create_supplies()
    supplies.money = DIFFICULTY_SETTINGS[difficulty].starting_money

    logger.info(f"Created {difficulty.value} game with seed {seed}")

    return GameData(
        seed=seed,
        screen=GameScreen.TITLE,
        difficulty=difficulty,
        month=STARTING_MONTH,
        year=STARTING_YEAR,
        supplies=supplies,
        wagon=create_wagon(),
    )


def start_game(state: GameData, names: list[str], start_month: int | None = None) -> GameData:
    """Form the party and open the store.

    Args:
        state: Game on the title or naming screen
        names: Party member names
        start_month: Month to depart in (1-12), keeps the current one if None

    Returns:
        New state on the store screen
    """
    party = create_party(names, first_id=state.next_member_id)
    return replace(
        state,
        party=party,
        next_member_id=state.next_member_id + len(party),
        month=start_month if start_month is not None else state.month,
        screen=GameScreen.STORE,
        messages=["Welcome to the trail! Stock up on supplies before you leave."],
    )


def begin_travel(state: GameData) -> GameData:
    """Leave the current location and start the journey."""
    return replace(state, screen=GameScreen.TRAVELING, messages=["You set out on the trail."])
