"""Game engine components."""

from .actions import (
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
from .events import EventResult
from .game_setup import begin_travel, create_game, start_game
from .hunting import HuntingResult
from .river import CrossingMethod, RiverResult
from .store import StoreItem
from .turn_executor import TurnExecutor, TurnResult, advance_turn, apply_turn_result
from .victory import (
    calculate_score,
    get_current_location,
    get_remaining_distance,
    is_game_over,
    is_victory,
    score_game,
)

__all__ = [
    "CrossingMethod",
    "EventResult",
    "HuntingResult",
    "RiverResult",
    "StoreItem",
    "TurnExecutor",
    "TurnResult",
    "add_message",
    "advance_turn",
    "apply_turn_result",
    "begin_travel",
    "buy_item",
    "calculate_score",
    "clear_messages",
    "create_game",
    "get_current_location",
    "get_remaining_distance",
    "handle_event",
    "handle_hunting",
    "handle_river",
    "is_game_over",
    "is_victory",
    "repair_wagon_action",
    "rest",
    "score_game",
    "sell_item",
    "set_current_event",
    "set_pace",
    "set_rations",
    "set_screen",
    "start_game",
    "use_medicine_on_member",
]
