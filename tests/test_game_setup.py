"""Tests for game creation and the opening transitions."""

import pytest

from caravan.engine.game_setup import begin_travel, create_game, start_game
from caravan.models.game import Difficulty, GameScreen


@pytest.mark.parametrize(
    "difficulty, money",
    [(Difficulty.EASY, 600), (Difficulty.NORMAL, 400), (Difficulty.HARD, 300)],
)
def test_starting_money_by_difficulty(difficulty, money):
    game = create_game(difficulty, seed=1)

    assert game.supplies.money == money
    assert game.difficulty == difficulty


def test_create_game_defaults():
    game = create_game(seed=7)

    assert game.seed == 7
    assert game.difficulty == Difficulty.NORMAL
    assert game.screen == GameScreen.TITLE
    assert (game.day, game.month, game.year) == (1, 4, 1848)
    assert game.party == []
    assert game.supplies.food == 200
    assert game.wagon.oxen == 2


def test_create_game_picks_a_seed():
    game = create_game()

    assert 0 <= game.seed < 2**32


def test_start_game_forms_party():
    game = start_game(create_game(seed=1), ["Ada", "Ben", "Cal"])

    assert [m.id for m in game.party] == [0, 1, 2]
    assert [m.name for m in game.party] == ["Ada", "Ben", "Cal"]
    assert game.next_member_id == 3
    assert game.screen == GameScreen.STORE
    assert game.messages == ["Welcome to the trail! Stock up on supplies before you leave."]


def test_start_game_departure_month():
    assert start_game(create_game(seed=1), ["Ada"], start_month=6).month == 6
    assert start_game(create_game(seed=1), ["Ada"]).month == 4


def test_begin_travel():
    game = begin_travel(start_game(create_game(seed=1), ["Ada"]))

    assert game.screen == GameScreen.TRAVELING
    assert game.messages == ["You set out on the trail."]
