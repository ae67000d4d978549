"""Shared test helpers: deterministic random sources and state builders."""

from caravan.engine.party import create_party
from caravan.engine.supplies import create_supplies
from caravan.engine.wagon import create_wagon
from caravan.models.game import GameData, GameScreen


class FixedRNG:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class ScriptedRNG:
    """Random source that returns a scripted sequence of values.

    Drawing past the end of the script fails the test, so a test also pins
    down how many draws the code under test makes.
    """

    def __init__(self, values):
        self.values = list(values)
        self.draws = 0

    def random(self) -> float:
        if self.draws >= len(self.values):
            raise AssertionError(f"Unexpected draw #{self.draws + 1}")
        value = self.values[self.draws]
        self.draws += 1
        return value

    @property
    def exhausted(self) -> bool:
        return self.draws == len(self.values)


def make_state(names=("Ann", "Ben", "Cal"), **overrides) -> GameData:
    """Create a game already on the trail at Independence."""
    party = create_party(list(names))
    fields = {
        "seed": 42,
        "screen": GameScreen.TRAVELING,
        "party": party,
        "supplies": create_supplies(),
        "wagon": create_wagon(),
        "next_member_id": len(party),
    }
    fields.update(overrides)
    return GameData(**fields)
