"""Seedable RNG wrapper for deterministic gameplay."""

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0.0, 1.0).

    Every probabilistic engine function takes one of these. GameRNG is the
    production implementation; tests pass scripted sources.
    """

    def random(self) -> float: ...


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    All randomness in the game should go through this class to ensure
    deterministic behavior when using the same seed.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Random float between 0.0 and 1.0
        """
        return self.rng.random()

    def get_state(self):
        """Get the current state of the RNG for serialization.

        Returns:
            RNG state tuple that can be used with set_state
        """
        return self.rng.getstate()

    def set_state(self, state):
        """Set the state of the RNG for deserialization.

        Args:
            state: RNG state tuple from get_state
        """
        self.rng.setstate(state)


def pick(rng: RandomSource, seq: Sequence[T]) -> T | None:
    """Choose an element uniformly using a single draw.

    Args:
        rng: Random source
        seq: Sequence to choose from

    Returns:
        Chosen element, or None if seq is empty (no draw is consumed)
    """
    if not seq:
        return None
    index = min(int(rng.random() * len(seq)), len(seq) - 1)
    return seq[index]


def roll_int(rng: RandomSource, low: int, high: int) -> int:
    """Return an integer in [low, high), floored from a single draw.

    Args:
        rng: Random source
        low: Lower bound (inclusive)
        high: Upper bound (exclusive)

    Returns:
        Random integer, equal to low + floor(draw * (high - low))
    """
    return low + int(rng.random() * (high - low))
