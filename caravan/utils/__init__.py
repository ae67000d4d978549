"""Utility functions for Caravan.

Tuning constants live in ``caravan.utils.constants``; they are not
re-exported here because they depend on the model enums.
"""

from .rng import GameRNG, RandomSource, pick, roll_int

__all__ = [
    "GameRNG",
    "RandomSource",
    "pick",
    "roll_int",
]
