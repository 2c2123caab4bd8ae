"""Dice rolling with an injectable randomness source."""

import logging

from .rng import RandomSource, make_source, thread_source
from .roller import (
    DiceError,
    InvalidCountError,
    InvalidRangeError,
    Roller,
    roll_single,
    roll_with_advantage,
    roll_with_disadvantage,
    roll_with_modifier,
)
from .types import RollResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DiceError",
    "InvalidCountError",
    "InvalidRangeError",
    "RandomSource",
    "RollResult",
    "Roller",
    "make_source",
    "roll_single",
    "roll_with_advantage",
    "roll_with_disadvantage",
    "roll_with_modifier",
    "thread_source",
]
