# roller.py

from __future__ import annotations

import logging

import structlog

from dice_roller.metrics import inc_counter
from dice_roller.rng import RandomSource, make_source, thread_source
from dice_roller.types import RollResult

# Emits through stdlib logging; silent until setup_logging adds handlers
log = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


class DiceError(ValueError):
    """Raised when a roll is requested with parameters no die can satisfy."""


class InvalidRangeError(DiceError):
    """A die needs at least one face."""


class InvalidCountError(DiceError):
    """The number of dice cannot be negative."""


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_sides(sides: int) -> None:
    if not _is_int(sides) or sides < 1:
        inc_counter("dice.roll.rejected")
        raise InvalidRangeError(f"sides must be an integer >= 1, got {sides!r}")


def _check_count(dice_count: int) -> None:
    if not _is_int(dice_count) or dice_count < 0:
        inc_counter("dice.roll.rejected")
        raise InvalidCountError(f"dice_count must be an integer >= 0, got {dice_count!r}")


class Roller:
    """Rolls dice against a single randomness source.

    The source is used as-is and never locked; callers sharing one source
    across threads must serialize access themselves.
    """

    def __init__(self, source: RandomSource | None = None, *, seed: int | None = None):
        if source is not None and seed is not None:
            raise TypeError("pass either source or seed, not both")
        self._source = source if source is not None else make_source(seed)

    @property
    def source(self) -> RandomSource:
        return self._source

    def _draw(self, sides: int) -> int:
        inc_counter("dice.die.drawn")
        return self._source.randint(1, sides)

    def roll_with_modifier(self, dice_count: int, sides: int, modifier: int = 0) -> RollResult:
        """Roll ``dice_count`` dice with ``sides`` faces and add ``modifier`` once.

        All parameters are checked before the first draw, so a rejected call
        consumes nothing from the source.
        """
        _check_count(dice_count)
        _check_sides(sides)
        if not _is_int(modifier):
            raise TypeError(f"modifier must be an integer, got {modifier!r}")
        log.debug("dice.roll.start", dice_count=dice_count, sides=sides, modifier=modifier)

        rolls = tuple(self._draw(sides) for _ in range(dice_count))
        out = RollResult(
            dice_count=dice_count,
            sides=sides,
            modifier=modifier,
            rolls=rolls,
            total=sum(rolls) + modifier,
        )
        inc_counter("dice.roll.performed")
        log.debug("dice.roll.result", result=out.to_dict())
        return out

    def roll_single(self, sides: int) -> int:
        _check_sides(sides)
        value = self._draw(sides)
        log.debug("dice.single.result", sides=sides, value=value)
        return value

    def roll_with_advantage(self, sides: int) -> int:
        """Roll twice and keep the higher die."""
        a = self.roll_single(sides)
        b = self.roll_single(sides)
        pick = max(a, b)
        inc_counter("dice.advantage.performed")
        log.debug("dice.advantage.result", sides=sides, rolls=[a, b], pick=pick)
        return pick

    def roll_with_disadvantage(self, sides: int) -> int:
        """Roll twice and keep the lower die."""
        a = self.roll_single(sides)
        b = self.roll_single(sides)
        pick = min(a, b)
        inc_counter("dice.disadvantage.performed")
        log.debug("dice.disadvantage.result", sides=sides, rolls=[a, b], pick=pick)
        return pick


# Module-level helpers roll against the calling thread's own generator.


def roll_with_modifier(dice_count: int, sides: int, modifier: int = 0) -> RollResult:
    return Roller(thread_source()).roll_with_modifier(dice_count, sides, modifier)


def roll_single(sides: int) -> int:
    return Roller(thread_source()).roll_single(sides)


def roll_with_advantage(sides: int) -> int:
    return Roller(thread_source()).roll_with_advantage(sides)


def roll_with_disadvantage(sides: int) -> int:
    return Roller(thread_source()).roll_with_disadvantage(sides)
