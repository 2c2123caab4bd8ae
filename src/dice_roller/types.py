# types.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RollResult:
    """Outcome of rolling ``dice_count`` dice of ``sides`` faces plus a modifier.

    ``rolls`` keeps the generation order. ``total`` is always
    ``sum(rolls) + modifier``.
    """

    dice_count: int
    sides: int
    modifier: int
    rolls: tuple[int, ...]
    total: int

    @property
    def notation(self) -> str:
        return f"{self.dice_count}d{self.sides}{self.modifier:+d}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "dice_count": self.dice_count,
            "sides": self.sides,
            "modifier": self.modifier,
            "rolls": list(self.rolls),
            "total": self.total,
        }

    def __str__(self) -> str:
        rolls = ", ".join(str(r) for r in self.rolls)
        return f"{self.notation}: [{rolls}] = {self.total}"
