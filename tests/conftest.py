# tests/conftest.py

from collections.abc import Iterable

import pytest

from dice_roller.metrics import reset_counters


class FixedSource:
    """Replays a scripted sequence of draws and records every request."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError("FixedSource exhausted")
        return self._values.pop(0)


@pytest.fixture
def fixed_source():
    return FixedSource


@pytest.fixture(autouse=True)
def _reset_metrics():
    reset_counters()
    yield
    reset_counters()
