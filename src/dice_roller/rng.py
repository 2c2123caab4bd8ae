# rng.py

"""Randomness sources for the roller.

Any object with a ``randint(a, b)`` method returning a uniform integer in the
inclusive range ``[a, b]`` can back a Roller. ``random.Random`` qualifies: its
``randint`` draws with ``getrandbits`` and rejects out-of-range values, so small
ranges carry no modulo bias.
"""

from __future__ import annotations

import random
import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


_local = threading.local()


def make_source(seed: int | None = None) -> RandomSource:
    """Return a fresh generator with its own state."""
    return random.Random(seed)


def thread_source() -> RandomSource:
    """Return the calling thread's generator, creating it on first use.

    The generator lives for the lifetime of the thread and is never reseeded,
    so successive calls stay uncorrelated.
    """
    src = getattr(_local, "source", None)
    if src is None:
        src = make_source()
        _local.source = src
    return src
