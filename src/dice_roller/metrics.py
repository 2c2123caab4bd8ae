"""Minimal in-process counters for roll activity."""

from __future__ import annotations

import threading
from collections import defaultdict

_counters: dict[str, int] = defaultdict(int)
_lock = threading.Lock()


def inc_counter(name: str, value: int = 1) -> None:
    with _lock:
        _counters[name] += int(value)


def get_counter(name: str) -> int:
    with _lock:
        return _counters.get(name, 0)


def reset_counters() -> None:
    with _lock:
        _counters.clear()


def get_counters() -> dict[str, int]:
    """Return a shallow copy of all counters for diagnostics."""
    with _lock:
        return dict(_counters)
