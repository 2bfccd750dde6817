# charmarkov/core/protocols.py
"""
Small structural interfaces shared by the core components.

RandomSource is all the Generator needs from a random number generator, so
tests can inject a scripted source instead of a seeded `random.Random`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from typing_extensions import TypedDict


@runtime_checkable
class RandomSource(Protocol):
    """Anything with a `random()` returning a uniform float in [0, 1)."""

    def random(self) -> float:
        ...


class CharCountRecord(TypedDict):
    """Plain-dict view of one CharCount, keyed by its window."""
    window: str
    character: str
    count: int
    probability: float
    cumulative_probability: float
