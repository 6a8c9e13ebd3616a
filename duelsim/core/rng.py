"""Injectable random source used by the attack behaviors.

Any object with ``next_int(low, high)`` (both bounds inclusive) and
``next_unit()`` (a float in ``[0.0, 1.0)``) can drive a battle. Production code
falls back to :data:`default_random`; tests pass a ``SeededRandom`` or a
scripted stub.
"""
from __future__ import annotations
import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def next_int(self, low: int, high: int) -> int: ...
    def next_unit(self) -> float: ...


class SeededRandom:
    """``random.Random`` behind the :class:`RandomSource` interface."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        """Return N such that low <= N <= high."""
        return self._random.randint(low, high)

    def next_unit(self) -> float:
        return self._random.random()

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"


default_random = SeededRandom()

def resolve(rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else default_random

__all__ = ["RandomSource", "SeededRandom", "default_random", "resolve"]
