"""
Random source for comp generation.
Every draw (map, pool pick, flex coin flips) goes through one injectable source
so tests can force each branch.
"""
from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


class SeededRNG:
    """Wrapper around random.Random; seed=None gives a fresh unseeded source."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def choice(self, seq):
        return self._rng.choice(seq)
