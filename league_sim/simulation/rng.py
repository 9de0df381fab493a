"""
Seeded random streams for match simulation.
The league service owns one root stream and hands each week a child stream
from spawn(week); simulators never touch module-level random state.
"""
from __future__ import annotations

import random
from typing import Any

_MAX_SEED = 2**31 - 1
_SPAWN_STRIDE = 1_000_003


class SeededRNG:
    """
    Root or per-week goal stream. A seeded root yields the same child for the
    same offset. An unseeded root draws child seeds from its own state, so
    restoring a snapshot replays the same children.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def random(self) -> float:
        return self._rng.random()

    def spawn(self, offset: int) -> SeededRNG:
        """Child stream for `offset` (the week number in a season)."""
        if self._seed is not None:
            return SeededRNG(self._seed * _SPAWN_STRIDE + offset)
        return SeededRNG(self._rng.randint(1, _MAX_SEED))

    def snapshot(self) -> Any:
        """Opaque position of this stream, for restore()."""
        return self._rng.getstate()

    def restore(self, snapshot: Any) -> None:
        self._rng.setstate(snapshot)
