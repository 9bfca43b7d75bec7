"""Pluggable random sources for slot selection.

A sampler only ever needs one operation from its randomness: pick an index
uniformly in ``[0, bound)``. ``RandomSource`` captures that so tests can
substitute a seeded or scripted source and assert exact slot selection.
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable

__all__ = [
    "GlobalRandomSource",
    "RandomSource",
    "SeededRandomSource",
]


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for anything that can draw a uniform index."""

    def uniform_index(self, bound: int) -> int:
        """Return an integer uniformly distributed in ``[0, bound)``."""
        ...


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")


class GlobalRandomSource:
    """Draws from the process-wide ``random`` module generator.

    Used when no source is injected. Seeding it means calling
    ``random.seed()`` globally.
    """

    def uniform_index(self, bound: int) -> int:
        _check_bound(bound)
        return random.randrange(bound)

    def __repr__(self) -> str:
        return "GlobalRandomSource()"


class SeededRandomSource:
    """Draws from a private ``random.Random`` instance.

    Args:
        seed: Random seed for reproducibility. ``None`` seeds from the OS.

    Example:
        source = SeededRandomSource(seed=42)
        loss = RandStat([StatInit(5, LOST)], random_source=source)
    """

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        """The seed this source was created with."""
        return self._seed

    def uniform_index(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed!r})"
