"""Tests for random sources."""

import random

import pytest

from randstat.random_source import GlobalRandomSource, RandomSource, SeededRandomSource


class TestGlobalRandomSource:
    """Tests for GlobalRandomSource."""

    def test_index_within_bound(self):
        """Indices always land in [0, bound)."""
        source = GlobalRandomSource()

        assert all(0 <= source.uniform_index(7) < 7 for _ in range(1000))

    def test_follows_global_seed(self):
        """Seeding the random module makes the global source repeatable."""
        source = GlobalRandomSource()

        random.seed(1234)
        first = [source.uniform_index(100) for _ in range(50)]
        random.seed(1234)
        second = [source.uniform_index(100) for _ in range(50)]

        assert first == second

    def test_rejects_non_positive_bound(self):
        """Rejects bound <= 0."""
        with pytest.raises(ValueError, match="must be positive"):
            GlobalRandomSource().uniform_index(0)

    def test_satisfies_protocol(self):
        assert isinstance(GlobalRandomSource(), RandomSource)


class TestSeededRandomSource:
    """Tests for SeededRandomSource."""

    def test_deterministic_with_seed(self):
        """Same seed produces the same indices."""
        a = SeededRandomSource(seed=42)
        b = SeededRandomSource(seed=42)

        assert [a.uniform_index(100) for _ in range(100)] == [
            b.uniform_index(100) for _ in range(100)
        ]

    def test_different_seeds_differ(self):
        """Different seeds produce different indices."""
        a = SeededRandomSource(seed=42)
        b = SeededRandomSource(seed=123)

        assert [a.uniform_index(100) for _ in range(100)] != [
            b.uniform_index(100) for _ in range(100)
        ]

    def test_does_not_touch_global_state(self):
        """Drawing from a seeded source leaves the global generator alone."""
        random.seed(7)
        expected = random.random()

        random.seed(7)
        source = SeededRandomSource(seed=1)
        for _ in range(10):
            source.uniform_index(100)

        assert random.random() == expected

    def test_covers_every_index(self):
        """Every index in range shows up given enough draws."""
        source = SeededRandomSource(seed=0)

        seen = {source.uniform_index(10) for _ in range(1000)}

        assert seen == set(range(10))

    def test_exposes_seed(self):
        assert SeededRandomSource(seed=5).seed == 5
        assert SeededRandomSource().seed is None

    def test_rejects_negative_bound(self):
        with pytest.raises(ValueError, match="must be positive"):
            SeededRandomSource(seed=1).uniform_index(-3)
