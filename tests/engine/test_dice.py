"""
Bulldog - Die Tests
"""

import random
from collections import Counter

import pytest

from bulldog.engine.dice import Die
from bulldog.engine.errors import InvalidConfiguration


class TestDie:
    """Tests for Die."""

    def test_default_six_sides(self):
        die = Die()
        assert die.sides == 6
        assert die.max_face == 6

    def test_value_range(self):
        """Roll 500 times; every value should be 1-6."""
        die = Die(6, random.Random(1))
        for _ in range(500):
            assert 1 <= die.roll() <= 6

    def test_single_sided_die(self):
        die = Die(1)
        assert {die.roll() for _ in range(20)} == {1}

    @pytest.mark.parametrize("sides", [0, -1])
    def test_non_positive_sides_raises(self, sides):
        with pytest.raises(InvalidConfiguration, match="at least one side"):
            Die(sides)

    def test_seeded_dice_replay(self):
        first = Die(6, random.Random(42))
        second = Die(6, random.Random(42))
        assert [first.roll() for _ in range(50)] == [second.roll() for _ in range(50)]

    def test_uniform_distribution(self):
        """10,000 seeded rolls land on each face close to 1/6 of the time."""
        die = Die(6, random.Random(12345))
        counts = Counter(die.roll() for _ in range(10_000))
        assert set(counts) == {1, 2, 3, 4, 5, 6}
        for face in range(1, 7):
            assert abs(counts[face] / 10_000 - 1 / 6) < 0.02

    def test_uses_injected_source(self, scripted_rng):
        die = Die(6, scripted_rng([2, 5]))
        assert die.roll() == 2
        assert die.roll() == 5

    def test_repr(self):
        assert repr(Die(20)) == "Die(sides=20)"
