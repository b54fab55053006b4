"""
Bulldog - Test Configuration and Fixtures

Scripted random sources so turns and games can be replayed exactly.
"""

import random
from typing import Callable, Iterable

import pytest

from bulldog.engine import Die, StrategyKind


class ScriptedRandom:
    """
    Stand-in for random.Random that replays fixed values.

    randint() returns the scripted die faces in order; random() returns the
    scripted floats in order. Running out of either is a test bug.
    """

    def __init__(self, rolls: Iterable[int] = (), floats: Iterable[float] = ()) -> None:
        self._rolls = list(rolls)
        self._floats = list(floats)
        self.rolls_used = 0

    def randint(self, a: int, b: int) -> int:
        if not self._rolls:
            raise AssertionError("ScriptedRandom ran out of die rolls")
        value = self._rolls.pop(0)
        assert a <= value <= b, f"scripted roll {value} outside {a}..{b}"
        self.rolls_used += 1
        return value

    def random(self) -> float:
        if not self._floats:
            raise AssertionError("ScriptedRandom ran out of floats")
        return self._floats.pop(0)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory: scripted_rng(rolls=[...], floats=[...])."""
    def _make(rolls: Iterable[int] = (), floats: Iterable[float] = ()) -> ScriptedRandom:
        return ScriptedRandom(rolls, floats)
    return _make


@pytest.fixture
def scripted_die(scripted_rng) -> Callable[..., Die]:
    """Factory: a six-sided Die that rolls the given faces in order."""
    def _make(*rolls: int, sides: int = 6) -> Die:
        return Die(sides, scripted_rng(rolls))
    return _make


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(20240607)


@pytest.fixture
def computer_kinds() -> list[StrategyKind]:
    """Every strategy that decides without a human."""
    return [kind for kind in StrategyKind if not kind.is_interactive]
