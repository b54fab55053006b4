"""
Bulldog - Die

A single fair die. The random source is injected so games and tests can
be replayed from a seed.
"""

import random

from bulldog.engine.base import DEFAULT_DIE_SIDES
from bulldog.engine.validators import validate_sides


class Die:
    """
    A die with a fixed number of faces.

    Each roll is an independent uniform sample over 1..sides.
    """

    def __init__(self, sides: int = DEFAULT_DIE_SIDES, rng: random.Random | None = None) -> None:
        self._sides = validate_sides(sides)
        self._rng = rng if rng is not None else random.Random()

    @property
    def sides(self) -> int:
        return self._sides

    @property
    def max_face(self) -> int:
        """Highest face value, the default bust face."""
        return self._sides

    def roll(self) -> int:
        """Roll the die.

        Returns:
            A value between 1 and sides (inclusive)
        """
        return self._rng.randint(1, self._sides)

    def __repr__(self) -> str:
        return f"Die(sides={self._sides})"
