"""
Bulldog - Game Engine Base Classes

Enums, constants and immutable value types shared by the dice, strategy,
turn and game modules.
"""

from dataclasses import dataclass
from enum import Enum, auto

from bulldog.engine.errors import InvalidConfiguration
from bulldog.engine.validators import (
    validate_bust_face,
    validate_game_die,
    validate_player_bounds,
    validate_target_score,
)

DEFAULT_TARGET_SCORE = 104
DEFAULT_DIE_SIDES = 6
MIN_PLAYERS = 2
MAX_PLAYERS = 7
DEFAULT_FIFTEEN_THRESHOLD = 15
DEFAULT_UNIQUE_THRESHOLD = 10
DEFAULT_UNIQUE_CONTINUE_PROBABILITY = 0.25
DEFAULT_RANDOM_STOP_PROBABILITY = 0.5


class StrategyKind(Enum):
    """Decision policies a player can follow."""
    WIMP = "W"
    RANDOM = "R"
    ODD = "O"
    FIFTEEN = "F"
    UNIQUE = "U"
    HUMAN = "H"

    @property
    def label(self) -> str:
        """Display name, e.g. "Fifteen Player"."""
        return f"{self.name.capitalize()} Player"

    @property
    def is_interactive(self) -> bool:
        return self is StrategyKind.HUMAN

    @classmethod
    def from_code(cls, code: str) -> "StrategyKind":
        """Look up a kind by its one-letter code or its name (case-insensitive)."""
        cleaned = code.strip().upper()
        for kind in cls:
            if cleaned in (kind.value, kind.name):
                return kind
        valid = ", ".join(kind.value for kind in cls)
        raise InvalidConfiguration(
            f"Unknown strategy code {code!r}. Must be one of {valid}."
        )


class Decision(Enum):
    """Answer to "roll again?" after a non-bust roll."""
    CONTINUE = auto()
    STOP = auto()


class TurnPhase(Enum):
    """States of a single turn."""
    START = auto()
    ROLLING = auto()
    AWAITING_DECISION = auto()
    BUSTED = auto()
    STOPPED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (TurnPhase.BUSTED, TurnPhase.STOPPED)


@dataclass(frozen=True)
class TurnOutcome:
    """
    Result of one completed turn.

    Attributes:
        turn_score: Points banked this turn (0 on a bust)
        busted: Whether the turn ended on the bust face
        rolls: Every face rolled this turn, in order, bust included
    """
    turn_score: int
    busted: bool
    rolls: tuple[int, ...] = ()

    @property
    def roll_count(self) -> int:
        return len(self.rolls)

    def __str__(self) -> str:
        if self.busted:
            return f"BUST after {self.roll_count} roll(s)."
        return f"Banked {self.turn_score} points in {self.roll_count} roll(s)."


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        target_score: Cumulative score needed to win
        die_sides: Number of faces on the die
        bust_face: Face that ends a turn with zero (None = highest face)
        min_players: Smallest roster allowed to play
        max_players: Largest roster allowed to play
    """
    target_score: int = DEFAULT_TARGET_SCORE
    die_sides: int = DEFAULT_DIE_SIDES
    bust_face: int | None = None
    min_players: int = MIN_PLAYERS
    max_players: int = MAX_PLAYERS

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_target_score(self.target_score)
        validate_game_die(self.die_sides)
        if self.bust_face is not None:
            validate_bust_face(self.bust_face, self.die_sides)
        validate_player_bounds(self.min_players, self.max_players)

    @property
    def effective_bust_face(self) -> int:
        """The face that busts a turn."""
        return self.die_sides if self.bust_face is None else self.bust_face
