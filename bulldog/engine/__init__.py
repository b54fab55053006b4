"""
Bulldog Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, player strategies, bust detection and win detection.
"""

from bulldog.engine.base import (
    DEFAULT_TARGET_SCORE,
    Decision,
    GameConfig,
    StrategyKind,
    TurnOutcome,
    TurnPhase,
)
from bulldog.engine.dice import Die
from bulldog.engine.errors import (
    BulldogError,
    ChannelClosed,
    DuplicatePlayer,
    InvalidConfiguration,
    InvalidDecision,
    RosterTooLarge,
    RosterTooSmall,
    TurnStateError,
)
from bulldog.engine.game import GameLoop, TurnRecord
from bulldog.engine.roster import Player, PlayerRoster
from bulldog.engine.strategies import (
    DecisionPrompt,
    StrategyOptions,
    build_strategy,
    parse_decision,
)
from bulldog.engine.turn import Turn, TurnEngine

__all__ = [
    # Data Classes
    "GameConfig",
    "Player",
    "TurnOutcome",
    "TurnRecord",
    "DecisionPrompt",
    "StrategyOptions",
    # Enums
    "Decision",
    "StrategyKind",
    "TurnPhase",
    # Engine
    "Die",
    "GameLoop",
    "PlayerRoster",
    "Turn",
    "TurnEngine",
    "build_strategy",
    "parse_decision",
    # Errors
    "BulldogError",
    "ChannelClosed",
    "DuplicatePlayer",
    "InvalidConfiguration",
    "InvalidDecision",
    "RosterTooLarge",
    "RosterTooSmall",
    "TurnStateError",
    "DEFAULT_TARGET_SCORE",
]
