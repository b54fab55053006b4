"""
Bulldog - Game Event Definitions

Event types and payloads the engine publishes to whatever presentation
layer is hosting the game. Delivery is fire-and-forget.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    TURN_STARTED = auto()
    DICE_ROLLED = auto()
    PLAYER_BUST = auto()
    TURN_BANKED = auto()
    SCORE_UPDATED = auto()
    GAME_WON = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    player_name: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


EventListener = Callable[[EventPayload], None]


def emit(listener: EventListener | None, payload: EventPayload) -> None:
    """Deliver a payload to a listener.

    A failing listener is logged and otherwise ignored; observers cannot
    change the outcome of a game.
    """
    if listener is None:
        return
    try:
        listener(payload)
    except Exception:
        logger.exception("Error handling event %s", payload.event.name)


class EventRecorder:
    """Listener that keeps every payload it receives, in order."""

    def __init__(self) -> None:
        self.payloads: list[EventPayload] = []

    def __call__(self, payload: EventPayload) -> None:
        self.payloads.append(payload)

    def of_type(self, event: GameEvent) -> list[EventPayload]:
        return [p for p in self.payloads if p.event == event]

    @property
    def events(self) -> list[GameEvent]:
        return [p.event for p in self.payloads]
