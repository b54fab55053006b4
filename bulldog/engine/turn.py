"""
Bulldog - Turn Engine

A turn runs START -> ROLLING -> (BUSTED | STOPPED). After every non-bust
roll the turn pauses in AWAITING_DECISION until someone supplies a
decision, so event-driven hosts can drive a Turn step by step while
synchronous callers just use TurnEngine.run_turn().
"""

import logging

from bulldog.engine.base import Decision, TurnOutcome, TurnPhase
from bulldog.engine.dice import Die
from bulldog.engine.errors import TurnStateError
from bulldog.engine.strategies import Strategy, parse_decision
from bulldog.engine.validators import validate_bust_face
from bulldog.events import EventListener, EventPayload, GameEvent, emit

logger = logging.getLogger(__name__)


class Turn:
    """
    One player's turn as an explicit state machine.

    Attributes:
        turn_score: Points accumulated so far (reset to 0 on a bust)
        rolls: Faces rolled so far
        phase: Current TurnPhase
    """

    def __init__(
        self,
        die: Die,
        *,
        bust_face: int | None = None,
        player_name: str = "",
        on_event: EventListener | None = None,
    ) -> None:
        self._die = die
        self.bust_face = (
            die.max_face if bust_face is None else validate_bust_face(bust_face, die.sides)
        )
        self.player_name = player_name
        self._on_event = on_event
        self.turn_score = 0
        self.rolls: list[int] = []
        self.phase = TurnPhase.START

    @property
    def roll_count(self) -> int:
        return len(self.rolls)

    @property
    def last_roll(self) -> int | None:
        return self.rolls[-1] if self.rolls else None

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def awaiting_decision(self) -> bool:
        return self.phase is TurnPhase.AWAITING_DECISION

    def roll(self) -> int:
        """Roll the die once and apply the bust rule.

        Returns:
            The face rolled

        Raises:
            TurnStateError: If the turn is over or waiting for a decision
        """
        if self.phase not in (TurnPhase.START, TurnPhase.ROLLING):
            raise TurnStateError(f"Cannot roll while turn is {self.phase.name}.")

        self.phase = TurnPhase.ROLLING
        value = self._die.roll()
        self.rolls.append(value)
        logger.debug("%s rolled %d", self.player_name, value)
        emit(self._on_event, EventPayload(GameEvent.DICE_ROLLED, self.player_name, {"roll": value}))

        if value == self.bust_face:
            self.turn_score = 0
            self._finish(TurnPhase.BUSTED)
        else:
            self.turn_score += value
            self.phase = TurnPhase.AWAITING_DECISION
        return value

    def provide_decision(self, decision: object) -> TurnPhase:
        """Resume a paused turn.

        Args:
            decision: A Decision or anything parse_decision() accepts

        Returns:
            The phase after applying the decision

        Raises:
            TurnStateError: If the turn is not waiting for a decision
            InvalidDecision: If decision is neither continue nor stop; the
                turn stays paused and may be asked again
        """
        if not self.awaiting_decision:
            raise TurnStateError(f"No decision pending while turn is {self.phase.name}.")

        resolved = parse_decision(decision)
        logger.debug("%s decided %s at %d", self.player_name, resolved.name, self.turn_score)
        if resolved is Decision.CONTINUE:
            self.phase = TurnPhase.ROLLING
        else:
            self._finish(TurnPhase.STOPPED)
        return self.phase

    def outcome(self) -> TurnOutcome:
        """Final result of a finished turn."""
        if not self.is_over:
            raise TurnStateError(f"Turn is still {self.phase.name}.")
        return TurnOutcome(
            turn_score=self.turn_score,
            busted=self.phase is TurnPhase.BUSTED,
            rolls=tuple(self.rolls),
        )

    def _finish(self, phase: TurnPhase) -> None:
        self.phase = phase
        busted = phase is TurnPhase.BUSTED
        event = GameEvent.PLAYER_BUST if busted else GameEvent.TURN_BANKED
        logger.info(
            "%s %s with %d after %d roll(s)",
            self.player_name,
            "busted" if busted else "stopped",
            self.turn_score,
            self.roll_count,
        )
        emit(self._on_event, EventPayload(event, self.player_name, {
            "turn_score": self.turn_score,
            "busted": busted,
            "roll_count": self.roll_count,
        }))


class TurnEngine:
    """
    Runs complete turns with one die and one bust face.

    Strategies only see non-bust rolls; the bust face always ends the
    turn with zero regardless of what the strategy would have done.
    """

    def __init__(
        self,
        die: Die,
        *,
        bust_face: int | None = None,
        on_event: EventListener | None = None,
    ) -> None:
        self.die = die
        self.bust_face = (
            die.max_face if bust_face is None else validate_bust_face(bust_face, die.sides)
        )
        self._on_event = on_event

    def start_turn(self, player_name: str = "") -> Turn:
        """Begin a turn that the caller drives with roll()/provide_decision()."""
        emit(self._on_event, EventPayload(GameEvent.TURN_STARTED, player_name))
        return Turn(
            self.die,
            bust_face=self.bust_face,
            player_name=player_name,
            on_event=self._on_event,
        )

    def run_turn(self, strategy: Strategy, player_name: str = "") -> TurnOutcome:
        """Run a turn to completion.

        Args:
            strategy: Decides after each non-bust roll
            player_name: Used for logging and events

        Returns:
            TurnOutcome with the banked score (0 on a bust)
        """
        turn = self.start_turn(player_name)
        while not turn.is_over:
            turn.roll()
            if turn.awaiting_decision:
                turn.provide_decision(strategy.decide(turn.turn_score, turn.last_roll))
        return turn.outcome()
