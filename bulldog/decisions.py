"""
Bulldog - Human Decision Handoff

Single-slot channel that lets a presentation running on another thread
answer a human player's "roll again?" prompt. The game thread blocks on
the channel; the UI thread reads the pending prompt and calls
provide_decision() exactly once per prompt.
"""

from __future__ import annotations

import logging
import threading

from bulldog.engine.base import Decision
from bulldog.engine.errors import ChannelClosed, TurnStateError
from bulldog.engine.strategies import DecisionPrompt, parse_decision

logger = logging.getLogger(__name__)


class DecisionChannel:
    """Thread-safe handoff of one decision per prompt.

    Use the channel itself as the decision provider for a GameLoop.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._pending: DecisionPrompt | None = None
        self._answer: Decision | None = None
        self._closed = False

    @property
    def pending_prompt(self) -> DecisionPrompt | None:
        with self._cond:
            return self._pending

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __call__(self, prompt: DecisionPrompt) -> Decision:
        """Publish a prompt and block until it is answered (game thread)."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("Decision channel is closed.")
            self._pending = prompt
            self._answer = None
            self._cond.notify_all()
            logger.debug("Waiting for decision from %s", prompt.player_name)

            self._cond.wait_for(lambda: self._answer is not None or self._closed)
            if self._answer is None:
                self._pending = None
                raise ChannelClosed(
                    f"Decision channel closed while waiting for {prompt.player_name}."
                )
            answer, self._answer = self._answer, None
            self._pending = None
            return answer

    def wait_for_prompt(self, timeout: float | None = None) -> DecisionPrompt | None:
        """Block until a prompt is pending (UI thread). None on timeout or close."""
        with self._cond:
            self._cond.wait_for(
                lambda: (self._pending is not None and self._answer is None) or self._closed,
                timeout=timeout,
            )
            if self._closed:
                return None
            return self._pending if self._answer is None else None

    def provide_decision(self, answer: object) -> Decision:
        """Answer the pending prompt (UI thread).

        Raises:
            InvalidDecision: If answer is neither continue nor stop; the
                prompt stays pending
            TurnStateError: If nothing is waiting for a decision
            ChannelClosed: If the channel has been closed
        """
        decision = parse_decision(answer)
        with self._cond:
            if self._closed:
                raise ChannelClosed("Decision channel is closed.")
            if self._pending is None or self._answer is not None:
                raise TurnStateError("No decision is pending.")
            self._answer = decision
            self._cond.notify_all()
        return decision

    def close(self) -> None:
        """Wake any waiter with ChannelClosed; further use raises."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()
        logger.info("Decision channel closed")
