"""
Bulldog - Player Strategies

Presentation-free decision rules. Every strategy answers one question
after a non-bust roll has been added to the turn score: roll again or
stop? The bust rule is owned by the turn engine, never by a strategy.

Strategies are built from a StrategyKind through a dispatch table rather
than a player class hierarchy.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Protocol

from bulldog.engine.base import (
    DEFAULT_FIFTEEN_THRESHOLD,
    DEFAULT_RANDOM_STOP_PROBABILITY,
    DEFAULT_UNIQUE_CONTINUE_PROBABILITY,
    DEFAULT_UNIQUE_THRESHOLD,
    Decision,
    StrategyKind,
)
from bulldog.engine.errors import InvalidConfiguration, InvalidDecision
from bulldog.engine.validators import validate_probability, validate_threshold

logger = logging.getLogger(__name__)

_CONTINUE_WORDS = frozenset({"y", "yes", "r", "roll", "c", "continue"})
_STOP_WORDS = frozenset({"n", "no", "s", "stop", "h", "hold", "bank"})


class Strategy(Protocol):
    """Anything that can decide whether to keep rolling."""

    def decide(self, turn_score: int, last_roll: int) -> Decision:
        ...


def parse_decision(answer: object) -> Decision:
    """
    Normalize a human answer into a Decision.

    Accepts a Decision, a bool (True = continue) or a word such as
    "y"/"n", "roll"/"stop".

    Raises:
        InvalidDecision: If the answer is neither continue nor stop
    """
    if isinstance(answer, Decision):
        return answer
    if isinstance(answer, bool):
        return Decision.CONTINUE if answer else Decision.STOP
    if isinstance(answer, str):
        word = answer.strip().lower()
        if word in _CONTINUE_WORDS:
            return Decision.CONTINUE
        if word in _STOP_WORDS:
            return Decision.STOP
    raise InvalidDecision(f"Expected continue or stop, got {answer!r}.")


class WimpStrategy:
    """Rolls once, banks whatever it got."""

    def decide(self, turn_score: int, last_roll: int) -> Decision:
        return Decision.STOP


class RandomStrategy:
    """Flips a coin after every roll."""

    def __init__(
        self,
        rng: random.Random | None = None,
        stop_probability: float = DEFAULT_RANDOM_STOP_PROBABILITY,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.stop_probability = validate_probability(stop_probability, "Stop probability")

    def decide(self, turn_score: int, last_roll: int) -> Decision:
        if self._rng.random() < self.stop_probability:
            return Decision.STOP
        return Decision.CONTINUE


class OddStrategy:
    """Keeps rolling on odd faces, stops on even ones."""

    def decide(self, turn_score: int, last_roll: int) -> Decision:
        return Decision.CONTINUE if last_roll % 2 == 1 else Decision.STOP


class FifteenStrategy:
    """Keeps rolling until the turn score reaches the threshold."""

    def __init__(self, threshold: int = DEFAULT_FIFTEEN_THRESHOLD) -> None:
        self.threshold = validate_threshold(threshold, "Fifteen threshold")

    def decide(self, turn_score: int, last_roll: int) -> Decision:
        return Decision.CONTINUE if turn_score < self.threshold else Decision.STOP


class UniqueStrategy:
    """
    Rolls freely below the threshold; at or above it, pushes on only
    with a small probability.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        threshold: int = DEFAULT_UNIQUE_THRESHOLD,
        continue_probability: float = DEFAULT_UNIQUE_CONTINUE_PROBABILITY,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.threshold = validate_threshold(threshold, "Unique threshold")
        self.continue_probability = validate_probability(
            continue_probability, "Continue probability"
        )

    def decide(self, turn_score: int, last_roll: int) -> Decision:
        if turn_score < self.threshold:
            return Decision.CONTINUE
        if self._rng.random() < self.continue_probability:
            return Decision.CONTINUE
        return Decision.STOP


@dataclass(frozen=True)
class DecisionPrompt:
    """
    What a human is asked after a non-bust roll.

    Attributes:
        player_name: Whose turn it is
        turn_score: Points at risk this turn
        last_roll: Face just rolled
        attempt: 1 for the first ask, higher after invalid answers
        error: Why the previous answer was rejected (None on first ask)
    """
    player_name: str
    turn_score: int
    last_roll: int
    attempt: int = 1
    error: str | None = None


DecisionProvider = Callable[[DecisionPrompt], object]


class HumanStrategy:
    """
    Defers every decision to an external provider (console, UI, channel).

    Invalid answers are re-asked; they never count as a decision. Any
    exception raised by the provider propagates to the caller.
    """

    def __init__(self, provider: DecisionProvider, player_name: str = "") -> None:
        self._provider = provider
        self.player_name = player_name

    def decide(self, turn_score: int, last_roll: int) -> Decision:
        prompt = DecisionPrompt(self.player_name, turn_score, last_roll)
        while True:
            answer = self._provider(prompt)
            try:
                return parse_decision(answer)
            except InvalidDecision as exc:
                logger.warning("Invalid decision from %s: %r", self.player_name, answer)
                prompt = DecisionPrompt(
                    self.player_name,
                    turn_score,
                    last_roll,
                    attempt=prompt.attempt + 1,
                    error=str(exc),
                )


@dataclass(frozen=True)
class StrategyOptions:
    """Tunable parameters for the non-interactive strategies."""
    fifteen_threshold: int = DEFAULT_FIFTEEN_THRESHOLD
    unique_threshold: int = DEFAULT_UNIQUE_THRESHOLD
    unique_continue_probability: float = DEFAULT_UNIQUE_CONTINUE_PROBABILITY
    random_stop_probability: float = DEFAULT_RANDOM_STOP_PROBABILITY


@dataclass(frozen=True)
class _BuildContext:
    player_name: str
    rng: random.Random
    options: StrategyOptions
    provider: DecisionProvider | None


def _build_human(ctx: _BuildContext) -> Strategy:
    if ctx.provider is None:
        raise InvalidConfiguration(
            f"Human player {ctx.player_name!r} needs a decision provider."
        )
    return HumanStrategy(ctx.provider, ctx.player_name)


_BUILDERS: dict[StrategyKind, Callable[[_BuildContext], Strategy]] = {
    StrategyKind.WIMP: lambda ctx: WimpStrategy(),
    StrategyKind.RANDOM: lambda ctx: RandomStrategy(
        ctx.rng, ctx.options.random_stop_probability
    ),
    StrategyKind.ODD: lambda ctx: OddStrategy(),
    StrategyKind.FIFTEEN: lambda ctx: FifteenStrategy(ctx.options.fifteen_threshold),
    StrategyKind.UNIQUE: lambda ctx: UniqueStrategy(
        ctx.rng, ctx.options.unique_threshold, ctx.options.unique_continue_probability
    ),
    StrategyKind.HUMAN: _build_human,
}


def build_strategy(
    kind: StrategyKind,
    *,
    player_name: str = "",
    rng: random.Random | None = None,
    options: StrategyOptions | None = None,
    provider: DecisionProvider | None = None,
) -> Strategy:
    """
    Create the strategy for a kind.

    Args:
        kind: Which decision rule to use
        player_name: Shown to human players when prompting
        rng: Random source for the probabilistic strategies
        options: Thresholds and probabilities (defaults if omitted)
        provider: Required for StrategyKind.HUMAN

    Raises:
        InvalidConfiguration: If a human strategy has no provider
    """
    ctx = _BuildContext(
        player_name=player_name,
        rng=rng if rng is not None else random.Random(),
        options=options if options is not None else StrategyOptions(),
        provider=provider,
    )
    return _BUILDERS[kind](ctx)
