"""
Bulldog - Game Loop

Players take turns in roster order; each banked turn score is added to
the player's cumulative score and the first player to reach the target
wins on the spot. Nobody else gets another turn that round.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Iterator

from bulldog.engine.base import GameConfig, TurnOutcome
from bulldog.engine.dice import Die
from bulldog.engine.roster import Player, PlayerRoster
from bulldog.engine.strategies import (
    DecisionProvider,
    Strategy,
    StrategyOptions,
    build_strategy,
)
from bulldog.engine.turn import TurnEngine
from bulldog.engine.validators import (
    validate_game_die,
    validate_player_count,
    validate_target_score,
)
from bulldog.events import EventListener, EventPayload, GameEvent, emit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnRecord:
    """
    One entry in the game's turn log.

    Attributes:
        round_number: 1-based round the turn belongs to
        player: Who played the turn
        outcome: What the turn produced
        cumulative_score: Player's total after the turn
        is_winning_turn: Whether this turn ended the game
    """
    round_number: int
    player: Player
    outcome: TurnOutcome
    cumulative_score: int
    is_winning_turn: bool = False


class GameLoop:
    """
    Drives a full game over a roster.

    All randomness (die and probabilistic strategies) comes from a single
    injected random.Random, so a seeded game replays exactly.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        die: Die | None = None,
        options: StrategyOptions | None = None,
        decision_provider: DecisionProvider | None = None,
        on_event: EventListener | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self._rng = rng if rng is not None else random.Random()
        self.die = die if die is not None else Die(self.config.die_sides, self._rng)
        validate_game_die(self.die.sides)
        self.options = options if options is not None else StrategyOptions()
        self._decision_provider = decision_provider
        self._on_event = on_event
        self.engine = TurnEngine(
            self.die,
            bust_face=self.config.bust_face,
            on_event=on_event,
        )
        self.history: list[TurnRecord] = []

    def _strategies_for(self, players: list[Player]) -> dict[int, Strategy]:
        return {
            id(player): build_strategy(
                player.strategy_kind,
                player_name=player.name,
                rng=self._rng,
                options=self.options,
                provider=self._decision_provider,
            )
            for player in players
        }

    def _check_roster(self, roster: PlayerRoster | Iterable[Player]) -> list[Player]:
        players = list(roster)
        validate_player_count(len(players), self.config.min_players, self.config.max_players)
        return players

    def turns(
        self,
        roster: PlayerRoster | Iterable[Player],
        target_score: int | None = None,
    ) -> Iterator[TurnRecord]:
        """
        Play the game one turn at a time.

        The generator suspends after each turn, so a caller may abandon
        the game between turns simply by not advancing it. It stops after
        the winning turn.

        Args:
            roster: Players in turn order (scores are used as they stand)
            target_score: Overrides the configured target

        Raises:
            RosterTooSmall: If fewer than min_players are seated
            RosterTooLarge: If more than max_players are seated
        """
        players = self._check_roster(roster)
        target = validate_target_score(
            self.config.target_score if target_score is None else target_score
        )
        strategies = self._strategies_for(players)

        logger.info("Game started: %s, target %d", ", ".join(p.name for p in players), target)
        emit(self._on_event, EventPayload(GameEvent.GAME_STARTED, data={
            "players": [p.name for p in players],
            "target_score": target,
        }))

        round_number = 0
        while True:
            round_number += 1
            for player in players:
                outcome = self.engine.run_turn(strategies[id(player)], player.name)
                total = player.add_points(outcome.turn_score)
                emit(self._on_event, EventPayload(
                    GameEvent.SCORE_UPDATED, player.name, {"score": total}
                ))

                won = total >= target
                record = TurnRecord(round_number, player, outcome, total, won)
                self.history.append(record)

                if won:
                    logger.info("%s wins with %d in round %d", player.name, total, round_number)
                    emit(self._on_event, EventPayload(
                        GameEvent.GAME_WON, player.name, {"score": total}
                    ))

                yield record

                if won:
                    return

    def play(
        self,
        roster: PlayerRoster | Iterable[Player],
        target_score: int | None = None,
        *,
        reset_scores: bool = True,
    ) -> Player:
        """
        Play until someone reaches the target.

        Args:
            roster: Players in turn order
            target_score: Overrides the configured target
            reset_scores: Start every player from 0

        Returns:
            The winning player
        """
        players = self._check_roster(roster)
        if reset_scores:
            for player in players:
                player.cumulative_score = 0

        for record in self.turns(players, target_score):
            if record.is_winning_turn:
                return record.player
        raise RuntimeError("Game ended without a winner.")
