"""
Bulldog - Players and Roster

A Player is a plain record: display name, strategy kind and cumulative
score. The roster keeps players in turn order.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from bulldog.engine.base import MAX_PLAYERS, MIN_PLAYERS, StrategyKind
from bulldog.engine.errors import DuplicatePlayer, RosterTooLarge
from bulldog.engine.validators import validate_player_count


@dataclass(eq=False)
class Player:
    """
    A seat at the table.

    Attributes:
        name: Display name, unique within a roster
        strategy_kind: Decision rule this player follows
        cumulative_score: Total of all banked turns, never decreases
    """
    name: str
    strategy_kind: StrategyKind = StrategyKind.WIMP
    cumulative_score: int = field(default=0)

    def add_points(self, points: int) -> int:
        """Bank a turn score and return the new total."""
        if points < 0:
            raise ValueError(f"Cannot bank a negative turn score ({points}).")
        self.cumulative_score += points
        return self.cumulative_score

    def __str__(self) -> str:
        return f"{self.name} ({self.strategy_kind.label}): {self.cumulative_score}"


class PlayerRoster:
    """Ordered, unique collection of players. Insertion order is turn order."""

    def __init__(
        self,
        players: Iterable[Player] = (),
        *,
        min_players: int = MIN_PLAYERS,
        max_players: int = MAX_PLAYERS,
    ) -> None:
        self.min_players = min_players
        self.max_players = max_players
        self._players: list[Player] = []
        for player in players:
            self.add(player)

    def add(self, player: Player) -> Player:
        """Append a player.

        Raises:
            DuplicatePlayer: If the player or its name is already seated
            RosterTooLarge: If the roster is already full
        """
        if player in self:
            raise DuplicatePlayer(f"{player.name!r} is already on the roster.")
        if any(p.name == player.name for p in self._players):
            raise DuplicatePlayer(f"A player named {player.name!r} is already on the roster.")
        if len(self._players) >= self.max_players:
            raise RosterTooLarge(f"Maximum {self.max_players} players allowed.")
        self._players.append(player)
        return player

    def remove(self, player: Player) -> bool:
        """Remove a player; returns False if it was not seated."""
        for index, seated in enumerate(self._players):
            if seated is player:
                del self._players[index]
                return True
        return False

    def remove_at(self, index: int) -> Player:
        return self._players.pop(index)

    def get(self, index: int) -> Player:
        return self._players[index]

    def clear(self) -> None:
        self._players.clear()

    def names(self) -> list[str]:
        return [p.name for p in self._players]

    def scores(self) -> dict[str, int]:
        """Cumulative score by player name, in turn order."""
        return {p.name: p.cumulative_score for p in self._players}

    def reset_scores(self) -> None:
        for player in self._players:
            player.cumulative_score = 0

    @property
    def is_ready(self) -> bool:
        """True when the roster size allows a game to start."""
        return self.min_players <= len(self._players) <= self.max_players

    def validate_for_play(self) -> None:
        """Raise RosterTooSmall / RosterTooLarge unless the roster can play."""
        validate_player_count(len(self._players), self.min_players, self.max_players)

    def __contains__(self, player: object) -> bool:
        return any(p is player for p in self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players))

    def __len__(self) -> int:
        return len(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]
