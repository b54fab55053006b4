"""
Bulldog - Console Host

Sets up a roster from the command line or from prompts, then plays a game
in the terminal. Human players answer "Roll again?" on stdin.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from pydantic import ValidationError

from bulldog import __version__
from bulldog.config import Settings, configure_logging, get_settings
from bulldog.engine import (
    BulldogError,
    DecisionPrompt,
    GameLoop,
    Player,
    PlayerRoster,
    StrategyKind,
)
from bulldog.events import EventPayload, GameEvent
from bulldog.models import PlayerEntry

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_TYPE_HELP = ", ".join(f"{kind.value}={kind.name.capitalize()}" for kind in StrategyKind)


class ConsoleView:
    """Prints game events and the scoreboard."""

    def __init__(self, roster: PlayerRoster, out: OutputFn = print) -> None:
        self.roster = roster
        self.out = out

    def __call__(self, payload: EventPayload) -> None:
        name = payload.player_name
        data = payload.data
        if payload.event == GameEvent.GAME_STARTED:
            self.out(f"Bulldog: first to {data['target_score']} wins!")
        elif payload.event == GameEvent.TURN_STARTED:
            self.out(f"\n*** {name}'s turn ***")
        elif payload.event == GameEvent.DICE_ROLLED:
            self.out(f"{name} rolled a {data['roll']}.")
        elif payload.event == GameEvent.PLAYER_BUST:
            self.out(f"{name} busted! Turn ends with 0 points.")
        elif payload.event == GameEvent.TURN_BANKED:
            self.out(f"{name} stops with {data['turn_score']} points.")
        elif payload.event == GameEvent.SCORE_UPDATED:
            self.print_scoreboard()
        elif payload.event == GameEvent.GAME_WON:
            self.out(f"\n*** {name} wins with {data['score']}! ***")

    def print_scoreboard(self) -> None:
        self.out("Scores:")
        for player_name, score in self.roster.scores().items():
            self.out(f"  {player_name}: {score}")


class ConsolePrompter:
    """Decision provider that asks on the console."""

    def __init__(self, input_fn: InputFn = input, out: OutputFn = print) -> None:
        self.input_fn = input_fn
        self.out = out

    def __call__(self, prompt: DecisionPrompt) -> str:
        if prompt.error:
            self.out("Invalid input, please try again.")
        return self.input_fn(
            f"{prompt.player_name}, turn score is {prompt.turn_score}. Roll again? [y/n] "
        )


def prompt_roster(
    settings: Settings,
    input_fn: InputFn = input,
    out: OutputFn = print,
) -> PlayerRoster:
    """Interactive setup: player count, then a type code and name per player."""
    roster = PlayerRoster(min_players=settings.min_players, max_players=settings.max_players)

    while True:
        raw = input_fn(f"Enter number of players ({settings.min_players}-{settings.max_players}): ")
        try:
            count = int(raw.strip())
        except ValueError:
            out("Please enter a number.")
            continue
        if settings.min_players <= count <= settings.max_players:
            break
        out(f"Number of players must be between {settings.min_players} and {settings.max_players}.")

    for index in range(1, count + 1):
        out(f"Player {index}:")
        code = input_fn(f"Enter type ({_TYPE_HELP}): ")
        try:
            kind = StrategyKind.from_code(code)
        except BulldogError:
            out("Invalid type. Defaulting to Wimp.")
            kind = StrategyKind.WIMP

        while True:
            name = input_fn("Enter name: ").strip()
            try:
                roster.add(PlayerEntry(name=name, kind=kind).to_player())
                break
            except ValidationError:
                out("Please enter a name (1-30 characters).")
            except BulldogError as exc:
                out(str(exc))
    return roster


def roster_from_args(entries: Sequence[str], settings: Settings) -> PlayerRoster:
    """Build a roster from CODE:NAME strings."""
    players: list[Player] = [PlayerEntry.parse(text).to_player() for text in entries]
    return PlayerRoster(players, min_players=settings.min_players, max_players=settings.max_players)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bulldog",
        description="Play Bulldog: roll a die, bank points, and avoid the bust face.",
    )
    parser.add_argument(
        "-p", "--player",
        action="append",
        default=[],
        metavar="CODE:NAME",
        help=f"add a player ({_TYPE_HELP}); repeat for each seat. Prompts when omitted.",
    )
    parser.add_argument("-t", "--target", type=int, help="score needed to win")
    parser.add_argument("--seed", type=int, help="seed for a reproducible game")
    parser.add_argument("--log-level", help="logging level (e.g. DEBUG, INFO, WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    input_fn: InputFn = input,
    out: OutputFn = print,
    settings: Settings | None = None,
) -> int:
    """Console entry point. Returns a process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = settings if settings is not None else get_settings()
        overrides = {}
        if args.target is not None:
            overrides["target_score"] = args.target
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.log_level:
            overrides["log_level"] = args.log_level
        if overrides:
            settings = Settings.model_validate({**settings.model_dump(), **overrides})
        configure_logging(settings.effective_log_level)

        config = settings.to_game_config()
        if args.player:
            roster = roster_from_args(args.player, settings)
        else:
            roster = prompt_roster(settings, input_fn, out)
        roster.validate_for_play()
    except (BulldogError, ValueError) as exc:
        out(f"Setup error: {exc}")
        return 2
    except (EOFError, KeyboardInterrupt):
        out("\nSetup abandoned.")
        return 1

    view = ConsoleView(roster, out)
    game = GameLoop(
        config,
        rng=settings.make_rng(),
        options=settings.to_strategy_options(),
        decision_provider=ConsolePrompter(input_fn, out),
        on_event=view,
    )

    try:
        game.play(roster)
    except (EOFError, KeyboardInterrupt, BulldogError) as exc:
        logger.info("Game abandoned: %r", exc)
        out("\nGame abandoned.")
        return 1
    return 0
