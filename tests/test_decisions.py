"""Tests for bulldog/decisions.py — cross-thread human decision handoff."""

import threading

import pytest

from bulldog.decisions import DecisionChannel
from bulldog.engine import (
    ChannelClosed,
    Decision,
    GameConfig,
    GameLoop,
    InvalidDecision,
    Player,
    StrategyKind,
    TurnStateError,
)
from bulldog.engine.strategies import DecisionPrompt

WAIT = 5.0


def _ask_in_thread(channel, prompt):
    """Call the channel from a worker thread; returns (thread, result dict)."""
    result = {}

    def worker():
        try:
            result["decision"] = channel(prompt)
        except Exception as exc:
            result["error"] = exc

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    return thread, result


class TestDecisionChannel:
    def test_round_trip(self):
        channel = DecisionChannel()
        prompt = DecisionPrompt("Hal", 7, 3)
        thread, result = _ask_in_thread(channel, prompt)

        assert channel.wait_for_prompt(timeout=WAIT) == prompt
        assert channel.provide_decision("n") is Decision.STOP
        thread.join(WAIT)

        assert result == {"decision": Decision.STOP}
        assert channel.pending_prompt is None

    def test_invalid_answer_keeps_prompt_pending(self):
        channel = DecisionChannel()
        thread, result = _ask_in_thread(channel, DecisionPrompt("Hal", 4, 4))
        channel.wait_for_prompt(timeout=WAIT)

        with pytest.raises(InvalidDecision):
            channel.provide_decision("sure?")
        assert channel.pending_prompt is not None

        channel.provide_decision(Decision.CONTINUE)
        thread.join(WAIT)
        assert result == {"decision": Decision.CONTINUE}

    def test_answer_without_prompt(self):
        with pytest.raises(TurnStateError, match="No decision is pending"):
            DecisionChannel().provide_decision("y")

    def test_wait_for_prompt_times_out(self):
        assert DecisionChannel().wait_for_prompt(timeout=0.01) is None

    def test_close_wakes_waiter(self):
        channel = DecisionChannel()
        thread, result = _ask_in_thread(channel, DecisionPrompt("Hal", 4, 4))
        channel.wait_for_prompt(timeout=WAIT)

        channel.close()
        thread.join(WAIT)

        assert isinstance(result["error"], ChannelClosed)
        assert channel.closed is True

    def test_closed_channel_rejects_prompts(self):
        channel = DecisionChannel()
        channel.close()
        with pytest.raises(ChannelClosed):
            channel(DecisionPrompt("Hal", 1, 1))
        assert channel.wait_for_prompt(timeout=0.01) is None


class TestChannelDrivenGame:
    def test_game_on_worker_thread(self, scripted_rng):
        """UI thread answers; game thread blocks exactly once per prompt."""
        channel = DecisionChannel()
        human = Player("Hal", StrategyKind.HUMAN)
        wimp = Player("Wes", StrategyKind.WIMP)
        game = GameLoop(
            GameConfig(target_score=9),
            rng=scripted_rng([4, 5]),
            decision_provider=channel,
        )
        result = {}
        thread = threading.Thread(
            target=lambda: result.setdefault("winner", game.play([human, wimp])),
            daemon=True,
        )
        thread.start()

        first = channel.wait_for_prompt(timeout=WAIT)
        assert (first.player_name, first.turn_score, first.last_roll) == ("Hal", 4, 4)
        channel.provide_decision("y")

        second = channel.wait_for_prompt(timeout=WAIT)
        assert second.turn_score == 9
        channel.provide_decision("n")

        thread.join(WAIT)
        assert result["winner"] is human

    def test_closing_aborts_game(self, scripted_rng):
        channel = DecisionChannel()
        game = GameLoop(rng=scripted_rng([3]), decision_provider=channel)
        errors = []

        def run():
            try:
                game.play([Player("Hal", StrategyKind.HUMAN), Player("Wes")])
            except ChannelClosed as exc:
                errors.append(exc)

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        channel.wait_for_prompt(timeout=WAIT)
        channel.close()
        thread.join(WAIT)

        assert len(errors) == 1
        assert game.history == []
