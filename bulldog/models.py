"""
Bulldog - Setup Models

Pydantic models for validating player entries coming from a setup layer
(command line, prompts, a form) before they become engine Players.
"""

from pydantic import BaseModel, Field, field_validator

from bulldog.engine.base import StrategyKind
from bulldog.engine.roster import Player


class PlayerEntry(BaseModel):
    """One requested seat: a display name and a strategy kind."""

    name: str = Field(min_length=1, max_length=30)
    kind: StrategyKind = StrategyKind.WIMP

    model_config = {"str_strip_whitespace": True, "frozen": True}

    @field_validator("kind", mode="before")
    @classmethod
    def _kind_from_code(cls, value: object) -> object:
        if isinstance(value, str):
            return StrategyKind.from_code(value)
        return value

    @classmethod
    def parse(cls, text: str) -> "PlayerEntry":
        """Parse "CODE:NAME", e.g. "F:Fiona" or "human:Bob"."""
        code, sep, name = text.partition(":")
        if not sep:
            raise ValueError(f"Expected CODE:NAME, got {text!r}.")
        return cls(name=name, kind=code)

    def to_player(self) -> Player:
        return Player(name=self.name, strategy_kind=self.kind)
