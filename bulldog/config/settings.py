"""
Bulldog - Application Settings

Loads configuration from environment variables (prefix BULLDOG_) or a
.env file using Pydantic Settings.
"""

import logging
import random
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from bulldog.engine.base import (
    DEFAULT_DIE_SIDES,
    DEFAULT_FIFTEEN_THRESHOLD,
    DEFAULT_RANDOM_STOP_PROBABILITY,
    DEFAULT_TARGET_SCORE,
    DEFAULT_UNIQUE_CONTINUE_PROBABILITY,
    DEFAULT_UNIQUE_THRESHOLD,
    MAX_PLAYERS,
    MIN_PLAYERS,
    GameConfig,
)
from bulldog.engine.strategies import StrategyOptions

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    target_score: int = DEFAULT_TARGET_SCORE
    die_sides: int = DEFAULT_DIE_SIDES
    bust_face: int | None = None
    min_players: int = MIN_PLAYERS
    max_players: int = MAX_PLAYERS

    # Strategies
    fifteen_threshold: int = DEFAULT_FIFTEEN_THRESHOLD
    unique_threshold: int = DEFAULT_UNIQUE_THRESHOLD
    unique_continue_probability: float = Field(
        default=DEFAULT_UNIQUE_CONTINUE_PROBABILITY, ge=0.0, le=1.0
    )
    random_stop_probability: float = Field(
        default=DEFAULT_RANDOM_STOP_PROBABILITY, ge=0.0, le=1.0
    )

    # Reproducibility
    seed: int | None = None

    # Application
    debug: bool = False
    log_level: LogLevel = "INFO"

    model_config = {
        "env_prefix": "BULLDOG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def to_game_config(self) -> GameConfig:
        """Validated engine configuration (raises InvalidConfiguration)."""
        return GameConfig(
            target_score=self.target_score,
            die_sides=self.die_sides,
            bust_face=self.bust_face,
            min_players=self.min_players,
            max_players=self.max_players,
        )

    def to_strategy_options(self) -> StrategyOptions:
        return StrategyOptions(
            fifteen_threshold=self.fifteen_threshold,
            unique_threshold=self.unique_threshold,
            unique_continue_probability=self.unique_continue_probability,
            random_stop_probability=self.random_stop_probability,
        )

    def make_rng(self) -> random.Random:
        """Random source for a game; seeded when seed is set."""
        return random.Random(self.seed)

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger. Intended for entry points only."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
