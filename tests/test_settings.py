"""Tests for bulldog/config/settings.py."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from bulldog.config import Settings, configure_logging, get_settings
from bulldog.config.settings import LOG_FORMAT
from bulldog.engine import InvalidConfiguration


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("TARGET_SCORE", "SEED", "DEBUG", "LOG_LEVEL", "DIE_SIDES", "BUST_FACE"):
        monkeypatch.delenv(f"BULLDOG_{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.target_score == 104
        assert settings.die_sides == 6
        assert settings.bust_face is None
        assert settings.fifteen_threshold == 15
        assert settings.seed is None
        assert settings.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BULLDOG_TARGET_SCORE", "50")
        monkeypatch.setenv("BULLDOG_SEED", "7")
        settings = Settings(_env_file=None)
        assert settings.target_score == 50
        assert settings.seed == 7

    def test_probability_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, random_stop_probability=1.5)

    def test_to_game_config(self):
        config = Settings(_env_file=None, target_score=60, bust_face=1).to_game_config()
        assert config.target_score == 60
        assert config.effective_bust_face == 1

    def test_invalid_game_config(self):
        with pytest.raises(InvalidConfiguration, match="Target score must be positive"):
            Settings(_env_file=None, target_score=0).to_game_config()

    def test_to_strategy_options(self):
        options = Settings(_env_file=None, fifteen_threshold=18).to_strategy_options()
        assert options.fifteen_threshold == 18
        assert options.unique_threshold == 10

    def test_seeded_rng_replays(self):
        settings = Settings(_env_file=None, seed=3)
        assert settings.make_rng().random() == settings.make_rng().random()

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="loud")

    def test_unknown_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("BULLDOG_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_debug_forces_debug_level(self):
        assert Settings(_env_file=None, debug=True).effective_log_level == "DEBUG"
        assert Settings(_env_file=None, log_level="warning").effective_log_level == "WARNING"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_basic_config_called(self):
        with patch("bulldog.config.settings.logging.basicConfig") as basic_config:
            configure_logging("warning")
        basic_config.assert_called_once_with(level="WARNING", format=LOG_FORMAT, force=True)
