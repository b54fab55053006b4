"""Tests for bulldog/models.py — setup validation."""

import pytest
from pydantic import ValidationError

from bulldog.engine import StrategyKind
from bulldog.models import PlayerEntry


class TestPlayerEntry:
    def test_code_is_converted(self):
        entry = PlayerEntry(name="Fiona", kind="f")
        assert entry.kind is StrategyKind.FIFTEEN

    def test_enum_accepted(self):
        entry = PlayerEntry(name="Olga", kind=StrategyKind.ODD)
        assert entry.kind is StrategyKind.ODD

    def test_name_is_stripped(self):
        assert PlayerEntry(name="  Wes ").name == "Wes"

    def test_default_kind_is_wimp(self):
        assert PlayerEntry(name="Wes").kind is StrategyKind.WIMP

    @pytest.mark.parametrize("name", ["", "   ", "x" * 31])
    def test_bad_names(self, name):
        with pytest.raises(ValidationError):
            PlayerEntry(name=name)

    def test_unknown_code(self):
        with pytest.raises(ValidationError, match="Unknown strategy code"):
            PlayerEntry(name="Zed", kind="Z")

    @pytest.mark.parametrize("text,name,kind", [
        ("W:Wendy", "Wendy", StrategyKind.WIMP),
        ("h: Me ", "Me", StrategyKind.HUMAN),
        ("unique:Uma", "Uma", StrategyKind.UNIQUE),
        ("R:Name:With:Colons", "Name:With:Colons", StrategyKind.RANDOM),
    ])
    def test_parse(self, text, name, kind):
        entry = PlayerEntry.parse(text)
        assert (entry.name, entry.kind) == (name, kind)

    def test_parse_without_separator(self):
        with pytest.raises(ValueError, match="Expected CODE:NAME"):
            PlayerEntry.parse("Wendy")

    def test_to_player(self):
        player = PlayerEntry(name="Olga", kind="O").to_player()
        assert player.name == "Olga"
        assert player.strategy_kind is StrategyKind.ODD
        assert player.cumulative_score == 0
