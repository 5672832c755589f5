"""
Tests for fifo_tictactoe.utils.config

Tests configuration defaults and player parsing.
"""

import pytest

from fifo_tictactoe.core.types import Player
from fifo_tictactoe.utils.config import (
    DEFAULT_CONFIG,
    DEFAULT_MAX_PIECES,
    DEFAULT_STARTING_PLAYER,
    PLAYER_NAMES,
    Config,
    parse_player,
)


class TestParsePlayer:
    """parse_player function tests."""

    def test_player_passthrough(self):
        assert parse_player(Player.O) is Player.O

    @pytest.mark.parametrize("name,expected", [
        ("X", Player.X),
        ("x", Player.X),
        (" o ", Player.O),
        ("O", Player.O),
    ])
    def test_names(self, name, expected):
        assert parse_player(name) is expected

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            parse_player("Z")

    def test_names_registry(self):
        assert set(PLAYER_NAMES) == {"X", "O"}


class TestConfig:
    """Config class tests."""

    def test_defaults(self):
        config = Config()
        assert config.starting_player is DEFAULT_STARTING_PLAYER is Player.X
        assert config.max_pieces == DEFAULT_MAX_PIECES == 3

    def test_default_config(self):
        assert DEFAULT_CONFIG.starting_player is Player.X
        assert DEFAULT_CONFIG.max_pieces == 3

    def test_starting_player_by_name(self):
        assert Config(starting_player="o").starting_player is Player.O

    def test_custom_max_pieces(self):
        assert Config(max_pieces=4).max_pieces == 4

    def test_largest_max_pieces(self):
        assert Config(max_pieces=4).max_pieces == 4

    @pytest.mark.parametrize("max_pieces", [0, -3, 5, 9])
    def test_invalid_max_pieces_raises(self, max_pieces):
        with pytest.raises(ValueError):
            Config(max_pieces=max_pieces)
