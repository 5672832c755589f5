"""
Configuration and defaults.
"""

from typing import Union

from fifo_tictactoe.core.rules import MAX_PIECES, check_max_pieces
from fifo_tictactoe.core.types import Player


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_STARTING_PLAYER = Player.X
DEFAULT_MAX_PIECES = MAX_PIECES

PLAYER_NAMES = {player.symbol: player for player in Player}


def parse_player(value: Union[Player, str]) -> Player:
    """Accept a Player or its symbol in either case ("x", "O")."""
    if isinstance(value, Player):
        return value
    key = str(value).strip().upper()
    if key not in PLAYER_NAMES:
        available = ", ".join(PLAYER_NAMES)
        raise ValueError(f"Unknown player: {value!r}. Available: {available}")
    return PLAYER_NAMES[key]


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        starting_player: Union[Player, str] = DEFAULT_STARTING_PLAYER,
        max_pieces: int = DEFAULT_MAX_PIECES,
    ):
        self.starting_player = parse_player(starting_player)
        self.max_pieces = check_max_pieces(max_pieces)


# Default configuration
DEFAULT_CONFIG = Config()
