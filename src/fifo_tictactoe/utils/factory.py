"""
Factory functions for creating engines.
"""

from typing import Optional

from fifo_tictactoe.games.engine import GameEngine
from fifo_tictactoe.utils.config import DEFAULT_CONFIG, Config


def create_engine(config: Optional[Config] = None) -> GameEngine:
    """
    Create a game engine in its initial state.

    Args:
        config: Game settings; DEFAULT_CONFIG when omitted.

    Returns:
        Configured GameEngine
    """
    config = config or DEFAULT_CONFIG
    return GameEngine(
        starting_player=config.starting_player,
        max_pieces=config.max_pieces,
    )
