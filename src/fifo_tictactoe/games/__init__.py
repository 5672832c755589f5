"""
Games module - game state and the FIFO tic-tac-toe engine.
"""

from fifo_tictactoe.games.game_state import GameState
from fifo_tictactoe.games.engine import GameEngine, CELL_STRINGS

__all__ = [
    "GameState",
    "GameEngine",
    "CELL_STRINGS",
]
