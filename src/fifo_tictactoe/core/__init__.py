"""
Core module - fundamental types and board rules.
"""

from fifo_tictactoe.core.types import (
    Player,
    Winner,
    MoveRejection,
    MoveResult,
    Phase,
    GameStatus,
    GameSnapshot,
)
from fifo_tictactoe.core.rules import (
    BOARD_CELLS,
    BOARD_SIDE,
    EMPTY,
    MAX_PIECES,
    MAX_PIECES_LIMIT,
    WIN_LINES,
    check_max_pieces,
    empty_board,
    evaluate_winner,
    in_bounds,
    is_valid_cell,
)

__all__ = [
    # Types
    "Player",
    "Winner",
    "MoveRejection",
    "MoveResult",
    "Phase",
    "GameStatus",
    "GameSnapshot",
    # Constants
    "BOARD_CELLS",
    "BOARD_SIDE",
    "EMPTY",
    "MAX_PIECES",
    "MAX_PIECES_LIMIT",
    "WIN_LINES",
    # Functions
    "check_max_pieces",
    "empty_board",
    "evaluate_winner",
    "in_bounds",
    "is_valid_cell",
]
