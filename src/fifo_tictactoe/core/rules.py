"""
Board constants and win detection.

The board is a flat int8 array of 9 cells, row-major:
    0 = empty
    1 = Player.X
    2 = Player.O
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np

from fifo_tictactoe.core.types import Player, Winner

BOARD_SIDE = 3
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE
EMPTY = 0

# Live pieces per player before the oldest one is evicted
MAX_PIECES = 3

# Above this the two players can fill the board with no line and no legal move
MAX_PIECES_LIMIT = (BOARD_CELLS - 1) // 2

# Fixed scan order; the first complete line is the one reported
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diagonals
)

_WIN_LINES = np.array(WIN_LINES, dtype=np.int8)


def empty_board() -> np.ndarray:
    return np.zeros(BOARD_CELLS, dtype=np.int8)


def check_max_pieces(max_pieces: int) -> int:
    """Return `max_pieces` if it is in [1, MAX_PIECES_LIMIT], else raise ValueError."""
    if not 1 <= max_pieces <= MAX_PIECES_LIMIT:
        raise ValueError(
            f"max_pieces must be between 1 and {MAX_PIECES_LIMIT}, got {max_pieces}"
        )
    return max_pieces


def in_bounds(cell: int) -> bool:
    """Return True if `cell` addresses one of the 9 board cells."""
    return 0 <= cell < BOARD_CELLS


def is_valid_cell(cell: Any) -> bool:
    """
    Return True if `cell` is an integer cell index in [0, 8].

    bools and non-integral numbers (1.0, "3", None) are rejected.
    """
    if isinstance(cell, bool) or not isinstance(cell, (int, np.integer)):
        return False
    return in_bounds(int(cell))


def evaluate_winner(board: np.ndarray) -> Optional[Winner]:
    """
    Scan all 8 lines in fixed order and return the first complete one.

    Args:
        board: flat board of 9 cells (any shape that ravels to 9 works).

    Returns:
        Winner(player, line), or None if no line is complete.
    """
    flat = np.asarray(board).ravel()
    for line in _WIN_LINES:
        v = flat[line[0]]
        if v != EMPTY and flat[line[1]] == v and flat[line[2]] == v:
            return Winner(Player(int(v)), tuple(int(i) for i in line))
    return None
