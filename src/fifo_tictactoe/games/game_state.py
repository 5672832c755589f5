"""
GameState - mutable game state container owned by GameEngine.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional

import numpy as np

from fifo_tictactoe.core.rules import BOARD_CELLS, empty_board
from fifo_tictactoe.core.types import GameSnapshot, Player, Winner


class GameState:
    """
    Board, per-player move queues, active player and winner.

    Uses a flat int8 board:
        0 = empty
        1 = X
        2 = O

    Each queue lists the cells a player currently occupies, oldest first.
    """
    __slots__ = ('board', 'queues', 'current_player', 'winner')

    def __init__(
        self,
        board: np.ndarray,
        queues: Dict[Player, Deque[int]],
        current_player: Player,
        winner: Optional[Winner] = None,
    ):
        self.board = board
        self.queues = queues
        self.current_player = current_player
        self.winner = winner

    @classmethod
    def initial(cls, starting_player: Player = Player.X) -> "GameState":
        """Empty board, empty queues, `starting_player` to move, no winner."""
        return cls(
            empty_board(),
            {player: deque() for player in Player},
            current_player=starting_player,
        )

    def copy(self) -> "GameState":
        return GameState(
            self.board.copy(),
            {player: deque(queue) for player, queue in self.queues.items()},
            current_player=self.current_player,
            winner=self.winner,
        )

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=tuple(self.cell_owner(i) for i in range(BOARD_CELLS)),
            queues={player: tuple(queue) for player, queue in self.queues.items()},
            current_player=self.current_player,
            winner=self.winner,
        )

    def cell_owner(self, cell: int) -> Optional[Player]:
        v = int(self.board[cell])
        return Player(v) if v else None
