"""
GameEngine - three-piece (FIFO) tic-tac-toe.

Each player keeps at most `max_pieces` marks on the board. Placing one more
removes that player's oldest mark before the board is checked for a win.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import numpy as np

from fifo_tictactoe.core.rules import (
    BOARD_SIDE,
    EMPTY,
    MAX_PIECES,
    check_max_pieces,
    evaluate_winner,
    is_valid_cell,
)
from fifo_tictactoe.core.types import (
    GameSnapshot,
    GameStatus,
    MoveRejection,
    MoveResult,
    Phase,
    Player,
    Winner,
)
from fifo_tictactoe.games.game_state import GameState

logger = logging.getLogger(__name__)

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: " ", Player.X.value: "X", Player.O.value: "O"}


class GameEngine:
    """
    Owns a single GameState and is the only thing that mutates it.

    apply_move() and reset() are the only transitions; everything else is a
    read-only derivation computed on demand.
    """

    __slots__ = ('_state', 'starting_player', 'max_pieces')

    def __init__(self, starting_player: Player = Player.X, max_pieces: int = MAX_PIECES):
        self.starting_player = Player(starting_player)
        self.max_pieces = check_max_pieces(max_pieces)
        self._state = GameState.initial(self.starting_player)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def apply_move(self, cell: Any) -> MoveResult:
        """
        Place the active player's mark at `cell`.

        Rejected moves leave the state untouched and are reported through
        MoveResult.rejection rather than raised.

        Args:
            cell: Cell index 0-8, row-major.

        Returns:
            MoveResult with the post-call snapshot.
        """
        rejection = self._check_move(cell)
        if rejection is not None:
            logger.debug("Rejected move at %r: %s", cell, rejection.value)
            return MoveResult(False, self.snapshot(), rejection=rejection)

        state = self._state
        cell = int(cell)
        player = state.current_player
        queue = state.queues[player]

        state.board[cell] = int(player)
        queue.append(cell)

        evicted: Optional[int] = None
        if len(queue) > self.max_pieces:
            evicted = queue.popleft()
            state.board[evicted] = EMPTY
            logger.debug("%s placed at %d, evicted %d", player.symbol, cell, evicted)
        else:
            logger.debug("%s placed at %d", player.symbol, cell)

        winner = evaluate_winner(state.board)
        if winner is not None:
            state.winner = winner
            logger.info("%s wins on line %s", winner.player.symbol, winner.line)
        else:
            state.current_player = player.opposite()

        return MoveResult(True, self.snapshot(), evicted=evicted)

    def reset(self) -> GameSnapshot:
        """Return to the initial state. Always succeeds."""
        self._state = GameState.initial(self.starting_player)
        logger.info("Game reset, %s to move", self.starting_player.symbol)
        return self.snapshot()

    def _check_move(self, cell: Any) -> Optional[MoveRejection]:
        if self._state.winner is not None:
            return MoveRejection.GAME_ALREADY_FINISHED
        if not is_valid_cell(cell):
            return MoveRejection.INVALID_CELL_INDEX
        if self._state.cell_owner(int(cell)) is not None:
            return MoveRejection.CELL_OCCUPIED
        return None

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return self._state.snapshot()

    def get_state(self) -> GameState:
        """Deep copy of the current state; mutating it does not affect the engine."""
        return self._state.copy()

    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def winner(self) -> Optional[Winner]:
        return self._state.winner

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        winner = self._state.winner
        return winner.line if winner is not None else None

    def is_over(self) -> bool:
        return self._state.winner is not None

    def valid_moves(self) -> np.ndarray:
        """Return empty cell indices; empty once the game is finished."""
        if self.is_over():
            return np.array([], dtype=np.intp)
        return np.flatnonzero(self._state.board == EMPTY)

    def pieces_on_board(self, player: Player) -> int:
        return len(self._state.queues[player])

    def oldest_piece_index(self, player: Player) -> Optional[int]:
        """
        Cell that `player`'s next placement will clear.

        Returns the head of the player's queue only when the queue is full;
        None means no piece is currently at risk.
        """
        queue = self._state.queues[player]
        if len(queue) == self.max_pieces:
            return queue[0]
        return None

    def current_status(self) -> GameStatus:
        winner = self._state.winner
        if winner is not None:
            return GameStatus(Phase.FINISHED, winner.player)
        return GameStatus(Phase.IN_PROGRESS, self._state.current_player)

    def state_string(self) -> str:
        """Box-drawn board; a piece about to be evicted is shown in lowercase."""
        at_risk = {self.oldest_piece_index(p) for p in Player} - {None}
        board = self._state.board

        def cell_str(i: int) -> str:
            s = CELL_STRINGS[int(board[i])]
            return s.lower() if i in at_risk else s

        lines = ["╭───┬───┬───╮"]
        for r in range(BOARD_SIDE):
            row = "│ " + " │ ".join(cell_str(r * BOARD_SIDE + c) for c in range(BOARD_SIDE)) + " │"
            lines.append(row)
            if r < BOARD_SIDE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
