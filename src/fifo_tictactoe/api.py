"""
Interactive two-player terminal session.

Usage:
    from fifo_tictactoe import GameEngine, start_game

    start_game(GameEngine())
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fifo_tictactoe.core.types import GameSnapshot, MoveRejection, Player
from fifo_tictactoe.games.engine import GameEngine

logger = logging.getLogger(__name__)

RESET_COMMANDS = {"r", "reset"}
QUIT_COMMANDS = {"q", "quit", "exit"}

REJECTION_MESSAGES = {
    MoveRejection.INVALID_CELL_INDEX: "Cells are numbered 1-9.",
    MoveRejection.CELL_OCCUPIED: "That cell is already taken.",
    MoveRejection.GAME_ALREADY_FINISHED: "The game is over. Enter 'r' to play again.",
}


def _parse_cell(raw: str) -> Optional[int]:
    """Convert a 1-9 cell number to a 0-8 index; None if not a number."""
    try:
        return int(raw) - 1
    except ValueError:
        return None


def _legend(engine: GameEngine) -> str:
    parts = []
    for player in Player:
        oldest = engine.oldest_piece_index(player)
        if oldest is not None:
            parts.append(f"{player.symbol}: oldest piece at cell {oldest + 1}")
        else:
            parts.append(f"{player.symbol}: {engine.pieces_on_board(player)} on board")
    return " | ".join(parts)


def _show(engine: GameEngine) -> None:
    print(engine.state_string())
    print(engine.current_status().message)
    print(_legend(engine))


def start_game(
    engine: GameEngine,
    input_fn: Callable[[str], str] = input,
) -> GameSnapshot:
    """
    Run a hot-seat game on the terminal until the players quit.

    Parameters
    ----------
    engine : GameEngine
        The engine to drive. It is not reset first.
    input_fn : Callable[[str], str]
        Prompt function, `input` by default.

    Returns
    -------
    GameSnapshot
        Engine state at the time the session ended.
    """
    print(
        f"Three-piece tic-tac-toe: at most {engine.max_pieces} pieces each, "
        "the oldest one (lowercase) disappears next."
    )
    print("Enter a cell 1-9, 'r' to reset, 'q' to quit.")
    _show(engine)

    try:
        while True:
            prompt = "Move: " if not engine.is_over() else "Again? (r/q): "
            raw = input_fn(prompt).strip().lower()

            if raw in QUIT_COMMANDS:
                break
            if raw in RESET_COMMANDS:
                engine.reset()
                _show(engine)
                continue

            cell = _parse_cell(raw)
            if cell is None:
                print(f"Invalid input: {raw!r}")
                continue

            result = engine.apply_move(cell)
            if not result.accepted:
                print(f"Illegal move: {REJECTION_MESSAGES[result.rejection]}")
                continue

            if result.evicted is not None:
                print(f"Cell {result.evicted + 1} cleared.")
            _show(engine)

            if engine.is_over():
                print("\n" + "=" * 40)
                print("GAME OVER")
                print("=" * 40)

    except (EOFError, KeyboardInterrupt):
        print("\nInterrupted - leaving game.")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return engine.snapshot()


__all__ = [
    "start_game",
]
