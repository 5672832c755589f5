"""
FIFO Tic-Tac-Toe - rule engine for three-piece tic-tac-toe.

Each player may keep only three pieces on the board; placing a fourth
removes that player's oldest piece. First to align three in a row wins,
and since pieces cycle off the board there are no draws.

Quick Start:
    from fifo_tictactoe import GameEngine, Player

    engine = GameEngine()
    result = engine.apply_move(4)
    result.accepted                       # True
    engine.oldest_piece_index(Player.X)   # None until X has 3 pieces

Modules:
    core    - Player/Winner/result types and win detection
    games   - GameState container and GameEngine
    utils   - Config and engine factory
    api     - interactive terminal session
"""

from fifo_tictactoe.core import (
    GameSnapshot,
    GameStatus,
    MoveRejection,
    MoveResult,
    Phase,
    Player,
    Winner,
    evaluate_winner,
)
from fifo_tictactoe.games import GameEngine, GameState
from fifo_tictactoe.api import start_game

__version__ = "1.0.0"

__all__ = [
    # Main API
    "GameEngine",
    "start_game",
    "evaluate_winner",
    # Types
    "GameState",
    "GameSnapshot",
    "GameStatus",
    "MoveRejection",
    "MoveResult",
    "Phase",
    "Player",
    "Winner",
]
