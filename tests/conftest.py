"""
Shared test fixtures for fifo_tictactoe tests.

Design principles:
- Fresh engine per test
- Move sequences given as plain cell indices
- Minimal, focused fixtures
"""

from typing import Callable, List

import pytest

from fifo_tictactoe.core.types import MoveResult, Player
from fifo_tictactoe.games.engine import GameEngine


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def engine() -> GameEngine:
    """Fresh engine, X to move."""
    return GameEngine()


@pytest.fixture
def o_first_engine() -> GameEngine:
    """Fresh engine, O to move."""
    return GameEngine(starting_player=Player.O)


@pytest.fixture
def play() -> Callable[..., List[MoveResult]]:
    """Apply a sequence of cells to an engine, asserting each is accepted."""

    def _play(engine: GameEngine, *cells: int) -> List[MoveResult]:
        results = []
        for cell in cells:
            result = engine.apply_move(cell)
            assert result.accepted, f"move {cell} rejected: {result.rejection}"
            results.append(result)
        return results

    return _play


# =============================================================================
# Sequence Fixtures
# =============================================================================

@pytest.fixture
def x_top_row_win() -> List[int]:
    """X0 O3 X1 O4 X2 - X completes the top row."""
    return [0, 3, 1, 4, 2]


@pytest.fixture
def x_first_eviction() -> List[int]:
    """X0 O3 X1 O4 X5 O7 X6 - X's 4th piece evicts cell 0, nobody wins."""
    return [0, 3, 1, 4, 5, 7, 6]
