"""
Tests for fifo_tictactoe.core.types

Tests Player, GameStatus and GameSnapshot value semantics.
"""

import pytest

from fifo_tictactoe.core.types import (
    GameSnapshot,
    GameStatus,
    MoveRejection,
    MoveResult,
    Phase,
    Player,
    Winner,
)


def _empty_snapshot(player: Player = Player.X) -> GameSnapshot:
    return GameSnapshot(
        board=(None,) * 9,
        queues={Player.X: (), Player.O: ()},
        current_player=player,
    )


class TestPlayer:
    """Player enum tests."""

    def test_board_encoding(self):
        """X and O encode as 1 and 2 (0 is empty)."""
        assert Player.X == 1
        assert Player.O == 2

    def test_opposite(self):
        """opposite() toggles between the two players."""
        assert Player.X.opposite() is Player.O
        assert Player.O.opposite() is Player.X

    def test_symbol(self):
        """Symbols are the single letters."""
        assert Player.X.symbol == "X"
        assert Player.O.symbol == "O"


class TestGameStatus:
    """GameStatus tests."""

    def test_in_progress_message(self):
        status = GameStatus(Phase.IN_PROGRESS, Player.O)
        assert not status.is_finished
        assert status.message == "Turn: O"

    def test_finished_message(self):
        status = GameStatus(Phase.FINISHED, Player.X)
        assert status.is_finished
        assert status.message == "X wins!"


class TestGameSnapshot:
    """GameSnapshot tests."""

    def test_equality(self):
        """Snapshots with equal fields compare equal."""
        assert _empty_snapshot() == _empty_snapshot()
        assert _empty_snapshot(Player.X) != _empty_snapshot(Player.O)

    def test_immutable(self):
        """Snapshot fields cannot be reassigned."""
        snap = _empty_snapshot()
        with pytest.raises(AttributeError):
            snap.current_player = Player.O

    def test_queues_read_only(self):
        """Queues cannot be edited through the snapshot."""
        snap = _empty_snapshot()
        with pytest.raises(TypeError):
            snap.queues[Player.X] = (9,)
        assert snap.queue(Player.X) == ()

    def test_queues_copied_from_input(self):
        queues = {Player.X: (0,), Player.O: ()}
        snap = GameSnapshot(board=(Player.X,) + (None,) * 8, queues=queues, current_player=Player.O)
        queues[Player.X] = (5,)
        assert snap.queue(Player.X) == (0,)

    def test_hashable(self):
        """Equal snapshots hash equal and can be used as set members."""
        assert hash(_empty_snapshot()) == hash(_empty_snapshot())
        assert len({_empty_snapshot(), _empty_snapshot(), _empty_snapshot(Player.O)}) == 2

    def test_phase_follows_winner(self):
        snap = _empty_snapshot()
        assert snap.phase is Phase.IN_PROGRESS

        won = GameSnapshot(
            board=(Player.X,) * 3 + (None,) * 6,
            queues={Player.X: (0, 1, 2), Player.O: ()},
            current_player=Player.X,
            winner=Winner(Player.X, (0, 1, 2)),
        )
        assert won.phase is Phase.FINISHED

    def test_queue_accessor(self):
        snap = GameSnapshot(
            board=(Player.X, None, None, Player.O) + (None,) * 5,
            queues={Player.X: (0,), Player.O: (3,)},
            current_player=Player.X,
        )
        assert snap.queue(Player.X) == (0,)
        assert snap.queue(Player.O) == (3,)


class TestMoveResult:
    """MoveResult defaults."""

    def test_defaults(self):
        result = MoveResult(True, _empty_snapshot())
        assert result.rejection is None
        assert result.evicted is None

    def test_rejected(self):
        result = MoveResult(False, _empty_snapshot(), rejection=MoveRejection.CELL_OCCUPIED)
        assert not result.accepted
        assert result.rejection is MoveRejection.CELL_OCCUPIED
