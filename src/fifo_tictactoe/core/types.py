"""
Core types shared by the rules and the engine.

- Player: the two marks, encoded as they are stored on the board
- Winner: winning player plus the line that completed
- MoveRejection / MoveResult: outcome of a move request
- Phase / GameStatus: derived game status
- GameSnapshot: immutable read-only view of the whole game
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple


class Player(IntEnum):
    """The two players. Values double as the int8 board encoding (0 = empty)."""

    X = 1
    O = 2

    def opposite(self) -> "Player":
        return Player(3 - self.value)  # Toggle 1↔2

    @property
    def symbol(self) -> str:
        return self.name


class Winner(NamedTuple):
    """Winning player and the three cell indices of the completed line."""

    player: Player
    line: Tuple[int, int, int]


class MoveRejection(Enum):
    INVALID_CELL_INDEX = "invalid_cell_index"
    CELL_OCCUPIED = "cell_occupied"
    GAME_ALREADY_FINISHED = "game_already_finished"


class Phase(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class GameStatus(NamedTuple):
    """
    Summary of whose turn it is, or who won.

    `player` is the active player while in progress and the winner once
    finished.
    """

    phase: Phase
    player: Player

    @property
    def is_finished(self) -> bool:
        return self.phase is Phase.FINISHED

    @property
    def message(self) -> str:
        if self.is_finished:
            return f"{self.player.symbol} wins!"
        return f"Turn: {self.player.symbol}"


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable copy of the engine state handed to callers.

    Two snapshots compare equal iff board, queues, active player and winner
    are all equal. `queues` is copied into a read-only mapping on creation.
    """

    board: Tuple[Optional[Player], ...]
    queues: Mapping[Player, Tuple[int, ...]]
    current_player: Player
    winner: Optional[Winner] = None

    def __post_init__(self):
        queues = {player: tuple(cells) for player, cells in self.queues.items()}
        object.__setattr__(self, "queues", MappingProxyType(queues))

    def __hash__(self) -> int:
        return hash((
            self.board,
            tuple(sorted(self.queues.items())),
            self.current_player,
            self.winner,
        ))

    @property
    def phase(self) -> Phase:
        return Phase.IN_PROGRESS if self.winner is None else Phase.FINISHED

    def queue(self, player: Player) -> Tuple[int, ...]:
        """Cells held by `player`, oldest first."""
        return self.queues[player]


class MoveResult(NamedTuple):
    """
    Outcome of GameEngine.apply_move.

    accepted:  False if the move was rejected (state is then unchanged)
    state:     snapshot taken after the call
    rejection: why the move was rejected, None when accepted
    evicted:   cell cleared by the move's eviction, if any
    """

    accepted: bool
    state: GameSnapshot
    rejection: Optional[MoveRejection] = None
    evicted: Optional[int] = None
