"""
Game History - replayable, branchable sequences of board snapshots.

A history never changes once built: play() and branch() return new
histories. Snapshots are shared between a history and its branches.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable

from ..engine_core.board import Board
from ..engine_core.cell import Player
from ..engine_core.move import Move


@dataclass(frozen=True)
class MoveRecord:
    """A single move as it appears in a replay."""
    player: Player
    move: Move
    global_index: int = -1


@dataclass(frozen=True)
class GameHistory:
    """
    Ordered snapshots of one board, starting from the empty board.

    snapshots[n] is the board after n moves, so there is always one
    more snapshot than there are records.
    """
    size: int = 3
    records: tuple[MoveRecord, ...] = ()
    snapshots: tuple[Board, ...] = ()

    def __post_init__(self):
        if not self.snapshots:
            object.__setattr__(self, "snapshots", (Board(self.size),))

    @property
    def board(self) -> Board:
        """Latest snapshot."""
        return self.snapshots[-1]

    def __len__(self) -> int:
        return len(self.records)

    def play(self, player: Any, move: Any, global_index: int | None = None) -> GameHistory:
        """
        Return a new history with the move appended.

        global_index defaults to the move's position in this history.
        Board errors propagate and leave this history untouched.
        """
        if global_index is None:
            global_index = len(self.records)
        board = self.board.add_move(player, move, global_index)
        record = MoveRecord(player=Player(player), move=Move.coerce(move), global_index=global_index)
        return GameHistory(
            size=self.size,
            records=self.records + (record,),
            snapshots=self.snapshots + (board,),
        )

    def at(self, moves: int) -> Board:
        """Snapshot after the given number of moves."""
        if not 0 <= moves <= len(self.records):
            raise IndexError(f"History has {len(self.records)} moves, asked for {moves}")
        return self.snapshots[moves]

    def branch(self, moves: int) -> GameHistory:
        """New history keeping only the first `moves` moves."""
        if not 0 <= moves <= len(self.records):
            raise IndexError(f"History has {len(self.records)} moves, cannot branch at {moves}")
        return GameHistory(
            size=self.size,
            records=self.records[:moves],
            snapshots=self.snapshots[:moves + 1],
        )

    @classmethod
    def replay(cls, records: Iterable[MoveRecord], size: int = 3) -> GameHistory:
        """Rebuild a history by playing every record in order."""
        history = cls(size=size)
        for record in records:
            history = history.play(record.player, record.move, record.global_index)
        return history
