"""
Pydantic schemas for replay files and board snapshots.

These models define what a replay file looks like on disk and how a
board is exported for consumers outside the engine (the meta-game, tools).
"""

from typing import Optional
from pydantic import BaseModel, Field

from ..engine_core.board import Board
from ..engine_core.outcome import Result, UNDECIDED_SENTINEL
from .history import GameHistory


RESULT_NAMES = {
    Result.TIE: "tie",
    Result.WIN: "win",
    Result.LOSE: "lose",
}


class MoveRecordSchema(BaseModel):
    """One move in a replay file."""
    player: int = Field(ge=0, le=1, description="0 = me, 1 = opponent")
    x: int = Field(ge=0, description="Row, zero-based")
    y: int = Field(ge=0, description="Column, zero-based")
    global_index: Optional[int] = Field(
        default=None,
        description="Position in the overall game; defaults to the move's position in the file",
    )


class ReplayFile(BaseModel):
    """A replay: board size plus the moves in order."""
    size: int = Field(default=3, ge=1)
    moves: list[MoveRecordSchema] = Field(default_factory=list)

    def to_history(self) -> GameHistory:
        """Play every move. Board errors propagate."""
        history = GameHistory(size=self.size)
        for move in self.moves:
            history = history.play(move.player, (move.x, move.y), move.global_index)
        return history


class CellSnapshot(BaseModel):
    player: int
    local_move_index: int = -1
    global_move_index: int = -1


class BoardSnapshot(BaseModel):
    """Exported view of a board."""
    size: int
    move_count: int
    finished: bool
    result: Optional[str] = Field(default=None, description="tie, win or lose once finished")
    winner: Optional[int] = None
    winner_code: int = Field(
        default=UNDECIDED_SENTINEL,
        description="Signed result code: -2 undecided, -1 tie, otherwise the winning player",
    )
    rows: list[list[CellSnapshot]]
    text: str

    @classmethod
    def from_board(cls, board: Board) -> "BoardSnapshot":
        finished = board.is_finished()
        return cls(
            size=board.size,
            move_count=board.move_count,
            finished=finished,
            result=RESULT_NAMES[board.get_result()] if finished else None,
            winner=int(board.winner) if board.winner is not None else None,
            winner_code=board.outcome.to_sentinel(),
            rows=[
                [
                    CellSnapshot(
                        player=int(cell.player),
                        local_move_index=cell.local_move_index,
                        global_move_index=cell.global_move_index,
                    )
                    for cell in row
                ]
                for row in board.cells
            ],
            text=board.pretty_print(),
        )
