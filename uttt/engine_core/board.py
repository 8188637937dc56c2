"""
Board - the sub-board state machine.

Design principles:
- Immutable: every accepted move returns a new Board
- Validates before deriving any state, so a rejected move changes nothing
- Unchanged cells are shared between successive snapshots (cells are frozen)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any
import logging

from .cell import Cell, Player, EMPTY_CELL
from .move import Move
from .outcome import Outcome, OutcomeKind, Result
from .errors import (
    BoardAlreadyFinished,
    GameNotFinishedError,
    InvalidConfiguration,
    InvalidMove,
    InvalidPlayer,
)

logger = logging.getLogger(__name__)

PLAYABLE = (Player.ME, Player.OPPONENT)


def _is_valid_player(player: Any) -> bool:
    if isinstance(player, bool) or not isinstance(player, int):
        return False
    return player in PLAYABLE


@dataclass(frozen=True)
class Board:
    """
    An N×N Tic-Tac-Toe board.

    Cells are stored row-major in a flat tuple. Use add_self_move() /
    add_opponent_move() to play; both return the next snapshot.
    """
    size: int = 3
    _cells: tuple[Cell, ...] = field(default=(), repr=False)
    move_count: int = 0
    outcome: Outcome = field(default_factory=Outcome.undecided)

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise InvalidConfiguration(f"Board size must be a positive integer, got {self.size!r}")
        if not self._cells:
            object.__setattr__(self, "_cells", (EMPTY_CELL,) * (self.size * self.size))
        elif len(self._cells) != self.size * self.size:
            raise InvalidConfiguration(
                f"Expected {self.size * self.size} cells, got {len(self._cells)}"
            )
        if not isinstance(self.outcome, Outcome):
            raise InvalidConfiguration(f"outcome must be an Outcome, got {self.outcome!r}")
        self._check_consistency()

    # --------- Public API ---------

    @property
    def max_moves(self) -> int:
        """Number of moves that fill the board."""
        return self.size * self.size

    @property
    def cells(self) -> tuple[tuple[Cell, ...], ...]:
        """Read-only rows of cells."""
        n = self.size
        return tuple(self._cells[row * n:(row + 1) * n] for row in range(n))

    @property
    def winner(self) -> Player | None:
        return self.outcome.player

    def is_finished(self) -> bool:
        """True once the board is won or tied."""
        return self.outcome.is_terminal

    def get_result(self) -> Result:
        """
        Result of a finished board: TIE (-1), WIN (0, we won) or LOSE (1).

        Raises GameNotFinishedError while the board is undecided.
        """
        if not self.is_finished():
            raise GameNotFinishedError()
        return self.outcome.to_result()

    def is_valid_move(self, move: Any) -> bool:
        """
        True if move is a well-formed pair inside the board and the cell is empty.

        The finished state is not checked here.
        """
        return self._move_problem(move) is None

    def add_self_move(self, move: Any, global_index: int = -1) -> Board:
        """Play our move. Returns the new board."""
        return self._apply_move(Player.ME, move, global_index)

    def add_opponent_move(self, move: Any, global_index: int = -1) -> Board:
        """Play the opponent's move. Returns the new board."""
        return self._apply_move(Player.OPPONENT, move, global_index)

    def add_move(self, player: Any, move: Any, global_index: int = -1) -> Board:
        """Play a move for an explicit player identity (ME or OPPONENT)."""
        return self._apply_move(player, move, global_index)

    def cell(self, move: Any) -> Cell:
        move = Move.coerce(move)
        if not self._in_bounds(move):
            raise InvalidMove(move, "outside the board")
        return self._cells[self._index(move)]

    def valid_moves(self) -> list[Move]:
        """Empty cells in row-major order; none once the board is finished."""
        if self.is_finished():
            return []
        n = self.size
        return [
            Move(i // n, i % n)
            for i, cell in enumerate(self._cells)
            if not cell.is_played
        ]

    def moves_played(self) -> list[tuple[Move, Cell]]:
        """Played cells with their coordinates, in the order they were played."""
        n = self.size
        played = [
            (Move(i // n, i % n), cell)
            for i, cell in enumerate(self._cells)
            if cell.is_played
        ]
        return sorted(played, key=lambda item: item[1].local_move_index)

    def pretty_print(self) -> str:
        """One line per row, '-' for empty cells and the player numeral otherwise."""
        return "\n".join(
            " ".join(cell.marker for cell in row)
            for row in self.cells
        )

    def __str__(self) -> str:
        return self.pretty_print()

    # --------- Private API ---------

    def _apply_move(self, player: Any, move: Any, global_index: int = -1) -> Board:
        """
        Validate and apply a move, returning a new Board.

        Checks, in order: board finished, player identity, move validity.
        """
        if self._is_full() or self.is_finished():
            raise BoardAlreadyFinished()

        if not _is_valid_player(player):
            raise InvalidPlayer(player)

        problem = self._move_problem(move)
        if problem is not None:
            raise InvalidMove(move, problem)

        if isinstance(global_index, bool) or not isinstance(global_index, int):
            raise InvalidMove(move, f"global index must be an integer, got {global_index!r}")

        move = Move.coerce(move)
        player = Player(player)

        cells = list(self._cells)
        cells[self._index(move)] = Cell(
            player=player,
            local_move_index=self.move_count,
            global_move_index=global_index,
        )
        cells = tuple(cells)
        move_count = self.move_count + 1
        logger.debug("Player %d played %s as move %d", player, move, self.move_count)

        winner = self._find_winner(cells, move)
        if winner is not None:
            outcome = Outcome.won_by(winner)
        elif move_count == self.max_moves:
            outcome = Outcome.tie()
        else:
            outcome = self.outcome

        if outcome.is_terminal:
            logger.debug("Board finished after %d moves: %s", move_count, outcome.kind.value)

        return self._copy_with(_cells=cells, move_count=move_count, outcome=outcome)

    def _copy_with(self, **kwargs) -> Board:
        return replace(self, **kwargs)

    def _check_consistency(self):
        """
        Reject state that no sequence of moves could have produced.

        move_count matches the played cells, local indices run 0..move_count-1,
        and the outcome agrees with the lines on the board.
        """
        if not all(isinstance(cell, Cell) for cell in self._cells):
            raise InvalidConfiguration("Every cell must be a Cell")
        played = [cell for cell in self._cells if cell.is_played]
        if self.move_count != len(played):
            raise InvalidConfiguration(
                f"move_count is {self.move_count!r} but {len(played)} cells are played"
            )
        if sorted(cell.local_move_index for cell in played) != list(range(len(played))):
            raise InvalidConfiguration("Local move indices must run from 0 without gaps")

        owners = {
            owner for owner in (self._line_owner(self._cells, line) for line in self._all_lines())
            if owner is not None
        }
        kind = self.outcome.kind
        if kind == OutcomeKind.WON:
            if owners != {self.outcome.player}:
                raise InvalidConfiguration(
                    f"Board is marked won by {self.outcome.player!r} without a matching line"
                )
        elif owners:
            raise InvalidConfiguration("Board has a won line but is not marked won")
        elif (kind == OutcomeKind.TIE) != self._is_full():
            raise InvalidConfiguration("Only a full board without a won line is a tie")

    def _move_problem(self, move: Any) -> str | None:
        """Why a move cannot be played, or None if it can."""
        try:
            move = Move.coerce(move)
        except InvalidMove as e:
            return e.reason
        if not self._in_bounds(move):
            return "outside the board"
        if self._cells[self._index(move)].is_played:
            return "cell already played"
        return None

    def _in_bounds(self, move: Move) -> bool:
        return 0 <= move.x < self.size and 0 <= move.y < self.size

    def _index(self, move: Move) -> int:
        return move.x * self.size + move.y

    def _is_full(self) -> bool:
        return self.move_count == self.max_moves

    def _all_lines(self) -> list[list[tuple[int, int]]]:
        n = self.size
        lines = [[(row, i) for i in range(n)] for row in range(n)]
        lines += [[(i, col) for i in range(n)] for col in range(n)]
        lines.append([(i, i) for i in range(n)])
        lines.append([(i, n - 1 - i) for i in range(n)])
        return lines

    def _find_winner(self, cells: tuple[Cell, ...], move: Move) -> Player | None:
        """
        Check the lines through the last move.

        Order: the move's row, its column, the top-left to bottom-right
        diagonal, then the top-right to bottom-left diagonal. Stops at the
        first won line.
        """
        n = self.size
        lines = [
            [(move.x, i) for i in range(n)],
            [(i, move.y) for i in range(n)],
            [(i, i) for i in range(n)],
            [(i, n - 1 - i) for i in range(n)],
        ]
        for line in lines:
            owner = self._line_owner(cells, line)
            if owner is not None:
                return owner
        return None

    def _line_owner(self, cells: tuple[Cell, ...], coords) -> Player | None:
        """The player holding every cell of the line, if any."""
        owner = None
        for x, y in coords:
            cell = cells[x * self.size + y]
            if not cell.is_played:
                return None
            if owner is None:
                owner = cell.player
            elif cell.player != owner:
                return None
        return owner
