"""
Pytest fixtures for uttt tests.
"""

import pytest

from ..engine_core.board import Board
from ..engine_core.cell import Player


def play_sequence(board: Board, moves) -> Board:
    """Play alternating moves, ME first."""
    for i, move in enumerate(moves):
        player = Player.ME if i % 2 == 0 else Player.OPPONENT
        board = board.add_move(player, move)
    return board


# ME owns row 0
ROW_WIN_MOVES = [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]

# ME owns the top-left to bottom-right diagonal
DIAGONAL_WIN_MOVES = [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)]

# Full board, no line:
# 0 1 0
# 0 1 1
# 1 0 0
TIE_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]

# ME completes column 2 with the ninth move
LAST_MOVE_WIN_MOVES = [(0, 0), (0, 1), (0, 2), (1, 0), (2, 1), (1, 1), (2, 2), (2, 0), (1, 2)]


@pytest.fixture
def empty_board() -> Board:
    """Empty 3x3 board."""
    return Board()


@pytest.fixture
def won_board(empty_board: Board) -> Board:
    """Board won by ME on row 0."""
    return play_sequence(empty_board, ROW_WIN_MOVES)


@pytest.fixture
def tied_board(empty_board: Board) -> Board:
    """Full board with no winning line."""
    return play_sequence(empty_board, TIE_MOVES)
