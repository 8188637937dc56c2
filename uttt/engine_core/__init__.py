"""
Engine Core - Sub-board state machine.

The engine:
1. Creates empty boards
2. Validates moves
3. Applies moves, returning new immutable boards
4. Detects wins and ties
"""

from .cell import Cell, Player
from .move import Move
from .outcome import Outcome, OutcomeKind, Result
from .board import Board
from .errors import (
    ErrorCode,
    BoardError,
    GameNotFinishedError,
    BoardAlreadyFinished,
    InvalidPlayer,
    InvalidMove,
    InvalidConfiguration,
)

__all__ = [
    "Cell",
    "Player",
    "Move",
    "Outcome",
    "OutcomeKind",
    "Result",
    "Board",
    "ErrorCode",
    "BoardError",
    "GameNotFinishedError",
    "BoardAlreadyFinished",
    "InvalidPlayer",
    "InvalidMove",
    "InvalidConfiguration",
]
