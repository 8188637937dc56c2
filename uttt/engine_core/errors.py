"""
Engine errors.

Every failure is a rejected operation on an otherwise healthy board:
the board the call was made on is never modified and stays usable.
"""

from __future__ import annotations
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FINISHED = "GAME_NOT_FINISHED"
    BOARD_FINISHED = "BOARD_FINISHED"
    INVALID_PLAYER = "INVALID_PLAYER"
    INVALID_MOVE = "INVALID_MOVE"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"


class BoardError(Exception):
    """Base class for all rule violations raised by the engine."""

    error_code: ErrorCode = ErrorCode.INVALID_MOVE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class GameNotFinishedError(BoardError):
    """Raised when asking for the result of an undecided board."""

    error_code = ErrorCode.GAME_NOT_FINISHED

    def __init__(self, message: str = "The game has not finished yet"):
        super().__init__(message)


class BoardAlreadyFinished(BoardError):
    """Raised when a move is applied to a full or decided board."""

    error_code = ErrorCode.BOARD_FINISHED

    def __init__(self, message: str = "The board is already finished"):
        super().__init__(message)


class InvalidPlayer(BoardError):
    """Raised when the player is neither ME nor OPPONENT."""

    error_code = ErrorCode.INVALID_PLAYER

    def __init__(self, player: Any):
        self.player = player
        super().__init__(f"Invalid player: {player!r}")


class InvalidMove(BoardError):
    """Raised for malformed, out of range, or already played coordinates."""

    error_code = ErrorCode.INVALID_MOVE

    def __init__(self, move: Any, reason: str | None = None):
        self.move = move
        self.reason = reason
        message = f"Invalid move: {move!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidConfiguration(BoardError):
    """Raised when a board or cell is constructed with impossible values."""

    error_code = ErrorCode.INVALID_CONFIGURATION
