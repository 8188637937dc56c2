"""
Replay - game histories and their serialized form.
"""

from .history import GameHistory, MoveRecord
from .schemas import MoveRecordSchema, ReplayFile, CellSnapshot, BoardSnapshot

__all__ = [
    "GameHistory",
    "MoveRecord",
    "MoveRecordSchema",
    "ReplayFile",
    "CellSnapshot",
    "BoardSnapshot",
]
