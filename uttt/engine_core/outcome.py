"""
Board outcome.

Internally a board's state is a tagged union (undecided, tie, won by a
player). Callers only ever see the three-way Result once the board is done.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum

from .cell import Player


class Result(IntEnum):
    """Terminal result from the point of view of the ME player."""
    TIE = -1
    WIN = 0
    LOSE = 1


class OutcomeKind(Enum):
    UNDECIDED = "undecided"
    TIE = "tie"
    WON = "won"


# Signed encoding used by snapshots: below TIE means undecided
UNDECIDED_SENTINEL = -2


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind = OutcomeKind.UNDECIDED
    player: Player | None = None

    @classmethod
    def undecided(cls) -> Outcome:
        return cls()

    @classmethod
    def tie(cls) -> Outcome:
        return cls(kind=OutcomeKind.TIE)

    @classmethod
    def won_by(cls, player: Player) -> Outcome:
        return cls(kind=OutcomeKind.WON, player=Player(player))

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.UNDECIDED

    def to_result(self) -> Result | None:
        """Map to the external Result, or None while undecided."""
        if self.kind == OutcomeKind.TIE:
            return Result.TIE
        if self.kind == OutcomeKind.WON:
            return Result.WIN if self.player == Player.ME else Result.LOSE
        return None

    def to_sentinel(self) -> int:
        if self.kind == OutcomeKind.WON:
            return int(self.player)
        if self.kind == OutcomeKind.TIE:
            return int(Result.TIE)
        return UNDECIDED_SENTINEL
