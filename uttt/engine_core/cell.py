"""
Cells - the minimal mark unit of a board.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum

from .errors import InvalidConfiguration


class Player(IntEnum):
    """Player identities. Played identities are >= 0."""
    UNPLAYED = -1
    ME = 0
    OPPONENT = 1


@dataclass(frozen=True)
class Cell:
    """
    One grid position.

    local_move_index is the ordinal of the move within its board,
    global_move_index the caller's ordinal in a larger replay (-1 if untracked).
    """
    player: Player = Player.UNPLAYED
    local_move_index: int = -1
    global_move_index: int = -1

    def __post_init__(self):
        try:
            object.__setattr__(self, "player", Player(self.player))
        except ValueError:
            raise InvalidConfiguration(f"Unknown player identity: {self.player!r}") from None
        played = self.player != Player.UNPLAYED
        if played and self.local_move_index < 0:
            raise InvalidConfiguration("A played cell needs a local move index")
        if not played and (self.local_move_index != -1 or self.global_move_index != -1):
            raise InvalidConfiguration("An unplayed cell cannot carry move indices")

    @property
    def is_played(self) -> bool:
        return self.player >= Player.ME

    @property
    def marker(self) -> str:
        """Text marker: '-' for an empty cell, the player's numeral otherwise."""
        return str(int(self.player)) if self.is_played else "-"


EMPTY_CELL = Cell()
