"""
Moves - zero-based (x, y) coordinates on a board.

x selects the row and y the column.
"""

from __future__ import annotations
from typing import Any, NamedTuple

from .errors import InvalidMove


class Move(NamedTuple):
    x: int
    y: int

    @classmethod
    def coerce(cls, value: Any) -> Move:
        """
        Turn a loosely typed pair into a Move.

        Accepts a Move or any two-element list/tuple of ints.
        Raises InvalidMove for anything else.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise InvalidMove(value, "expected a pair of coordinates")
        x, y = value
        for coord in (x, y):
            if isinstance(coord, bool) or not isinstance(coord, int):
                raise InvalidMove(value, "coordinates must be integers")
        return cls(int(x), int(y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
