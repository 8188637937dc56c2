"""
uttt - Ultimate Tic-Tac-Toe rules engine

The engine implements the sub-board of Ultimate Tic-Tac-Toe: a single N×N
row/column/diagonal game that the meta-game composes into a larger board.
It provides:
- Immutable board snapshots (every move returns a new board)
- Move validation and win/tie detection
- Game histories that can be replayed and branched
"""

__version__ = "0.1.0"
