"""
Tests for the small value types: cells, moves and outcomes.
"""

import pytest

from ..engine_core.cell import Cell, Player
from ..engine_core.move import Move
from ..engine_core.outcome import Outcome, OutcomeKind, Result, UNDECIDED_SENTINEL
from ..engine_core.errors import InvalidConfiguration, InvalidMove


class TestCell:
    """Tests for Cell."""

    def test_default_is_unplayed(self):
        cell = Cell()
        assert cell.player == Player.UNPLAYED
        assert cell.local_move_index == -1
        assert cell.global_move_index == -1
        assert not cell.is_played
        assert cell.marker == "-"

    def test_played_marker(self):
        assert Cell(Player.ME, 0).marker == "0"
        assert Cell(Player.OPPONENT, 3, 12).marker == "1"

    def test_int_player_normalized(self):
        assert Cell(1, 0).player is Player.OPPONENT

    def test_unplayed_with_index_rejected(self):
        with pytest.raises(InvalidConfiguration):
            Cell(Player.UNPLAYED, 2)
        with pytest.raises(InvalidConfiguration):
            Cell(Player.UNPLAYED, -1, 5)

    def test_played_without_index_rejected(self):
        with pytest.raises(InvalidConfiguration):
            Cell(Player.ME)

    def test_unknown_player_rejected(self):
        with pytest.raises(InvalidConfiguration):
            Cell(4, 0)


class TestMove:
    """Tests for Move coercion."""

    def test_coerce_pairs(self):
        assert Move.coerce((1, 2)) == Move(1, 2)
        assert Move.coerce([0, 0]) == Move(0, 0)
        move = Move(2, 1)
        assert Move.coerce(move) is move

    @pytest.mark.parametrize("value", [None, (1,), [1, 2, 3], "ab", (1, "2"), (False, 1)])
    def test_coerce_rejects(self, value):
        with pytest.raises(InvalidMove) as exc_info:
            Move.coerce(value)
        assert exc_info.value.move == value

    def test_str(self):
        assert str(Move(1, 2)) == "(1, 2)"


class TestOutcome:
    """Tests for Outcome and its external encodings."""

    def test_undecided(self):
        outcome = Outcome.undecided()
        assert not outcome.is_terminal
        assert outcome.to_result() is None
        assert outcome.to_sentinel() == UNDECIDED_SENTINEL
        assert outcome.to_sentinel() < Result.TIE

    def test_tie(self):
        outcome = Outcome.tie()
        assert outcome.is_terminal
        assert outcome.player is None
        assert outcome.to_result() == Result.TIE
        assert outcome.to_sentinel() == -1

    def test_won(self):
        assert Outcome.won_by(Player.ME).to_result() == Result.WIN
        assert Outcome.won_by(Player.OPPONENT).to_result() == Result.LOSE
        assert Outcome.won_by(1).kind == OutcomeKind.WON
        assert Outcome.won_by(1).to_sentinel() == 1
