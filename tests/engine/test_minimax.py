"""Tests for the minimax defender."""

import pytest

from chess_interactor.core.enums import Color, PieceKind
from chess_interactor.core.errors import PolicyPreconditionError
from chess_interactor.core.legality import is_legal
from chess_interactor.core.move import Move
from chess_interactor.core.types import A8, B8, C8, G1, H1
from chess_interactor.engine import MinimaxAdversary, SearchLimits

BK = PieceKind.BLACK_KING


class TestMinimaxAdversary:
    def test_avoids_mate_in_one_at_depth_one(self, make_position) -> None:
        # Ka8 walks into Qd8#, Kc8 does not
        pos = make_position("b6", "d2", "b8", side=Color.BLACK, ply=1)
        result = MinimaxAdversary().choose(pos, SearchLimits(max_depth=1))
        assert result.best_move == Move(BK, B8, C8)
        assert result.mate_in is None
        assert result.depth == 1

    def test_avoids_mate_in_one_at_default_depth(self, make_position) -> None:
        pos = make_position("b6", "d2", "b8", side=Color.BLACK, ply=1)
        result = MinimaxAdversary().choose(pos, SearchLimits())
        assert result.best_move == Move(BK, B8, C8)

    def test_reports_forced_mate(self, make_position) -> None:
        # Queen on the c-file leaves only Ka8, then Qc8#
        pos = make_position("b6", "c1", "b8", side=Color.BLACK, ply=1)
        result = MinimaxAdversary().choose(pos, SearchLimits(max_depth=3))
        assert result.best_move == Move(BK, B8, A8)
        assert result.mate_in == 1
        assert result.nodes > 0

    def test_ties_prefer_lowest_file_then_rank(self, make_position) -> None:
        pos = make_position("e1", "a8", "h1", side=Color.BLACK, ply=1)
        result = MinimaxAdversary().choose(pos, SearchLimits(max_depth=1))
        assert result.best_move == Move(BK, H1, G1)

    def test_horizon_respects_budget(self, make_position) -> None:
        pos = make_position("e1", "a8", "h1", side=Color.BLACK, ply=1)
        result = MinimaxAdversary().choose(pos, SearchLimits(max_depth=3, move_limit=4))
        assert result.depth == 2
        assert is_legal(pos, result.best_move, Color.BLACK)

    def test_requires_black_to_move(self, scenario_position) -> None:
        with pytest.raises(PolicyPreconditionError):
            MinimaxAdversary().choose(scenario_position, SearchLimits())

    def test_requires_a_legal_move(self, make_position) -> None:
        mated = make_position("g6", "g7", "h8", side=Color.BLACK, ply=1)
        with pytest.raises(PolicyPreconditionError):
            MinimaxAdversary().choose(mated, SearchLimits())

    def test_deterministic(self, make_position) -> None:
        pos = make_position("c6", "d2", "a7", side=Color.BLACK, ply=3)
        first = MinimaxAdversary().choose(pos, SearchLimits())
        second = MinimaxAdversary().choose(pos, SearchLimits())
        assert first == second
