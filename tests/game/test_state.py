"""Tests for GameState."""

import pytest

from chess_interactor.core.board import Board
from chess_interactor.core.enums import Color, IllegalReason, OutcomeKind, PieceKind
from chess_interactor.core.errors import GameOverError, SetupError
from chess_interactor.core.move import Move
from chess_interactor.core.outcome import Outcome
from chess_interactor.core.position import Position
from chess_interactor.core.types import A1, A2, A8, B2, B3, E1, E2, G1, G6, G7, H1
from chess_interactor.game.interfaces import GamePhase
from chess_interactor.game.state import GameState

WQ = PieceKind.WHITE_QUEEN
BK = PieceKind.BLACK_KING


class TestGameStateSetup:
    def test_initial_phase(self, scenario_position) -> None:
        gs = GameState(scenario_position, 4)
        assert gs.phase == GamePhase.AWAITING_WHITE_MOVE
        assert gs.outcome is None
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert gs.moves_remaining == 4

    def test_non_positive_limit_rejected(self, scenario_position) -> None:
        with pytest.raises(SetupError):
            GameState(scenario_position, 0)

    def test_black_to_move_rejected(self, make_position) -> None:
        with pytest.raises(SetupError):
            GameState(make_position("e1", "a1", "h1", side=Color.BLACK), 4)

    def test_adjacent_kings_rejected(self) -> None:
        with pytest.raises(SetupError):
            GameState(Position(Board(E1, A1, E2)), 4)


class TestGameStateMoves:
    def test_scenario_runs_out_of_budget(self, scenario_position) -> None:
        gs = GameState(scenario_position, 4)

        record = gs.apply_white_move(Move(WQ, A1, A8))
        assert record.was_check
        assert record.notation == "Qa8"
        assert gs.phase == GamePhase.AWAITING_BLACK_REPLY

        gs.apply_black_move(Move(BK, H1, G1))
        assert gs.phase == GamePhase.AWAITING_WHITE_MOVE
        assert gs.moves_remaining == 2

        gs.apply_white_move(Move(WQ, A8, A2))
        assert gs.phase == GamePhase.AWAITING_BLACK_REPLY

        gs.apply_black_move(Move(BK, G1, H1))
        assert gs.is_game_over
        assert gs.outcome == Outcome.move_limit_exceeded()
        assert gs.ply_count == 4
        assert gs.white_moves_played == 2
        assert [r.side for r in gs.move_history] == [
            Color.WHITE, Color.BLACK, Color.WHITE, Color.BLACK,
        ]

    def test_checkmate(self, make_position) -> None:
        gs = GameState(make_position("g6", "a1", "h8"), 10)
        gs.apply_white_move(Move(WQ, A1, A8))
        assert gs.is_game_over
        assert gs.outcome.kind == OutcomeKind.CHECKMATE
        assert gs.outcome.white_wins

    def test_checkmate_beats_exhausted_budget(self, make_position) -> None:
        gs = GameState(make_position("g6", "a1", "h8"), 1)
        gs.apply_white_move(Move(WQ, A1, A8))
        assert gs.outcome.kind == OutcomeKind.CHECKMATE

    def test_stalemate(self, make_position) -> None:
        gs = GameState(make_position("f6", "g1", "h8"), 10)
        gs.apply_white_move(Move(WQ, G1, G6))
        assert gs.outcome == Outcome.stalemate()
        assert not gs.outcome.white_wins

    def test_abandoned_queen(self, make_position) -> None:
        gs = GameState(make_position("a1", "b2", "h8"), 10)
        gs.apply_white_move(Move(WQ, B2, G7))
        assert gs.outcome.kind == OutcomeKind.QUEEN_ABANDONED

    def test_budget_spent_on_white_move(self, scenario_position) -> None:
        gs = GameState(scenario_position, 1)
        gs.apply_white_move(Move(WQ, A1, A8))
        assert gs.outcome.kind == OutcomeKind.MOVE_LIMIT_EXCEEDED

    def test_check_white_move(self, scenario_position) -> None:
        gs = GameState(scenario_position, 4)
        assert gs.check_white_move(Move(WQ, A1, B2)) is None
        assert gs.check_white_move(Move(WQ, A1, B3)) == IllegalReason.INVALID_GEOMETRY

    def test_king_moves_switch(self, scenario_position) -> None:
        gs = GameState(scenario_position, 4, allow_king_moves=False)
        move = Move(PieceKind.WHITE_KING, E1, E2)
        assert gs.check_white_move(move) == IllegalReason.KING_MOVES_DISABLED


class TestGameStatePhases:
    def test_black_cannot_move_first(self, scenario_position) -> None:
        gs = GameState(scenario_position, 4)
        with pytest.raises(RuntimeError):
            gs.apply_black_move(Move(BK, H1, G1))

    def test_no_moves_after_game_over(self, make_position) -> None:
        gs = GameState(make_position("g6", "a1", "h8"), 10)
        gs.apply_white_move(Move(WQ, A1, A8))
        with pytest.raises(GameOverError):
            gs.apply_white_move(Move(WQ, A8, B2))

    def test_outcome_is_set_once(self, scenario_position) -> None:
        gs = GameState(scenario_position, 4)
        gs.finish(Outcome.protocol_error("bad line"))
        with pytest.raises(GameOverError):
            gs.finish(Outcome.stalemate())
        assert gs.outcome.kind == OutcomeKind.PROTOCOL_ERROR
