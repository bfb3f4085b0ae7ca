"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chess_interactor.core.board import Board
from chess_interactor.core.enums import Color
from chess_interactor.core.position import Position
from chess_interactor.core.types import parse_square

PositionFactory = Callable[..., Position]


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from square names: ``make_position("e1", "a1", "h1")``.

    White is to move by default; pass ``side=Color.BLACK`` for a Black turn.
    Black-to-move positions skip setup validation so that check positions
    can be expressed directly.
    """

    def _make(
        white_king: str,
        white_queen: str,
        black_king: str,
        *,
        side: Color = Color.WHITE,
        ply: int = 0,
    ) -> Position:
        squares = (
            parse_square(white_king),
            parse_square(white_queen),
            parse_square(black_king),
        )
        if side == Color.WHITE and ply == 0:
            return Position.setup(*squares)
        return Position(Board(*squares), side, ply)

    return _make


@pytest.fixture
def scenario_position(make_position: PositionFactory) -> Position:
    """White king e1, white queen a1, black king h1, White to move."""
    return make_position("e1", "a1", "h1")
