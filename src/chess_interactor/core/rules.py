"""High-level rules: check, checkmate, stalemate, abandoned queen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chess_interactor.core.enums import Color, OutcomeKind
from chess_interactor.core.legality import legal_moves
from chess_interactor.core.types import is_adjacent

if TYPE_CHECKING:
    from chess_interactor.core.move import Move
    from chess_interactor.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Only Black can ever be in check: the white king's sole possible attacker
    is the black king, and kings are never allowed to touch.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        board = position.board
        return board.is_attacked_by_queen(board.black_king)

    @staticmethod
    def black_moves(position: Position) -> list[Move]:
        """Legal black king moves, ordered by destination file then rank."""
        if position.side_to_move != Color.BLACK:
            return []
        return legal_moves(position)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not Rules.black_moves(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not Rules.black_moves(position)

    @staticmethod
    def is_queen_abandoned(position: Position) -> bool:
        """Queen touches the black king and the white king does not defend it."""
        board = position.board
        return is_adjacent(board.white_queen, board.black_king) and not is_adjacent(
            board.white_queen, board.white_king
        )

    @staticmethod
    def terminal_kind(position: Position) -> OutcomeKind | None:
        """Classify a position with Black to move, or ``None`` if play goes on.

        The abandoned queen is tested first: Black could take it, so the
        position is neither mate nor stalemate.
        """
        if position.side_to_move != Color.BLACK:
            raise ValueError("Terminal classification needs Black to move")
        if Rules.is_queen_abandoned(position):
            return OutcomeKind.QUEEN_ABANDONED
        if Rules.black_moves(position):
            return None
        if Rules.is_in_check(position):
            return OutcomeKind.CHECKMATE
        return OutcomeKind.STALEMATE
