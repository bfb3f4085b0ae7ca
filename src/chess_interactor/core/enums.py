"""Core enumerations for the king-and-queen endgame."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """The three pieces that exist in this endgame."""

    WHITE_KING = 0
    WHITE_QUEEN = 1
    BLACK_KING = 2

    @property
    def color(self) -> Color:
        return Color.BLACK if self == PieceKind.BLACK_KING else Color.WHITE

    @property
    def is_king(self) -> bool:
        return self != PieceKind.WHITE_QUEEN

    @property
    def letter(self) -> str:
        """Protocol letter: ``K`` for kings, ``Q`` for the queen."""
        return "K" if self.is_king else "Q"

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


class OutcomeKind(StrEnum):
    """Terminal classification of a match."""

    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    ILLEGAL_MOVE = "illegal move"
    MOVE_LIMIT_EXCEEDED = "move limit exceeded"
    QUEEN_ABANDONED = "queen abandoned"
    PROTOCOL_ERROR = "protocol error"


class IllegalReason(StrEnum):
    """Why a submitted move was rejected."""

    WRONG_SIDE = "not this side's turn"
    WRONG_PIECE = "wrong piece"
    OFF_BOARD = "off-board"
    NOT_MOVED = "piece was not moved"
    LANDS_ON_OWN_PIECE = "lands on own piece"
    SQUARE_OCCUPIED = "square occupied by an opposing piece"
    INVALID_GEOMETRY = "invalid geometry"
    BLOCKED_PATH = "blocked path"
    KINGS_ADJACENT = "king moves next to the opposing king"
    MOVES_INTO_CHECK = "moves into check"
    KING_MOVES_DISABLED = "king moves are not allowed"
