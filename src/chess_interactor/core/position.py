"""Position — board + side to move + half-move counter."""

from __future__ import annotations

from dataclasses import dataclass

from chess_interactor.core.board import Board
from chess_interactor.core.enums import Color
from chess_interactor.core.move import Move
from chess_interactor.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable snapshot of a match.

    Successive positions are produced by :meth:`after`; nothing is ever
    mutated in place, so snapshots can be shared freely with the search.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    ply: int = 0

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def setup(
        cls,
        white_king: Square,
        white_queen: Square,
        black_king: Square,
    ) -> Position:
        """Starting position with White to move.

        Raises:
            SetupError: pieces off the board, overlapping, or kings adjacent.
        """
        board = Board(white_king, white_queen, black_king)
        board.validate()
        return cls(board)

    # ── Core move operation ──────────────────────────────────────────────

    def after(self, move: Move) -> Position:
        """Successor position. Caller is responsible for the legality check."""
        if self.board.square_of(move.piece) != move.from_sq:
            raise ValueError(f"No {move.piece} on {move.from_sq}")
        return Position(
            board=self.board.moved(move.piece, move.to_sq),
            side_to_move=self.side_to_move.opposite,
            ply=self.ply + 1,
        )

    # ── Shortcuts ────────────────────────────────────────────────────────

    @property
    def white_king(self) -> Square:
        return self.board.white_king

    @property
    def white_queen(self) -> Square:
        return self.board.white_queen

    @property
    def black_king(self) -> Square:
        return self.board.black_king

    def __str__(self) -> str:
        return f"{self.board.describe()} {self.side_to_move} to move, ply {self.ply}"
