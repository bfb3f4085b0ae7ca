"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chess_interactor.core.enums import PieceKind
from chess_interactor.core.types import Square, is_valid_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single half-move."""

    piece: PieceKind
    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if not (is_valid_square(self.from_sq) and is_valid_square(self.to_sq)):
            return f"{self.piece.letter}{self.from_sq}-{self.to_sq}"
        return f"{self.piece.letter}{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def notation(self) -> str:
        """Protocol form: piece letter plus destination, e.g. ``Qa8``."""
        return f"{self.piece.letter}{square_name(self.to_sq)}"
