"""Board - placement of the three pieces on an 8x8 board."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import TYPE_CHECKING

from chess_interactor.core.enums import PieceKind
from chess_interactor.core.errors import SetupError
from chess_interactor.core.types import (
    Square,
    is_adjacent,
    is_valid_square,
    make_square,
    square_name,
)

if TYPE_CHECKING:
    from chess_interactor.core.position import Position


KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


KING_TARGETS = _build_targets(KING_OFFSETS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)


@lru_cache(maxsize=None)
def _queen_attacks(queen_sq: Square, white_king_sq: Square) -> frozenset[Square]:
    # Only the white king can stop a queen ray; see Board.attacks.
    attacked: set[Square] = set()
    for ray in QUEEN_RAYS[queen_sq]:
        for to_sq in ray:
            attacked.add(to_sq)
            if to_sq == white_king_sq:
                break
    return frozenset(attacked)


def queen_ray_towards(from_sq: Square, to_sq: Square) -> tuple[Square, ...] | None:
    """Squares from *from_sq* (exclusive) to *to_sq* (inclusive) along a queen line.

    Returns ``None`` when the two squares do not share a rank, file or diagonal.
    """
    for ray in QUEEN_RAYS[from_sq]:
        if to_sq in ray:
            return ray[: ray.index(to_sq) + 1]
    return None


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable placement of the white king, white queen and black king."""

    white_king: Square
    white_queen: Square
    black_king: Square

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> PieceKind | None:
        if sq == self.white_king:
            return PieceKind.WHITE_KING
        if sq == self.white_queen:
            return PieceKind.WHITE_QUEEN
        if sq == self.black_king:
            return PieceKind.BLACK_KING
        return None

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def square_of(self, piece: PieceKind) -> Square:
        if piece == PieceKind.WHITE_KING:
            return self.white_king
        if piece == PieceKind.WHITE_QUEEN:
            return self.white_queen
        return self.black_king

    @property
    def occupied(self) -> frozenset[Square]:
        return frozenset((self.white_king, self.white_queen, self.black_king))

    # -- Geometry -----------------------------------------------------------

    def attacks(self, piece: PieceKind) -> frozenset[Square]:
        """Squares *piece* attacks.

        Queen rays include their first blocker. The black king never blocks
        a queen ray: it cannot shelter behind the square it is leaving.
        """
        sq = self.square_of(piece)
        if piece.is_king:
            return frozenset(KING_TARGETS[sq])
        return _queen_attacks(sq, self.white_king)

    def reachable(self, piece: PieceKind) -> frozenset[Square]:
        """Empty squares *piece* can step or slide to, ignoring check."""
        sq = self.square_of(piece)
        if piece.is_king:
            return frozenset(to_sq for to_sq in KING_TARGETS[sq] if self.is_empty(to_sq))

        reachable: set[Square] = set()
        for ray in QUEEN_RAYS[sq]:
            for to_sq in ray:
                if not self.is_empty(to_sq):
                    break
                reachable.add(to_sq)
        return frozenset(reachable)

    def is_attacked_by_queen(self, sq: Square) -> bool:
        return sq in self.attacks(PieceKind.WHITE_QUEEN)

    # -- Mutation -----------------------------------------------------------

    def moved(self, piece: PieceKind, to_sq: Square) -> Board:
        """Copy of the board with *piece* relocated to *to_sq*."""
        if piece == PieceKind.WHITE_KING:
            return replace(self, white_king=to_sq)
        if piece == PieceKind.WHITE_QUEEN:
            return replace(self, white_queen=to_sq)
        return replace(self, black_king=to_sq)

    def validate(self) -> None:
        """Raise :class:`SetupError` unless the placement is a legal one."""
        for piece in PieceKind:
            sq = self.square_of(piece)
            if not is_valid_square(sq):
                raise SetupError(f"{piece} is off the board: {sq}")
        if len(self.occupied) != 3:
            raise SetupError(f"Pieces overlap: {self.describe()}")
        if is_adjacent(self.white_king, self.black_king):
            raise SetupError(f"Kings stand next to each other: {self.describe()}")

    # -- Dunder helpers -----------------------------------------------------

    def describe(self) -> str:
        """Protocol form: ``"<wk> <wq> <bk>"``."""
        return " ".join(
            square_name(sq) if is_valid_square(sq) else str(sq)
            for sq in (self.white_king, self.white_queen, self.black_king)
        )

    def __repr__(self) -> str:
        chars = {
            PieceKind.WHITE_KING: "K",
            PieceKind.WHITE_QUEEN: "Q",
            PieceKind.BLACK_KING: "k",
        }
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(chars[p] if p is not None else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def attacks(piece: PieceKind, position: Position) -> frozenset[Square]:
    """Squares attacked by *piece* in *position*."""
    return position.board.attacks(piece)


def reachable(piece: PieceKind, position: Position) -> frozenset[Square]:
    """Destinations of *piece* in *position*, ignoring check."""
    return position.board.reachable(piece)
