"""Move legality for the king-and-queen endgame.

Rules are applied in a fixed order and the first violation wins, so the
reason attached to an illegal move is deterministic:

1. ownership: the piece belongs to the mover and stands on ``from_sq``;
2. destination: on the board, actually different, not on another piece;
3. geometry: one king step, or a clear queen line;
4. king safety: kings never touch, the black king never steps into check.

Queen moves are never rejected for exposing the white king: the only
black attacker is a king, whose reach does not depend on the queen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chess_interactor.core.board import KING_TARGETS, queen_ray_towards
from chess_interactor.core.enums import Color, IllegalReason, PieceKind
from chess_interactor.core.move import Move
from chess_interactor.core.types import (
    chebyshev_distance,
    is_adjacent,
    is_valid_square,
    square_order_key,
)

if TYPE_CHECKING:
    from chess_interactor.core.position import Position


def check_move(
    position: Position,
    move: Move,
    side: Color,
    *,
    allow_king_moves: bool = True,
) -> IllegalReason | None:
    """Return why *move* is illegal for *side*, or ``None`` if it is legal."""
    board = position.board
    piece = move.piece

    # 1. Ownership and turn
    if piece.color != side or board.square_of(piece) != move.from_sq:
        return IllegalReason.WRONG_PIECE
    if side != position.side_to_move:
        return IllegalReason.WRONG_SIDE
    if piece == PieceKind.WHITE_KING and not allow_king_moves:
        return IllegalReason.KING_MOVES_DISABLED

    # 2. Destination square
    if not is_valid_square(move.to_sq):
        return IllegalReason.OFF_BOARD
    if move.to_sq == move.from_sq:
        return IllegalReason.NOT_MOVED
    occupant = board[move.to_sq]
    if occupant is not None:
        if occupant.color == side:
            return IllegalReason.LANDS_ON_OWN_PIECE
        return IllegalReason.SQUARE_OCCUPIED

    # 3. Movement pattern
    if piece.is_king:
        if chebyshev_distance(move.from_sq, move.to_sq) != 1:
            return IllegalReason.INVALID_GEOMETRY
    else:
        path = queen_ray_towards(move.from_sq, move.to_sq)
        if path is None:
            return IllegalReason.INVALID_GEOMETRY
        if any(not board.is_empty(sq) for sq in path[:-1]):
            return IllegalReason.BLOCKED_PATH
        return None

    # 4. King safety
    enemy_king = board.black_king if side == Color.WHITE else board.white_king
    if is_adjacent(move.to_sq, enemy_king):
        return IllegalReason.KINGS_ADJACENT
    if side == Color.BLACK and board.is_attacked_by_queen(move.to_sq):
        return IllegalReason.MOVES_INTO_CHECK
    return None


def is_legal(
    position: Position,
    move: Move,
    side: Color,
    *,
    allow_king_moves: bool = True,
) -> bool:
    return check_move(position, move, side, allow_king_moves=allow_king_moves) is None


def legal_moves(position: Position, *, allow_king_moves: bool = True) -> list[Move]:
    """All legal moves for the side to move.

    Black's moves are ordered by destination file, then rank. White's queen
    moves come before king moves.
    """
    board = position.board
    side = position.side_to_move

    if side == Color.BLACK:
        pieces = (PieceKind.BLACK_KING,)
    elif allow_king_moves:
        pieces = (PieceKind.WHITE_QUEEN, PieceKind.WHITE_KING)
    else:
        pieces = (PieceKind.WHITE_QUEEN,)

    moves: list[Move] = []
    for piece in pieces:
        from_sq = board.square_of(piece)
        if piece.is_king:
            targets = KING_TARGETS[from_sq]
        else:
            targets = tuple(board.reachable(piece))
        for to_sq in sorted(targets, key=square_order_key):
            move = Move(piece, from_sq, to_sq)
            if check_move(position, move, side, allow_king_moves=allow_king_moves) is None:
                moves.append(move)
    return moves
