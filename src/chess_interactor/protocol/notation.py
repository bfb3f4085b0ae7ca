"""Line notation spoken with the contestant's program.

Judge → contestant::

    e1 a1 h1        initial white king, white queen, black king
    Kh2             black king's reply after every non-final white move

Contestant → judge::

    Qa8             piece letter (K or Q) and destination square
    Qa2#            same, claiming that the move delivers mate
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chess_interactor.core.enums import PieceKind
from chess_interactor.core.errors import ProtocolError, SetupError
from chess_interactor.core.move import Move
from chess_interactor.core.position import Position
from chess_interactor.core.types import (
    FILE_NAMES,
    RANK_NAMES,
    Square,
    make_square,
    square_name,
)

if TYPE_CHECKING:
    from chess_interactor.core.board import Board

MATE_SUFFIX = "#"

_WHITE_PIECES: dict[str, PieceKind] = {
    "K": PieceKind.WHITE_KING,
    "Q": PieceKind.WHITE_QUEEN,
}


@dataclass(frozen=True, slots=True)
class WhiteMoveLine:
    """A parsed contestant line."""

    move: Move
    claims_mate: bool


def parse_protocol_square(text: str) -> Square:
    """Parse a square such as ``d2``; errors carry the protocol messages."""
    if len(text) != 2:
        raise ProtocolError("invalid length", text)
    if text[0] not in FILE_NAMES:
        raise ProtocolError("invalid column", text)
    if text[1] not in RANK_NAMES:
        raise ProtocolError("invalid row", text)
    return make_square(FILE_NAMES.index(text[0]), RANK_NAMES.index(text[1]))


def parse_piece(text: str) -> PieceKind:
    try:
        return _WHITE_PIECES[text]
    except KeyError:
        raise ProtocolError("invalid chess piece", text) from None


def parse_white_move(line: str, position: Position) -> WhiteMoveLine:
    """Parse a contestant line into a White move from *position*."""
    text = line.strip()
    if len(text) == 4 and text.endswith(MATE_SUFFIX):
        claims_mate = True
    elif len(text) == 3:
        claims_mate = False
    else:
        raise ProtocolError(
            "line is neither of length 3 nor length 4 with '#' at the end", text
        )

    try:
        piece = parse_piece(text[:1])
        to_sq = parse_protocol_square(text[1:3])
    except ProtocolError as exc:
        raise ProtocolError(exc.message, text) from None

    move = Move(piece, position.board.square_of(piece), to_sq)
    return WhiteMoveLine(move, claims_mate)


def format_black_move(move: Move) -> str:
    return move.notation


def format_board(board: Board) -> str:
    """Initial line: ``"<wk> <wq> <bk>"``."""
    return " ".join(
        square_name(sq) for sq in (board.white_king, board.white_queen, board.black_king)
    )


def parse_initial_position(text: str) -> Position:
    """Parse three whitespace-separated squares into a starting position.

    Raises:
        SetupError: missing or malformed squares, or an illegal placement.
    """
    names = ("white king", "white queen", "black king")
    tokens = text.split()
    if len(tokens) < len(names):
        missing = names[len(tokens)]
        raise SetupError(f"Unable to find the initial {missing} position")

    squares: list[Square] = []
    for name, token in zip(names, tokens):
        try:
            squares.append(parse_protocol_square(token))
        except ProtocolError as exc:
            raise SetupError(f"Unable to parse the initial {name} position: {exc}") from None
    return Position.setup(*squares)
