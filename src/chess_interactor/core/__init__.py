"""Core domain layer — pure king-and-queen endgame logic without I/O.

Quick start::

    from chess_interactor.core import Position, legal_moves, parse_square

    pos = Position.setup(parse_square("e1"), parse_square("a1"), parse_square("h1"))
    for move in legal_moves(pos):
        print(move)
"""

from chess_interactor.core.board import Board, attacks, reachable
from chess_interactor.core.enums import Color, IllegalReason, OutcomeKind, PieceKind
from chess_interactor.core.errors import (
    GameOverError,
    InteractorError,
    PolicyPreconditionError,
    ProtocolError,
    SetupError,
)
from chess_interactor.core.legality import check_move, is_legal, legal_moves
from chess_interactor.core.move import Move
from chess_interactor.core.outcome import Outcome
from chess_interactor.core.position import Position
from chess_interactor.core.rules import Rules
from chess_interactor.core.types import (
    Square,
    chebyshev_distance,
    file_of,
    is_adjacent,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "IllegalReason",
    "OutcomeKind",
    "PieceKind",
    # Errors
    "GameOverError",
    "InteractorError",
    "PolicyPreconditionError",
    "ProtocolError",
    "SetupError",
    # Types / helpers
    "Square",
    "chebyshev_distance",
    "file_of",
    "is_adjacent",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Outcome",
    "Position",
    "Rules",
    # Board model / legality
    "attacks",
    "reachable",
    "check_move",
    "is_legal",
    "legal_moves",
]
