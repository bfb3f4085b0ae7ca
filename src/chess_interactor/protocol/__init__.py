"""Protocol adapter — text lines in, text lines out."""

from chess_interactor.protocol.notation import (
    WhiteMoveLine,
    format_black_move,
    format_board,
    parse_initial_position,
    parse_protocol_square,
    parse_white_move,
)
from chess_interactor.protocol.session import InteractorSession
from chess_interactor.protocol.verdict import ExitCode, Verdict

__all__ = [
    "ExitCode",
    "InteractorSession",
    "Verdict",
    "WhiteMoveLine",
    "format_black_move",
    "format_board",
    "parse_initial_position",
    "parse_protocol_square",
    "parse_white_move",
]
