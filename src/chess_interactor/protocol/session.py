"""Line-based session between the judge and the contestant's program."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from chess_interactor.core.enums import OutcomeKind
from chess_interactor.core.errors import ProtocolError
from chess_interactor.core.outcome import Outcome
from chess_interactor.protocol.notation import (
    format_black_move,
    format_board,
    parse_white_move,
)
from chess_interactor.protocol.verdict import Verdict

if TYPE_CHECKING:
    from chess_interactor.core.position import Position
    from chess_interactor.game.controller import MatchController

_LOGGER = logging.getLogger(__name__)
GAME_LOG = logging.getLogger("chess_interactor.game_log")


class InteractorSession:
    """Drives one match over a pair of text streams.

    The session owns all I/O: it writes the initial position, reads one
    White move per line, and writes Black's replies. The engine behind the
    controller never sees malformed input.
    """

    __slots__ = ("_controller", "_reader", "_writer")

    def __init__(self, controller: MatchController, reader: TextIO, writer: TextIO) -> None:
        self._controller = controller
        self._reader = reader
        self._writer = writer

    def play(
        self,
        position: Position,
        move_limit: int,
        *,
        allow_king_moves: bool = True,
    ) -> Verdict:
        ctrl = self._controller
        ctrl.new_match(position, move_limit, allow_king_moves=allow_king_moves)
        self._send(format_board(position.board))

        claimed_mate = False
        while not ctrl.state.is_game_over:
            line = self._reader.readline()
            if not line:
                ctrl.abort(Outcome.protocol_error("input ended before the match was decided"))
                break
            line = line.strip()
            GAME_LOG.info("%s", line)

            try:
                parsed = parse_white_move(line, ctrl.state.position)
            except ProtocolError as exc:
                _LOGGER.debug("Malformed line %r: %s", line, exc.message)
                ctrl.abort(Outcome.protocol_error(str(exc)))
                break

            claimed_mate = parsed.claims_mate
            reply = ctrl.submit_white_move(parsed.move)
            if reply is not None:
                self._send(format_black_move(reply))

        state = ctrl.state
        outcome = state.outcome
        assert outcome is not None
        if outcome.kind == OutcomeKind.CHECKMATE and not claimed_mate:
            outcome = Outcome.protocol_error("no checkmate when expected")

        return Verdict(outcome, state.white_moves_played, state.ply_count)

    def _send(self, line: str) -> None:
        self._writer.write(line + "\n")
        self._writer.flush()
        GAME_LOG.info("%s", line)
