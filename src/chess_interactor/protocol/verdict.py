"""Mapping of match outcomes onto judge exit codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chess_interactor.core.enums import OutcomeKind
from chess_interactor.core.outcome import Outcome


class ExitCode(IntEnum):
    """Process exit codes understood by the contest harness."""

    OK = 0
    WRONG_ANSWER = 1
    PRESENTATION_ERROR = 2
    SETUP_FAILURE = 3


_EXIT_CODES: dict[OutcomeKind, ExitCode] = {
    OutcomeKind.CHECKMATE: ExitCode.OK,
    OutcomeKind.MOVE_LIMIT_EXCEEDED: ExitCode.WRONG_ANSWER,
    OutcomeKind.STALEMATE: ExitCode.WRONG_ANSWER,
    OutcomeKind.QUEEN_ABANDONED: ExitCode.WRONG_ANSWER,
    OutcomeKind.ILLEGAL_MOVE: ExitCode.PRESENTATION_ERROR,
    OutcomeKind.PROTOCOL_ERROR: ExitCode.PRESENTATION_ERROR,
}


@dataclass(frozen=True, slots=True)
class Verdict:
    """Final judgement of a session."""

    outcome: Outcome
    white_moves: int
    half_moves: int

    @property
    def exit_code(self) -> ExitCode:
        return _EXIT_CODES[self.outcome.kind]

    def __str__(self) -> str:
        return f"{self.outcome}. Moves: {self.white_moves}"
