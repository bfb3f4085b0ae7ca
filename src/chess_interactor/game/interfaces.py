"""Game-layer enums and the controller interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chess_interactor.core.move import Move
    from chess_interactor.core.outcome import Outcome
    from chess_interactor.core.position import Position


# ── Match phase FSM states ───────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of a match."""

    AWAITING_WHITE_MOVE = auto()
    AWAITING_BLACK_REPLY = auto()  # adversary is computing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IMatchController(ABC):
    """Interface for the match orchestrator."""

    @abstractmethod
    def new_match(
        self,
        position: Position,
        move_limit: int,
        *,
        allow_king_moves: bool = True,
    ) -> None:
        """Set up a new match from a validated starting position."""

    @abstractmethod
    def submit_white_move(self, move: Move) -> Move | None:
        """Play White's *move*; return Black's reply, or ``None`` if White's move ended the match."""

    @abstractmethod
    def abort(self, outcome: Outcome) -> None:
        """End the match with an outcome decided outside the engine."""
