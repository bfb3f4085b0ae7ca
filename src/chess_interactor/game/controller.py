"""MatchController — the central orchestrator of a match.

Coordinates: GameState, legality checks, the adversary policy.
Emits events via simple callbacks so the protocol session / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chess_interactor.core.enums import Color
from chess_interactor.core.errors import GameOverError, PolicyPreconditionError
from chess_interactor.core.legality import check_move
from chess_interactor.core.outcome import Outcome
from chess_interactor.engine import DefaultAdversary, IAdversary, SearchLimits
from chess_interactor.game.interfaces import GamePhase, IMatchController
from chess_interactor.game.state import GameState, MoveRecord

if TYPE_CHECKING:
    from chess_interactor.core.move import Move
    from chess_interactor.core.position import Position

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[Outcome], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class MatchController(IMatchController):
    """Orchestrates a full match: validates White's moves, asks the adversary
    for Black's replies, notifies listeners.

    Everything runs synchronously on the caller's thread; one White move is
    processed to completion before the next one is accepted.
    """

    __slots__ = ("_state", "_adversary", "_search_depth", "events")

    def __init__(self, adversary: IAdversary | None = None, *, search_depth: int = 3) -> None:
        self._adversary: IAdversary = adversary if adversary is not None else DefaultAdversary()
        self._search_depth = search_depth
        self._state: GameState | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("No match in progress; call new_match() first")
        return self._state

    @property
    def outcome(self) -> Outcome | None:
        return self.state.outcome

    @property
    def limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self._search_depth, move_limit=self.state.move_limit)

    # ── IMatchController impl ────────────────────────────────────────────

    def new_match(
        self,
        position: Position,
        move_limit: int,
        *,
        allow_king_moves: bool = True,
    ) -> None:
        self._state = GameState(position, move_limit, allow_king_moves)
        _LOGGER.debug("New match: %s, budget %d half-moves", position, move_limit)
        self._emit_phase(GamePhase.AWAITING_WHITE_MOVE)

    def submit_white_move(self, move: Move) -> Move | None:
        state = self.state
        if state.is_game_over:
            raise GameOverError(f"Match already ended: {state.outcome}")

        reason = state.check_white_move(move)
        if reason is not None:
            _LOGGER.debug("Rejected white move %s: %s", move, reason)
            state.finish(Outcome.illegal_move(Color.WHITE, reason, detail=str(move)))
            self._emit_game_over()
            return None

        record = state.apply_white_move(move)
        self._emit_move(record)
        if state.is_game_over:
            self._emit_game_over()
            return None

        self._emit_phase(GamePhase.AWAITING_BLACK_REPLY)
        reply = self._adversary.choose(state.position, self.limits).best_move
        if check_move(state.position, reply, Color.BLACK) is not None:
            raise PolicyPreconditionError(f"Adversary produced an illegal move: {reply}")

        record = state.apply_black_move(reply)
        self._emit_move(record)
        if state.is_game_over:
            self._emit_game_over()
        else:
            self._emit_phase(GamePhase.AWAITING_WHITE_MOVE)
        return reply

    def abort(self, outcome: Outcome) -> None:
        self.state.finish(outcome)
        self._emit_game_over()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self.state)

    def _emit_game_over(self) -> None:
        outcome = self.state.outcome
        assert outcome is not None
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
