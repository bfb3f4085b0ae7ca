"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chess_interactor.core.enums import Color, IllegalReason, OutcomeKind
from chess_interactor.core.errors import GameOverError, SetupError
from chess_interactor.core.legality import check_move
from chess_interactor.core.outcome import Outcome
from chess_interactor.core.rules import Rules
from chess_interactor.game.interfaces import GamePhase

if TYPE_CHECKING:
    from chess_interactor.core.move import Move
    from chess_interactor.core.position import Position


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    side: Color
    ply: int
    was_check: bool = False

    @property
    def notation(self) -> str:
        return self.move.notation


@dataclass
class GameState:
    """Owns the single mutable view of a match: position, phase, outcome.

    This is a pure data/logic class — no I/O, no adversary. White's move is
    classified in this order: abandoned queen, checkmate, stalemate, move
    budget. After Black's reply only the move budget can end the match.
    """

    position: Position
    move_limit: int
    allow_king_moves: bool = True
    phase: GamePhase = field(default=GamePhase.AWAITING_WHITE_MOVE, init=False)
    outcome: Outcome | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.move_limit <= 0:
            raise SetupError(f"Move limit must be positive, got {self.move_limit}")
        if self.position.side_to_move != Color.WHITE:
            raise SetupError("White must move first")
        self.position.board.validate()

    # ── Move application ─────────────────────────────────────────────────

    def check_white_move(self, move: Move) -> IllegalReason | None:
        return check_move(
            self.position, move, Color.WHITE, allow_king_moves=self.allow_king_moves
        )

    def apply_white_move(self, move: Move) -> MoveRecord:
        """Apply a validated White move and classify the result.

        Caller is responsible for legality check.
        """
        self._require_phase(GamePhase.AWAITING_WHITE_MOVE)
        record = self._push(move, Color.WHITE)

        kind = Rules.terminal_kind(self.position)
        if kind == OutcomeKind.QUEEN_ABANDONED:
            self.finish(Outcome.queen_abandoned())
        elif kind == OutcomeKind.CHECKMATE:
            self.finish(Outcome.checkmate(Color.WHITE))
        elif kind == OutcomeKind.STALEMATE:
            self.finish(Outcome.stalemate())
        elif self.budget_spent:
            self.finish(Outcome.move_limit_exceeded())
        else:
            self.phase = GamePhase.AWAITING_BLACK_REPLY
        return record

    def apply_black_move(self, move: Move) -> MoveRecord:
        """Apply the adversary's reply and re-check the move budget."""
        self._require_phase(GamePhase.AWAITING_BLACK_REPLY)
        record = self._push(move, Color.BLACK)

        if self.budget_spent:
            self.finish(Outcome.move_limit_exceeded())
        else:
            self.phase = GamePhase.AWAITING_WHITE_MOVE
        return record

    def finish(self, outcome: Outcome) -> None:
        """Fix the outcome. An outcome is set exactly once."""
        if self.outcome is not None:
            raise GameOverError(f"Match already ended: {self.outcome}")
        self.outcome = outcome
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return self.position.ply

    @property
    def moves_remaining(self) -> int:
        return max(0, self.move_limit - self.position.ply)

    @property
    def budget_spent(self) -> bool:
        return self.position.ply >= self.move_limit

    @property
    def white_moves_played(self) -> int:
        return sum(1 for record in self.move_history if record.side == Color.WHITE)

    # ── Internal ─────────────────────────────────────────────────────────

    def _require_phase(self, phase: GamePhase) -> None:
        if self.is_game_over:
            raise GameOverError(f"Match already ended: {self.outcome}")
        if self.phase != phase:
            raise RuntimeError(f"Expected phase {phase.name}, got {self.phase.name}")

    def _push(self, move: Move, side: Color) -> MoveRecord:
        self.position = self.position.after(move)
        record = MoveRecord(
            move=move,
            side=side,
            ply=self.position.ply,
            was_check=side == Color.WHITE and Rules.is_in_check(self.position),
        )
        self.move_history.append(record)
        return record
