"""Outcome value object — how a match ended."""

from __future__ import annotations

from dataclasses import dataclass

from chess_interactor.core.enums import Color, IllegalReason, OutcomeKind


@dataclass(frozen=True, slots=True)
class Outcome:
    """Immutable terminal classification of a match."""

    kind: OutcomeKind
    winner: Color | None = None
    side: Color | None = None
    reason: IllegalReason | None = None
    detail: str = ""

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def checkmate(cls, winner: Color = Color.WHITE) -> Outcome:
        return cls(OutcomeKind.CHECKMATE, winner=winner)

    @classmethod
    def stalemate(cls) -> Outcome:
        return cls(OutcomeKind.STALEMATE)

    @classmethod
    def illegal_move(cls, side: Color, reason: IllegalReason, detail: str = "") -> Outcome:
        return cls(
            OutcomeKind.ILLEGAL_MOVE,
            winner=side.opposite,
            side=side,
            reason=reason,
            detail=detail,
        )

    @classmethod
    def move_limit_exceeded(cls) -> Outcome:
        return cls(OutcomeKind.MOVE_LIMIT_EXCEEDED)

    @classmethod
    def queen_abandoned(cls) -> Outcome:
        return cls(
            OutcomeKind.QUEEN_ABANDONED,
            detail="white queen moved next to the black king without white king protection",
        )

    @classmethod
    def protocol_error(cls, detail: str) -> Outcome:
        return cls(OutcomeKind.PROTOCOL_ERROR, winner=Color.BLACK, side=Color.WHITE, detail=detail)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def white_wins(self) -> bool:
        return self.kind == OutcomeKind.CHECKMATE and self.winner == Color.WHITE

    def __str__(self) -> str:
        if self.kind == OutcomeKind.CHECKMATE:
            return f"checkmate ({self.winner} wins)"
        if self.kind == OutcomeKind.ILLEGAL_MOVE:
            text = f"illegal {self.side} move: {self.reason}"
            return f"{text} ({self.detail})" if self.detail else text
        if self.detail:
            return f"{self.kind}: {self.detail}"
        return str(self.kind)
