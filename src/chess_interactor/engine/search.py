"""Shared adversary search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chess_interactor.core.move import Move
    from chess_interactor.core.position import Position


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single black reply.

    Attributes:
        max_depth: Look-ahead cap in half-moves after Black's reply.
        move_limit: Half-move budget of the match; the search never looks
            past it. ``None`` means unbounded.
    """

    max_depth: int = 3
    move_limit: int | None = None

    def horizon(self, position: Position) -> int:
        """Half-moves White still has after Black replies in *position*."""
        if self.move_limit is None:
            return self.max_depth
        remaining = self.move_limit - (position.ply + 1)
        return max(0, min(self.max_depth, remaining))


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an adversary.

    ``mate_in`` is the number of half-moves White needs to mate after
    ``best_move`` under best play, or ``None`` when no mate was found
    within ``depth``.
    """

    best_move: Move
    mate_in: int | None
    depth: int
    nodes: int


class IAdversary(Protocol):
    """Protocol for Black-king move selection policies."""

    def choose(self, position: Position, limits: SearchLimits) -> SearchResult: ...
