"""Single-step heuristic policy without look-ahead."""

from __future__ import annotations

from chess_interactor.core.enums import Color
from chess_interactor.core.errors import PolicyPreconditionError
from chess_interactor.core.position import Position
from chess_interactor.core.rules import Rules
from chess_interactor.core.types import file_of, rank_of
from chess_interactor.engine.search import IAdversary, SearchLimits, SearchResult


class ScanOrderAdversary(IAdversary):
    """Takes the last safe square met when scanning rank by rank, file by file.

    This is the judge's historical behaviour: no search, just the highest
    ``(rank, file)`` destination among the legal replies.
    """

    __slots__ = ()

    def choose(self, position: Position, limits: SearchLimits) -> SearchResult:
        del limits
        if position.side_to_move != Color.BLACK:
            raise PolicyPreconditionError(f"Black is not to move: {position}")
        candidates = Rules.black_moves(position)
        if not candidates:
            raise PolicyPreconditionError(f"Black has no legal move: {position}")

        best_move = max(candidates, key=lambda m: (rank_of(m.to_sq), file_of(m.to_sq)))
        return SearchResult(best_move, None, 0, len(candidates))
