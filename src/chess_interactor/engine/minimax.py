"""Bounded minimax for the defending king.

Black picks the reply after which White needs the most half-moves to
deliver mate. White lines that stalemate or abandon the queen are not wins
for White and count as survival. Scores are measured in half-moves from the
node being evaluated; ``_NO_MATE`` marks "no mate within the horizon".
"""

from __future__ import annotations

import logging

from chess_interactor.core.board import Board
from chess_interactor.core.enums import Color, OutcomeKind
from chess_interactor.core.errors import PolicyPreconditionError
from chess_interactor.core.legality import legal_moves
from chess_interactor.core.position import Position
from chess_interactor.core.rules import Rules
from chess_interactor.engine.search import IAdversary, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_NO_MATE = 1_000_000


class _Search:
    """State of a single :meth:`MinimaxAdversary.choose` call."""

    __slots__ = ("_allow_king_moves", "_memo", "nodes")

    def __init__(self, allow_king_moves: bool) -> None:
        self._allow_king_moves = allow_king_moves
        self._memo: dict[tuple[Board, Color, int], int] = {}
        self.nodes = 0

    def white_to_mate(self, position: Position, depth: int) -> int:
        """Fewest half-moves White needs to mate from *position* (White to move)."""
        if depth <= 0:
            return _NO_MATE

        key = (position.board, position.side_to_move, depth)
        cached = self._memo.get(key)
        if cached is not None:
            return cached

        self.nodes += 1
        best = _NO_MATE
        for move in legal_moves(position, allow_king_moves=self._allow_king_moves):
            child = position.after(move)
            kind = Rules.terminal_kind(child)
            if kind == OutcomeKind.CHECKMATE:
                best = 1
                break
            if kind is not None or depth < 3:
                continue
            reply = self.black_to_survive(child, depth - 1)
            if reply < _NO_MATE:
                best = min(best, 1 + reply)

        self._memo[key] = best
        return best

    def black_to_survive(self, position: Position, depth: int) -> int:
        """Most half-moves Black can hold out from *position* (Black to move)."""
        key = (position.board, position.side_to_move, depth)
        cached = self._memo.get(key)
        if cached is not None:
            return cached

        self.nodes += 1
        worst = 0
        for move in Rules.black_moves(position):
            score = self.white_to_mate(position.after(move), depth - 1)
            if score >= _NO_MATE:
                worst = _NO_MATE
                break
            worst = max(worst, 1 + score)

        self._memo[key] = worst
        return worst


class MinimaxAdversary(IAdversary):
    """Defends by maximising the distance to mate within the move budget.

    Among equally good replies the one with the smallest destination
    ``(file, rank)`` is chosen, so the policy is fully deterministic.
    """

    __slots__ = ("_allow_king_moves",)

    def __init__(self, *, allow_king_moves: bool = True) -> None:
        self._allow_king_moves = allow_king_moves

    def choose(self, position: Position, limits: SearchLimits) -> SearchResult:
        if position.side_to_move != Color.BLACK:
            raise PolicyPreconditionError(f"Black is not to move: {position}")
        candidates = Rules.black_moves(position)
        if not candidates:
            raise PolicyPreconditionError(f"Black has no legal move: {position}")

        depth = limits.horizon(position)
        search = _Search(self._allow_king_moves)
        best_move = candidates[0]
        best_score = -1

        for move in candidates:
            score = search.white_to_mate(position.after(move), depth)
            _LOGGER.debug("Black %s: mate in %s", move.notation, score)
            if score > best_score:
                best_score = score
                best_move = move
            if best_score >= _NO_MATE:
                break

        mate_in = None if best_score >= _NO_MATE else best_score
        return SearchResult(best_move, mate_in, depth, search.nodes)
