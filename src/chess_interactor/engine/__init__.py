"""Adversary policies for the black king."""

from chess_interactor.engine.minimax import MinimaxAdversary
from chess_interactor.engine.scan_order import ScanOrderAdversary
from chess_interactor.engine.search import IAdversary, SearchLimits, SearchResult

DefaultAdversary: type[IAdversary] = MinimaxAdversary

POLICIES: dict[str, type[IAdversary]] = {
    "minimax": MinimaxAdversary,
    "scan-order": ScanOrderAdversary,
}


def make_adversary(name: str, *, allow_king_moves: bool = True) -> IAdversary:
    """Instantiate the policy registered under *name*."""
    try:
        policy_cls = POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown adversary policy: {name!r}") from None
    if policy_cls is MinimaxAdversary:
        return MinimaxAdversary(allow_king_moves=allow_king_moves)
    return policy_cls()


__all__ = [
    "DefaultAdversary",
    "IAdversary",
    "MinimaxAdversary",
    "POLICIES",
    "ScanOrderAdversary",
    "SearchLimits",
    "SearchResult",
    "make_adversary",
]
