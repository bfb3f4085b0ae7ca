"""Game management layer — state machine and match controller.

Quick start::

    from chess_interactor.game import MatchController

    ctrl = MatchController()
    ctrl.new_match(position, move_limit=100)
    reply = ctrl.submit_white_move(move)
"""

from chess_interactor.game.controller import GameEvents, MatchController
from chess_interactor.game.interfaces import GamePhase, IMatchController
from chess_interactor.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IMatchController",
    # Concrete
    "GameEvents",
    "GameState",
    "MatchController",
    "MoveRecord",
]
