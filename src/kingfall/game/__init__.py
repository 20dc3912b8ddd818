"""Game management layer - session state and controller.

Quick start::

    from kingfall.game import GameController
    from kingfall.core import parse_square

    ctrl = GameController()
    ctrl.click(parse_square("e2"))
    ctrl.click(parse_square("e4"))
"""

from kingfall.game.controller import GameController, GameEvents
from kingfall.game.state import GameState, MoveRecord

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
