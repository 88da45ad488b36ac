"""Game layer — selection controller, move executor, owned state.

Quick start::

    from chessgrip.core import Coordinate
    from chessgrip.game import PickResult, SelectionController

    ctrl = SelectionController()
    ctrl.handle_pick(PickResult.of_cell(Coordinate.parse("e2")))  # SELECTED
    ctrl.handle_pick(PickResult.of_cell(Coordinate.parse("e4")))  # MOVED
"""

from chessgrip.game.controller import ControllerEvents, SelectionController
from chessgrip.game.executor import MoveExecutor, PieceNotOnBoardError
from chessgrip.game.interfaces import (
    ClickOutcome,
    NullSink,
    PickingSource,
    PickKind,
    PickResult,
    SelectionPhase,
    VisualSink,
)
from chessgrip.game.state import GameState

__all__ = [
    # Interfaces
    "ClickOutcome",
    "NullSink",
    "PickKind",
    "PickResult",
    "PickingSource",
    "SelectionPhase",
    "VisualSink",
    # Concrete
    "ControllerEvents",
    "GameState",
    "MoveExecutor",
    "PieceNotOnBoardError",
    "SelectionController",
]
