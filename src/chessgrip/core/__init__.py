"""Core domain layer — board grid, pieces and move legality.

Quick start::

    from chessgrip.core import BoardGrid, Coordinate, MoveValidator

    board = BoardGrid.initial()
    pawn = board.piece_at(Coordinate.parse("e2"))
    MoveValidator.is_legal_for(pawn, Coordinate.parse("e4"), board)  # True
"""

from chessgrip.core.board import STARTING_PLACEMENT, BoardGrid
from chessgrip.core.enums import Color, PieceType
from chessgrip.core.piece import Piece
from chessgrip.core.rules import MOVE_RULES, MoveValidator
from chessgrip.core.types import (
    BOARD_SIZE,
    Coordinate,
    all_coordinates,
    cells_between,
    is_on_board,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "all_coordinates",
    "cells_between",
    "is_on_board",
    # Domain objects
    "BoardGrid",
    "MOVE_RULES",
    "MoveValidator",
    "Piece",
    "STARTING_PLACEMENT",
]
