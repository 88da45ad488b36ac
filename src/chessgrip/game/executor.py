"""MoveExecutor — applies an already-validated move to the board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessgrip.core.board import BoardGrid
    from chessgrip.core.piece import Piece
    from chessgrip.core.types import Coordinate
    from chessgrip.game.interfaces import VisualSink

_LOGGER = logging.getLogger(__name__)


class PieceNotOnBoardError(ValueError):
    """The piece asked to move does not stand on its source cell."""


class MoveExecutor:
    """Performs capture removal and board/piece mutation for one move.

    Only called after :class:`~chessgrip.core.rules.MoveValidator` said
    yes, so there is no rollback path: either the preconditions hold and
    the whole move happens, or :class:`PieceNotOnBoardError` is raised
    before anything changes.
    """

    __slots__ = ("_board", "_sink")

    def __init__(self, board: BoardGrid, sink: VisualSink) -> None:
        self._board = board
        self._sink = sink

    def execute(self, piece: Piece, src: Coordinate, dst: Coordinate) -> Piece | None:
        """Move *piece* from *src* to *dst*; return the captured piece, if any."""
        if self._board.piece_at(src) is not piece:
            raise PieceNotOnBoardError(f"{piece.label} is not on {src}")

        captured = self._board.remove(dst)
        if captured is not None:
            captured.is_selected = False
            _LOGGER.info("%s captured on %s", captured.label, dst)
            self._sink.on_capture_removed(captured)

        self._board.place(src, None)
        self._board.place(dst, piece)
        piece.coordinate = dst
        _LOGGER.info("%s %s moved %s -> %s", piece.color, piece.piece_type, src, dst)
        self._sink.on_piece_moved(piece, dst)
        return captured
