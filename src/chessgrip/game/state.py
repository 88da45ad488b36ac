"""GameState — the board and the current selection, owned together."""

from __future__ import annotations

from chessgrip.core.board import BoardGrid
from chessgrip.core.piece import Piece
from chessgrip.game.interfaces import SelectionPhase


class GameState:
    """Mutable state shared by the controller chain.

    ``selected`` is a plain back-reference to a piece that lives on
    ``board``; the board alone decides the piece's lifetime.
    """

    __slots__ = ("board", "selected")

    def __init__(self, board: BoardGrid | None = None) -> None:
        self.board = board if board is not None else BoardGrid.initial()
        self.selected: Piece | None = None

    @classmethod
    def from_placement(cls, placement: str) -> GameState:
        return cls(BoardGrid.from_placement(placement))

    def setup(self, placement: str | None = None) -> None:
        """Reset to the starting layout (or *placement*) with no selection."""
        if placement is None:
            self.board = BoardGrid.initial()
        else:
            self.board = BoardGrid.from_placement(placement)
        self.selected = None

    @property
    def phase(self) -> SelectionPhase:
        if self.selected is None:
            return SelectionPhase.IDLE
        return SelectionPhase.PIECE_SELECTED

    def selected_pieces(self) -> list[Piece]:
        """Every piece whose selection flag is set (at most one)."""
        return [piece for _, piece in self.board if piece.is_selected]

    def __repr__(self) -> str:
        sel = self.selected.label if self.selected is not None else "none"
        return f"GameState(selected={sel})\n{self.board!r}"
