"""Interfaces between the selection core and its collaborators.

The controller depends on these protocols, not on the Qt scene that
implements them, so the whole core runs (and is tested) headless.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from chessgrip.core.board import BoardGrid
    from chessgrip.core.enums import Color
    from chessgrip.core.piece import Piece
    from chessgrip.core.types import Coordinate


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the selection controller."""

    IDLE = auto()
    PIECE_SELECTED = auto()


class ClickOutcome(IntEnum):
    """What a single pick did to the game state."""

    IGNORED = auto()  # nothing picked, or an empty cell with no selection
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
    CAPTURED = auto()  # a move that removed an enemy piece
    REJECTED = auto()  # illegal move attempt, selection kept


# ── Pick results ─────────────────────────────────────────────────────────────


class PickKind(IntEnum):
    NOTHING = 0
    PIECE = auto()
    CELL = auto()


@dataclass(frozen=True, slots=True)
class PickResult:
    """Resolved pointer event: a piece handle, a bare cell, or nothing."""

    kind: PickKind
    piece: Piece | None = None
    coordinate: Coordinate | None = None

    @classmethod
    def of_piece(cls, piece: Piece) -> PickResult:
        return cls(PickKind.PIECE, piece=piece)

    @classmethod
    def of_cell(cls, coordinate: Coordinate) -> PickResult:
        return cls(PickKind.CELL, coordinate=coordinate)

    @classmethod
    def nothing(cls) -> PickResult:
        return cls(PickKind.NOTHING)

    def resolve(self, board: BoardGrid) -> tuple[Coordinate, Piece | None] | None:
        """Target cell and its occupant, or ``None`` for an empty pick."""
        if self.kind == PickKind.PIECE and self.piece is not None:
            # A captured piece keeps its last coordinate but is off the board.
            if board.piece_at(self.piece.coordinate) is not self.piece:
                return None
            return self.piece.coordinate, self.piece
        if self.kind == PickKind.CELL and self.coordinate is not None:
            return self.coordinate, board.piece_at(self.coordinate)
        return None


# ── Collaborator protocols ───────────────────────────────────────────────────


class PickingSource(Protocol):
    """Turns a pointer event into a :class:`PickResult`.

    Implementations range-check positions; coordinates they hand out are
    always on the board.
    """

    def resolve_click(self, event_pos: Any) -> PickResult: ...


class VisualSink(Protocol):
    """Receives notifications after each legal state transition."""

    def on_select(self, piece: Piece) -> None: ...

    def on_deselect(self, piece: Piece, restored_color: Color) -> None: ...

    def on_capture_removed(self, piece: Piece) -> None: ...

    def on_piece_moved(self, piece: Piece, new_coordinate: Coordinate) -> None: ...


class NullSink:
    """Visual sink that ignores every notification."""

    def on_select(self, piece: Piece) -> None:
        pass

    def on_deselect(self, piece: Piece, restored_color: Color) -> None:
        pass

    def on_capture_removed(self, piece: Piece) -> None:
        pass

    def on_piece_moved(self, piece: Piece, new_coordinate: Coordinate) -> None:
        pass
