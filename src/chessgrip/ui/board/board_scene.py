"""BoardScene — QGraphicsScene that draws the board and turns clicks into picks.

The scene plays both outer roles of the selection core: it resolves mouse
presses into :class:`~chessgrip.game.interfaces.PickResult` values and it
receives the controller's visual notifications.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgrip.core.enums import Color
from chessgrip.core.piece import Piece
from chessgrip.core.rules import MoveValidator
from chessgrip.core.types import BOARD_SIZE, Coordinate, all_coordinates, is_on_board
from chessgrip.game.interfaces import PickResult
from chessgrip.ui.board.piece_item import PieceItem
from chessgrip.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chessgrip.game.controller import SelectionController
    from chessgrip.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items."""

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller: SelectionController | None = None
        self._flipped = False

        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        # Piece id → visual item
        self._piece_items: dict[int, PieceItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def attach(self, controller: SelectionController) -> None:
        """Become *controller*'s visual sink and mirror its board."""
        self._controller = controller
        controller.set_sink(self)
        controller.events.on_reset.append(self.set_state)
        self.set_state(controller.state)

    def set_state(self, state: GameState) -> None:
        """Rebuild every piece item from *state* (full redraw of pieces)."""
        self._clear_selection_marks()
        self._sync_pieces(state)
        if state.selected is not None:
            self.on_select(state.selected)

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)
        elif self._controller is not None and self._controller.selected is not None:
            self.on_select(self._controller.selected)

    def piece_item(self, piece_id: int) -> PieceItem | None:
        return self._piece_items.get(piece_id)

    # ── Picking ──────────────────────────────────────────────────────────

    def resolve_click(self, event_pos: QPointF) -> PickResult:
        """Scene position → piece handle, bare cell, or nothing."""
        controller = self._controller
        board = controller.state.board if controller is not None else None
        for item in self.items(event_pos):
            root = item.topLevelItem()
            if isinstance(root, PieceItem) and board is not None:
                piece = board.find(root.piece_id)
                if piece is not None:
                    return PickResult.of_piece(piece)
        coord = self._pos_to_square(event_pos)
        if coord is None:
            return PickResult.nothing()
        return PickResult.of_cell(coord)

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            not self._interactive
            or self._controller is None
            or event is None
            or event.button() != Qt.MouseButton.LeftButton
        ):
            return super().mousePressEvent(event)

        result = self.resolve_click(event.scenePos())
        self._controller.handle_pick(result)
        event.accept()

    # ── Visual sink ──────────────────────────────────────────────────────

    def on_select(self, piece: Piece) -> None:
        item = self._piece_items.get(piece.id)
        if item is not None:
            item.set_fill(self._theme.selected_piece)

        self._clear_selection_marks()
        rect = self._make_highlight(piece.coordinate, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._show_legal_moves and self._controller is not None:
            board = self._controller.state.board
            for dst in MoveValidator.legal_destinations(piece, board):
                dot = self._make_highlight(dst, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def on_deselect(self, piece: Piece, restored_color: Color) -> None:
        item = self._piece_items.get(piece.id)
        if item is not None:
            item.set_fill(self._theme.piece_fill(restored_color))
        self._clear_selection_marks()

    def on_capture_removed(self, piece: Piece) -> None:
        item = self._piece_items.pop(piece.id, None)
        if item is not None:
            self.removeItem(item)
        else:
            _LOGGER.warning("No visual item for captured %s", piece.label)

    def on_piece_moved(self, piece: Piece, new_coordinate: Coordinate) -> None:
        item = self._piece_items.get(piece.id)
        if item is None:
            _LOGGER.warning("No visual item for moved %s", piece.label)
            return
        self._place_item(item, new_coordinate)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        if self._controller is not None:
            self.set_state(self._controller.state)

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for coord in all_coordinates():
            f, r = coord
            vf, vr = self._visual_coords(f, r)
            is_light = (f + r) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[coord] = rect

            # Rank numbers (left edge)
            if f == 0:
                self._add_label(str(r + 1), font, is_light, vf * t + 2, vr * t + 1)

            # File letters (bottom edge)
            if r == 0:
                self._add_label(
                    chr(ord("a") + f), font, is_light, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_label(
        self, text: str, font: QFont, on_light: bool, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(
            QBrush(self._theme.coord_dark if on_light else self._theme.coord_light)
        )
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self, state: GameState) -> None:
        """Re-create all piece items from the board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        for coord, piece in state.board:
            item = PieceItem(piece, t)
            item.set_fill(self._theme.piece_fill(piece.color))
            item.set_glyph_color(self._theme.glyph_fill(piece.color))
            item.set_outline(self._theme.piece_outline)
            item.set_shadow(self._theme.shadow_offset)
            self._place_item(item, coord)
            self.addItem(item)
            self._piece_items[piece.id] = item

    def _place_item(self, item: PieceItem, coord: Coordinate) -> None:
        t = self.TILE
        vf, vr = self._visual_coords(coord.file, coord.rank)
        item.setPos(vf * t + item.margin, vr * t + item.margin)

    # ── Selection / highlights ───────────────────────────────────────────

    def _clear_selection_marks(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board cell, ``None`` off the board."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not is_on_board(col, row):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return Coordinate(f, r)

    def _make_highlight(self, coord: Coordinate, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(coord.file, coord.rank)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
