"""PieceItem — a round piece token on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGraphicsEllipseItem,
    QGraphicsSimpleTextItem,
)

from chessgrip.core.piece import Piece


class PieceItem(QGraphicsEllipseItem):
    """Visual node of a single piece.

    The item knows only the logical piece's *id*; the scene maps ids back
    to :class:`~chessgrip.core.piece.Piece` records.
    """

    _MARGIN_RATIO = 0.08

    def __init__(self, piece: Piece, tile_size: int) -> None:
        super().__init__()
        self.piece_id = piece.id
        self._tile_size = tile_size
        self._glyph = QGraphicsSimpleTextItem(piece.symbol, self)
        self._glyph.setAcceptedMouseButtons(Qt.MouseButton.NoButton)

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self._update_size(tile_size)

    @property
    def margin(self) -> float:
        """Inner margin to keep the token away from tile edges."""
        return self._tile_size * self._MARGIN_RATIO

    @property
    def fill(self) -> QColor:
        return self.brush().color()

    def set_fill(self, color: QColor) -> None:
        self.setBrush(QBrush(color))

    def set_glyph_color(self, color: QColor) -> None:
        self._glyph.setBrush(QBrush(color))

    def set_outline(self, color: QColor) -> None:
        self.setPen(QPen(color, 1.5))

    def set_shadow(self, offset: float) -> None:
        """Cast a soft drop shadow *offset* px down-right (0 removes it)."""
        if offset <= 0:
            self.setGraphicsEffect(None)
            return
        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(offset * 3)
        shadow.setOffset(QPointF(offset, offset))
        shadow.setColor(QColor(0, 0, 0, 140))
        self.setGraphicsEffect(shadow)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        diameter = max(float(size) - 2.0 * self.margin, 1.0)
        self.setRect(0.0, 0.0, diameter, diameter)

        font = QFont()
        font.setPixelSize(max(int(diameter * 0.62), 1))
        self._glyph.setFont(font)
        bounds = self._glyph.boundingRect()
        self._glyph.setPos(
            (diameter - bounds.width()) / 2.0,
            (diameter - bounds.height()) / 2.0,
        )
