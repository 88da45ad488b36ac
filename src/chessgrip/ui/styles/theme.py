"""Visual theme constants and QSS styles for chessgrip."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from chessgrip.core.enums import Color


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and the pieces standing on it."""

    light_square: QColor
    dark_square: QColor
    white_piece: QColor  # resting fill, restored exactly on deselect
    black_piece: QColor
    white_glyph: QColor
    black_glyph: QColor
    piece_outline: QColor
    selected_piece: QColor  # fill while picked up
    highlight_from: QColor  # cell under the selected piece
    highlight_to: QColor  # legal move targets
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    shadow_offset: float = 0.0  # 0 disables the drop shadow under pieces

    def piece_fill(self, color: Color) -> QColor:
        return self.white_piece if color == Color.WHITE else self.black_piece

    def glyph_fill(self, color: Color) -> QColor:
        return self.white_glyph if color == Color.WHITE else self.black_glyph

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.classic()

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(0, 0, 0),
            white_piece=QColor(0xFF, 0xFF, 0xFF),
            black_piece=QColor(0x33, 0x33, 0x33),
            white_glyph=QColor(0x33, 0x33, 0x33),
            black_glyph=QColor(0xEE, 0xEE, 0xEE),
            piece_outline=QColor(128, 128, 128),
            selected_piece=QColor(0xFF, 0x00, 0x00),  # red
            highlight_from=QColor(255, 0, 0, 70),
            highlight_to=QColor(0, 160, 255, 90),
            coord_light=QColor(160, 160, 160),
            coord_dark=QColor(96, 96, 96),
            shadow_offset=3.0,
        )

    @classmethod
    def studio(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            white_piece=QColor(0xEE, 0xEE, 0xEE),
            black_piece=QColor(0x55, 0x55, 0x55),
            white_glyph=QColor(0x55, 0x55, 0x55),
            black_glyph=QColor(0xEE, 0xEE, 0xEE),
            piece_outline=QColor(40, 40, 40),
            selected_piece=QColor(0xFF, 0x00, 0x00),
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark dot overlay
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )


THEMES: dict[str, BoardTheme] = {
    "classic": BoardTheme.classic(),
    "studio": BoardTheme.studio(),
}


def theme_by_name(name: str) -> BoardTheme:
    """Look up a preset; unknown names raise ``ValueError``."""
    try:
        return THEMES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(THEMES))
        raise ValueError(f"Unknown board theme {name!r} (known: {known})") from None


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QStatusBar {
    background: #1e1e1e;
    color: #d4d4d4;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
