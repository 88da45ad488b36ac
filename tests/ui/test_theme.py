"""Tests for board theme presets."""

from __future__ import annotations

import pytest
from PyQt6.QtGui import QColor

from chessgrip.core.enums import Color
from chessgrip.ui.styles.theme import THEMES, BoardTheme, theme_by_name


def test_classic_piece_fills() -> None:
    theme = BoardTheme.classic()
    assert theme.piece_fill(Color.WHITE) == QColor(0xFF, 0xFF, 0xFF)
    assert theme.piece_fill(Color.BLACK) == QColor(0x33, 0x33, 0x33)
    assert theme.selected_piece == QColor(0xFF, 0x00, 0x00)


def test_selection_colour_differs_from_resting_fills() -> None:
    for theme in THEMES.values():
        assert theme.selected_piece != theme.piece_fill(Color.WHITE)
        assert theme.selected_piece != theme.piece_fill(Color.BLACK)


def test_theme_by_name_is_case_insensitive() -> None:
    assert theme_by_name("Studio") == BoardTheme.studio()


def test_theme_by_name_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown board theme"):
        theme_by_name("neon")
