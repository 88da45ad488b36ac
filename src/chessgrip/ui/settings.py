"""User-configurable settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    # Game
    placement: str | None = None  # FEN piece placement, None = standard layout

    # Diagnostics
    log_level: str = "INFO"
