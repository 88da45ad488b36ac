"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessgrip.core.board import BoardGrid
from chessgrip.ui.settings import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="chessgrip",
        description="Pick up and move chess pieces with the mouse.",
    )
    ap.add_argument("--theme", default=None, help="Board theme: classic or studio")
    ap.add_argument(
        "--placement",
        default=None,
        help="Start from a FEN piece placement instead of the standard layout",
    )
    ap.add_argument(
        "--flip", action="store_true", help="View the board from black's side"
    )
    ap.add_argument(
        "--no-coordinates", action="store_true", help="Hide rank/file labels"
    )
    ap.add_argument(
        "--no-legal-moves", action="store_true", help="Do not mark legal target cells"
    )
    ap.add_argument(
        "--log-level", default=None, help="Python logging level (e.g., INFO, DEBUG)"
    )
    return ap


def settings_from_args(argv: list[str] | None = None) -> AppSettings:
    """Parse command-line options into :class:`AppSettings`.

    Invalid themes or placements exit through ``argparse`` with a usage
    error.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    settings = AppSettings()

    if args.theme is not None:
        from chessgrip.ui.styles.theme import THEMES

        if args.theme.lower() not in THEMES:
            known = ", ".join(THEMES)
            ap.error(f"unknown theme {args.theme!r} (choose from {known})")
        settings.board_theme = args.theme.lower()
    if args.placement is not None:
        try:
            BoardGrid.from_placement(args.placement)
        except ValueError as exc:
            ap.error(str(exc))
        settings.placement = args.placement
    if args.log_level is not None:
        settings.log_level = args.log_level.upper()

    settings.flipped = args.flip
    settings.show_coordinates = not args.no_coordinates
    settings.show_legal_moves = not args.no_legal_moves
    return settings


def configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO), format=LOG_FORMAT
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the chessgrip application."""
    from chessgrip.ui.bootstrap import run_application

    settings = settings_from_args(sys.argv[1:] if argv is None else argv)
    configure_logging(settings.log_level)
    sys.exit(run_application(settings, [sys.argv[0]]))


if __name__ == "__main__":
    main()
