"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from chessgrip.core.enums import Color
from chessgrip.core.piece import Piece
from chessgrip.core.types import Coordinate

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


class RecordingSink:
    """Visual sink that records every notification as a tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, ...]] = []

    def on_select(self, piece: Piece) -> None:
        self.calls.append(("select", piece))

    def on_deselect(self, piece: Piece, restored_color: Color) -> None:
        self.calls.append(("deselect", piece, restored_color))

    def on_capture_removed(self, piece: Piece) -> None:
        self.calls.append(("capture", piece))

    def on_piece_moved(self, piece: Piece, new_coordinate: Coordinate) -> None:
        self.calls.append(("moved", piece, new_coordinate))

    def names(self) -> list[object]:
        return [call[0] for call in self.calls]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
