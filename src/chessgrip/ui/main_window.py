"""MainWindow — top-level window assembling the board and its menus."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from chessgrip.core.piece import Piece
from chessgrip.game.controller import SelectionController
from chessgrip.game.interfaces import ClickOutcome
from chessgrip.game.state import GameState
from chessgrip.ui.board.board_scene import BoardScene
from chessgrip.ui.board.board_view import BoardView
from chessgrip.ui.settings import AppSettings
from chessgrip.ui.styles.theme import THEMES, theme_by_name

_STATUS_READY = "Click a piece to pick it up"


class MainWindow(QMainWindow):
    """Main application window for chessgrip."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chessgrip")
        self.setMinimumSize(480, 520)
        self.resize(760, 800)

        self._settings = settings if settings is not None else AppSettings()
        self._controller = SelectionController(
            GameState.from_placement(self._settings.placement)
            if self._settings.placement
            else GameState()
        )

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()

        self.board_scene.attach(self._controller)
        self._controller.events.on_outcome.append(self._on_outcome)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._board_view.board_scene

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView()
        self.setCentralWidget(self._board_view)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(_STATUS_READY)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_view.addAction(self._act_flip)

        self._act_coords = QAction("Show &Coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.toggled.connect(self._on_toggle_coordinates)
        self._menu_view.addAction(self._act_coords)

        self._act_legal = QAction("Show &Legal Moves", self)
        self._act_legal.setCheckable(True)
        self._act_legal.toggled.connect(self._on_toggle_legal_moves)
        self._menu_view.addAction(self._act_legal)

        self._menu_theme = self._menu_view.addMenu("&Theme")
        assert self._menu_theme is not None
        self._theme_group = QActionGroup(self)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEMES:
            act = QAction(name.title(), self)
            act.setCheckable(True)
            act.triggered.connect(lambda _checked, n=name: self._on_theme(n))
            self._theme_group.addAction(act)
            self._menu_theme.addAction(act)
            self._theme_actions[name] = act

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self.board_scene
        scene.set_theme(theme_by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

        self._act_coords.setChecked(s.show_coordinates)
        self._act_legal.setChecked(s.show_legal_moves)
        act = self._theme_actions.get(s.board_theme.lower())
        if act is not None:
            act.setChecked(True)

    # ── Actions ──────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.reset(self._settings.placement)
        self._set_status(_STATUS_READY)

    def _on_flip(self) -> None:
        self._settings.flipped = not self._settings.flipped
        self.board_scene.set_flipped(self._settings.flipped)

    def _on_toggle_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self.board_scene.set_show_coordinates(checked)

    def _on_toggle_legal_moves(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self.board_scene.set_show_legal_moves(checked)

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self.board_scene.set_theme(theme_by_name(name))

    # ── Controller events ────────────────────────────────────────────────

    def _on_outcome(self, outcome: ClickOutcome, piece: Piece | None) -> None:
        if piece is None:
            return
        messages = {
            ClickOutcome.SELECTED: f"Picked up {piece.label}",
            ClickOutcome.DESELECTED: f"Put down {piece.label}",
            ClickOutcome.MOVED: f"Moved {piece.label}",
            ClickOutcome.CAPTURED: f"Captured with {piece.label}",
            ClickOutcome.REJECTED: f"Invalid move for {piece.label}",
        }
        message = messages.get(outcome)
        if message is not None:
            self._set_status(message)

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._controller.events.on_outcome[:] = [
            cb for cb in self._controller.events.on_outcome if cb != self._on_outcome
        ]
        super().closeEvent(event)
