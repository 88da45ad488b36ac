"""SelectionController — turns picks into select, deselect and move actions.

Coordinates: GameState, MoveValidator, MoveExecutor, VisualSink.
Emits outcomes via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgrip.core.piece import Piece
from chessgrip.core.rules import MoveValidator
from chessgrip.core.types import Coordinate
from chessgrip.game.executor import MoveExecutor
from chessgrip.game.interfaces import (
    ClickOutcome,
    NullSink,
    PickResult,
    SelectionPhase,
    VisualSink,
)
from chessgrip.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

OutcomeCallback = Callable[[ClickOutcome, "Piece | None"], None]  # outcome, piece
ResetCallback = Callable[["GameState"], None]


@dataclass
class ControllerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_outcome: list[OutcomeCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController:
    """Two-state machine: ``IDLE`` ⇄ ``PIECE_SELECTED``.

    Every call to :meth:`handle_pick` performs at most one transition and
    returns before anything else can observe an intermediate state.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_sink", "_executor", "events")

    def __init__(
        self,
        state: GameState | None = None,
        sink: VisualSink | None = None,
    ) -> None:
        self._state = state if state is not None else GameState()
        self._sink: VisualSink = sink if sink is not None else NullSink()
        self._executor = MoveExecutor(self._state.board, self._sink)
        self.events = ControllerEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    @property
    def selected(self) -> Piece | None:
        return self._state.selected

    def set_sink(self, sink: VisualSink) -> None:
        """Route future notifications to *sink*."""
        self._sink = sink
        self._executor = MoveExecutor(self._state.board, sink)

    # ── Public API ───────────────────────────────────────────────────────

    def handle_pick(self, result: PickResult) -> ClickOutcome:
        """Apply one resolved pointer event."""
        target = result.resolve(self._state.board)
        if target is None:
            return self._emit(ClickOutcome.IGNORED, None)

        coord, occupant = target
        selected = self._state.selected

        if selected is None:
            if occupant is None:
                _LOGGER.debug("Empty cell %s clicked with nothing selected", coord)
                return self._emit(ClickOutcome.IGNORED, None)
            self._select(occupant)
            return self._emit(ClickOutcome.SELECTED, occupant)

        if occupant is selected or coord == selected.coordinate:
            self._deselect(selected)
            return self._emit(ClickOutcome.DESELECTED, selected)

        return self._attempt_move(selected, coord)

    def deselect(self) -> bool:
        """Drop the current selection. Returns False if nothing was selected."""
        selected = self._state.selected
        if selected is None:
            return False
        self._deselect(selected)
        self._emit(ClickOutcome.DESELECTED, selected)
        return True

    def reset(self, placement: str | None = None) -> None:
        """Start over from the starting layout (or *placement*)."""
        self._state.setup(placement)
        self._executor = MoveExecutor(self._state.board, self._sink)
        _LOGGER.info("New board set up")
        for cb in self.events.on_reset:
            cb(self._state)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _attempt_move(self, piece: Piece, dst: Coordinate) -> ClickOutcome:
        src = piece.coordinate
        # The mover is always the selection, so its colour drives the
        # friendly-capture check.
        if not MoveValidator.is_legal(
            piece.piece_type, src, dst, piece.color, self._state.board
        ):
            _LOGGER.info("Invalid move: %s -> %s", piece.label, dst)
            return self._emit(ClickOutcome.REJECTED, piece)

        captured = self._executor.execute(piece, src, dst)
        self._deselect(piece)
        outcome = ClickOutcome.MOVED if captured is None else ClickOutcome.CAPTURED
        return self._emit(outcome, piece)

    def _select(self, piece: Piece) -> None:
        piece.is_selected = True
        self._state.selected = piece
        _LOGGER.debug("Selected %s", piece.label)
        self._sink.on_select(piece)

    def _deselect(self, piece: Piece) -> None:
        piece.is_selected = False
        self._state.selected = None
        _LOGGER.debug("Deselected %s", piece.label)
        self._sink.on_deselect(piece, piece.color)

    def _emit(self, outcome: ClickOutcome, piece: Piece | None) -> ClickOutcome:
        for cb in self.events.on_outcome:
            cb(outcome, piece)
        return outcome
