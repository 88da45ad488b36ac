"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrip.core.enums import Color, PieceType
from chessgrip.core.types import Coordinate

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(eq=False, slots=True)
class Piece:
    """A single chess piece living on the board.

    Unlike a value object, two pieces with identical fields are still
    different pieces: equality and hashing are by identity. The
    ``coordinate`` always mirrors the grid cell that holds the piece.
    """

    id: int
    piece_type: PieceType
    color: Color
    coordinate: Coordinate
    is_selected: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, piece_id: int, char: str, coordinate: Coordinate) -> Piece:
        """Create a piece from a FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(piece_id, ptype, color, coordinate)

    @property
    def symbol(self) -> str:
        """Solid Unicode glyph for the piece type, e.g. ♞."""
        return _UNICODE[self.piece_type]

    @property
    def label(self) -> str:
        """Readable description, e.g. 'white knight on b1'."""
        return f"{self.color!s} {self.piece_type!s} on {self.coordinate}"
