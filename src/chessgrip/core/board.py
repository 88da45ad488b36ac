"""BoardGrid - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessgrip.core.enums import Color, PieceType
from chessgrip.core.piece import Piece
from chessgrip.core.types import BOARD_SIZE, Coordinate, all_coordinates

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class BoardGrid:
    """Mutable 64-cell board with per-type piece collections.

    Cells are always allocated; an empty cell holds ``None``. Writing a
    piece into a cell indexes it under its type. Only :meth:`remove`
    drops a piece from its collection, so moving a piece with two
    :meth:`place` calls keeps it indexed.
    """

    __slots__ = ("_cells", "_by_type")

    def __init__(self) -> None:
        # [rank][file] -> occupant
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._by_type: dict[PieceType, list[Piece]] = {pt: [] for pt in PieceType}

    # -- Element access -----------------------------------------------------

    def piece_at(self, coord: Coordinate) -> Piece | None:
        file, rank = coord
        if not (0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE):
            raise IndexError(f"Coordinate off the board: {tuple(coord)}")
        return self._cells[rank][file]

    def place(self, coord: Coordinate, piece: Piece | None) -> None:
        """Write *piece* (or clear the cell with ``None``)."""
        file, rank = coord
        if not (0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE):
            raise IndexError(f"Coordinate off the board: {tuple(coord)}")
        self._cells[rank][file] = piece
        if piece is None:
            return
        collection = self._by_type[piece.piece_type]
        if not any(p is piece for p in collection):
            collection.append(piece)

    def remove(self, coord: Coordinate) -> Piece | None:
        """Clear *coord* and forget its occupant entirely.

        Returns the removed piece, or ``None`` if the cell was empty.
        """
        piece = self.piece_at(coord)
        if piece is None:
            return None
        self.place(coord, None)
        self._by_type[piece.piece_type] = [
            p for p in self._by_type[piece.piece_type] if p is not piece
        ]
        return piece

    def is_empty(self, coord: Coordinate) -> bool:
        return self.piece_at(coord) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, piece_type: PieceType) -> list[Piece]:
        """Type collection for *piece_type* (both colours)."""
        return list(self._by_type[piece_type])

    def all_pieces(self, color: Color | None = None) -> list[Piece]:
        """Every piece on the board, optionally only those of *color*."""
        return [
            piece
            for _, piece in self
            if color is None or piece.color == color
        ]

    def find(self, piece_id: int) -> Piece | None:
        for _, piece in self:
            if piece.id == piece_id:
                return piece
        return None

    def __iter__(self) -> Iterator[tuple[Coordinate, Piece]]:
        """Occupied cells as ``(coordinate, piece)`` pairs, a1 first."""
        for coord in all_coordinates():
            piece = self._cells[coord.rank][coord.file]
            if piece is not None:
                yield coord, piece

    def __len__(self) -> int:
        return sum(1 for _ in self)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> BoardGrid:
        """Standard starting layout with ids 1..32."""
        b = cls()
        next_id = 1
        for f in range(BOARD_SIZE):
            for color, rank in ((Color.WHITE, 1), (Color.BLACK, 6)):
                coord = Coordinate(f, rank)
                b.place(coord, Piece(next_id, PieceType.PAWN, color, coord))
                next_id += 1

        for f, pt in enumerate(_BACK_RANK):
            for color, rank in ((Color.WHITE, 0), (Color.BLACK, 7)):
                coord = Coordinate(f, rank)
                b.place(coord, Piece(next_id, pt, color, coord))
                next_id += 1
        return b

    @classmethod
    def from_placement(cls, placement: str) -> BoardGrid:
        """Build a board from the piece-placement field of a FEN string.

        ``"8/8/8/8/8/8/8/R7"`` puts a lone white rook on a1. Ids are
        assigned in reading order (a8 first).
        """
        rows = placement.strip().split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected 8 ranks in placement, got {len(rows)}")

        b = cls()
        next_id = 1
        for row_idx, row in enumerate(rows):
            rank = BOARD_SIZE - 1 - row_idx
            file = 0
            for char in row:
                if char.isdigit():
                    file += int(char)
                    continue
                if file >= BOARD_SIZE:
                    raise ValueError(f"Too many files in rank {rank + 1}: {row!r}")
                coord = Coordinate(file, rank)
                b.place(coord, Piece.from_char(next_id, char, coord))
                next_id += 1
                file += 1
            if file != BOARD_SIZE:
                raise ValueError(f"Rank {rank + 1} does not cover 8 files: {row!r}")
        return b

    def placement(self) -> str:
        """Piece-placement FEN field for the current layout."""
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = ""
            empty = 0
            for file in range(BOARD_SIZE):
                piece = self._cells[rank][file]
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._cells[rank][file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
