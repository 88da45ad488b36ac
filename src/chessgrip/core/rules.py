"""Move legality, one rule per piece type.

Every rule answers "may a piece of this type and colour go from *src* to
*dst* on this board?" and never mutates the board. Check, castling,
en passant and promotion are not modelled.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessgrip.core.enums import Color, PieceType
from chessgrip.core.types import Coordinate, all_coordinates, cells_between

if TYPE_CHECKING:
    from chessgrip.core.board import BoardGrid
    from chessgrip.core.piece import Piece

MoveRule = Callable[[Coordinate, Coordinate, Color, "BoardGrid"], bool]


def _destination_ok(dst: Coordinate, mover: Color, board: BoardGrid) -> bool:
    """Shared capture rule: empty or enemy-occupied, never friendly."""
    target = board.piece_at(dst)
    return target is None or target.color != mover


def _path_clear(src: Coordinate, dst: Coordinate, board: BoardGrid) -> bool:
    return all(board.is_empty(c) for c in cells_between(src, dst))


def is_pawn_move_legal(
    src: Coordinate, dst: Coordinate, mover: Color, board: BoardGrid
) -> bool:
    step = mover.pawn_direction
    d_file = dst.file - src.file
    d_rank = dst.rank - src.rank

    if d_file == 0:
        if d_rank == step:
            return board.is_empty(dst)
        if d_rank == 2 * step and src.rank == mover.pawn_start_rank:
            return board.is_empty(src.offset(0, step)) and board.is_empty(dst)
        return False

    # Diagonal steps are captures only.
    if abs(d_file) == 1 and d_rank == step:
        target = board.piece_at(dst)
        return target is not None and target.color != mover

    return False


def is_rook_move_legal(
    src: Coordinate, dst: Coordinate, mover: Color, board: BoardGrid
) -> bool:
    if src == dst:
        return False
    if src.file != dst.file and src.rank != dst.rank:
        return False
    return _path_clear(src, dst, board) and _destination_ok(dst, mover, board)


def is_bishop_move_legal(
    src: Coordinate, dst: Coordinate, mover: Color, board: BoardGrid
) -> bool:
    d_file = abs(dst.file - src.file)
    d_rank = abs(dst.rank - src.rank)
    if d_file != d_rank or d_file == 0:
        return False
    return _path_clear(src, dst, board) and _destination_ok(dst, mover, board)


def is_knight_move_legal(
    src: Coordinate, dst: Coordinate, mover: Color, board: BoardGrid
) -> bool:
    jump = {abs(dst.file - src.file), abs(dst.rank - src.rank)}
    if jump != {1, 2}:
        return False
    return _destination_ok(dst, mover, board)


def is_queen_move_legal(
    src: Coordinate, dst: Coordinate, mover: Color, board: BoardGrid
) -> bool:
    return is_rook_move_legal(src, dst, mover, board) or is_bishop_move_legal(
        src, dst, mover, board
    )


def is_king_move_legal(
    src: Coordinate, dst: Coordinate, mover: Color, board: BoardGrid
) -> bool:
    d_file = abs(dst.file - src.file)
    d_rank = abs(dst.rank - src.rank)
    if d_file > 1 or d_rank > 1 or (d_file == 0 and d_rank == 0):
        return False
    return _destination_ok(dst, mover, board)


MOVE_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: is_pawn_move_legal,
    PieceType.ROOK: is_rook_move_legal,
    PieceType.BISHOP: is_bishop_move_legal,
    PieceType.KNIGHT: is_knight_move_legal,
    PieceType.QUEEN: is_queen_move_legal,
    PieceType.KING: is_king_move_legal,
}


class MoveValidator:
    """Static rule-checker dispatching on piece type."""

    @staticmethod
    def is_legal(
        piece_type: PieceType,
        src: Coordinate,
        dst: Coordinate,
        mover: Color,
        board: BoardGrid,
    ) -> bool:
        return MOVE_RULES[piece_type](src, dst, mover, board)

    @staticmethod
    def is_legal_for(piece: Piece, dst: Coordinate, board: BoardGrid) -> bool:
        """Shortcut using the piece's own type, colour and coordinate."""
        return MoveValidator.is_legal(
            piece.piece_type, piece.coordinate, dst, piece.color, board
        )

    @staticmethod
    def legal_destinations(piece: Piece, board: BoardGrid) -> list[Coordinate]:
        """Every cell *piece* may legally move to, a1 first."""
        return [
            dst
            for dst in all_coordinates()
            if MoveValidator.is_legal_for(piece, dst, board)
        ]
