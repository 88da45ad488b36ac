"""Tests for BoardGrid."""

import pytest

from chessgrip.core.board import STARTING_PLACEMENT, BoardGrid
from chessgrip.core.enums import Color, PieceType
from chessgrip.core.piece import Piece
from chessgrip.core.types import Coordinate, all_coordinates

A1 = Coordinate(0, 0)
E1 = Coordinate(4, 0)
E2 = Coordinate(4, 1)
E4 = Coordinate(4, 3)
D8 = Coordinate(3, 7)
E8 = Coordinate(4, 7)


class TestBoardInitial:
    def test_piece_count(self) -> None:
        board = BoardGrid.initial()
        assert len(board) == 32
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_kings_and_queens(self) -> None:
        board = BoardGrid.initial()
        white_king = board.piece_at(E1)
        black_queen = board.piece_at(D8)
        assert white_king is not None
        assert white_king.piece_type == PieceType.KING
        assert white_king.color == Color.WHITE
        assert black_queen is not None
        assert black_queen.piece_type == PieceType.QUEEN
        assert black_queen.color == Color.BLACK

    def test_back_ranks(self) -> None:
        board = BoardGrid.initial()
        expected = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for file, pt in enumerate(expected):
            for rank, color in ((0, Color.WHITE), (7, Color.BLACK)):
                piece = board.piece_at(Coordinate(file, rank))
                assert piece is not None, f"Empty cell at {file},{rank}"
                assert (piece.piece_type, piece.color) == (pt, color)

    def test_pawns(self) -> None:
        board = BoardGrid.initial()
        pawns = board.pieces(PieceType.PAWN)
        assert len(pawns) == 16
        assert {p.coordinate.rank for p in pawns if p.color == Color.WHITE} == {1}
        assert {p.coordinate.rank for p in pawns if p.color == Color.BLACK} == {6}

    def test_empty_middle(self) -> None:
        board = BoardGrid.initial()
        for coord in all_coordinates():
            if 2 <= coord.rank <= 5:
                assert board.piece_at(coord) is None

    def test_unique_ids_and_coordinates_in_lockstep(self) -> None:
        board = BoardGrid.initial()
        ids = [piece.id for _, piece in board]
        assert sorted(ids) == list(range(1, 33))
        for coord, piece in board:
            assert piece.coordinate == coord
            assert not piece.is_selected

    def test_placement_matches_starting_layout(self) -> None:
        assert BoardGrid.initial().placement() == STARTING_PLACEMENT


class TestBoardOperations:
    def test_place_and_get(self) -> None:
        board = BoardGrid()
        piece = Piece(1, PieceType.PAWN, Color.WHITE, E4)
        board.place(E4, piece)
        assert board.piece_at(E4) is piece
        assert board.is_empty(E2)
        assert board.pieces(PieceType.PAWN) == [piece]

    def test_place_none_keeps_type_collection(self) -> None:
        board = BoardGrid()
        piece = Piece(1, PieceType.ROOK, Color.WHITE, A1)
        board.place(A1, piece)
        board.place(A1, None)
        board.place(E4, piece)
        assert board.piece_at(A1) is None
        assert board.pieces(PieceType.ROOK) == [piece]

    def test_remove_drops_piece_everywhere(self) -> None:
        board = BoardGrid.initial()
        king = board.piece_at(E8)
        removed = board.remove(E8)
        assert removed is king
        assert board.piece_at(E8) is None
        assert king not in board.pieces(PieceType.KING)
        assert len(board.pieces(PieceType.KING)) == 1

    def test_remove_empty_cell(self) -> None:
        board = BoardGrid()
        assert board.remove(E4) is None

    def test_out_of_range_raises(self) -> None:
        board = BoardGrid()
        with pytest.raises(IndexError):
            board.piece_at(Coordinate(8, 0))
        with pytest.raises(IndexError):
            board.place(Coordinate(0, -1), None)

    def test_find_by_id(self) -> None:
        board = BoardGrid.initial()
        piece = board.piece_at(E2)
        assert piece is not None
        assert board.find(piece.id) is piece
        assert board.find(999) is None

    def test_repr_not_empty(self) -> None:
        text = repr(BoardGrid.initial())
        assert "K" in text
        assert "a b c d e f g h" in text


class TestPlacement:
    def test_from_placement_lone_rook(self) -> None:
        board = BoardGrid.from_placement("8/8/8/8/8/8/8/R7")
        rook = board.piece_at(A1)
        assert rook is not None
        assert rook.piece_type == PieceType.ROOK
        assert rook.color == Color.WHITE
        assert rook.coordinate == A1
        assert len(board) == 1

    def test_from_placement_round_trip(self) -> None:
        placement = "r3k2r/pp3ppp/8/3Pp3/8/8/PPP2PPP/R3K2R"
        assert BoardGrid.from_placement(placement).placement() == placement

    def test_from_placement_ids_in_reading_order(self) -> None:
        board = BoardGrid.from_placement("k7/8/8/8/8/8/8/7K")
        black_king = board.piece_at(Coordinate(0, 7))
        white_king = board.piece_at(Coordinate(7, 0))
        assert black_king is not None and black_king.id == 1
        assert white_king is not None and white_king.id == 2

    @pytest.mark.parametrize(
        "bad",
        [
            "8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/9",
            "8/8/8/8/8/8/8/R8",
            "8/8/8/8/8/8/8/7",
            "8/8/8/8/8/8/8/X7",
        ],
    )
    def test_from_placement_rejects_malformed(self, bad: str) -> None:
        with pytest.raises(ValueError):
            BoardGrid.from_placement(bad)
