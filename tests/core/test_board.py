"""Tests for Board."""

from chessgrid.core.bitboard import SquareSet
from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece

from squares import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)


class TestBoardInitial:
    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white = Piece(Color.WHITE, PieceType.PAWN)
        black = Piece(Color.BLACK, PieceType.PAWN)
        assert [sq for sq, p in board.items() if p == white] == list(range(8, 16))
        assert [sq for sq, p in board.items() if p == black] == list(range(48, 56))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_occupancy_bitboards(self) -> None:
        board = Board.initial()
        assert board.occupied_by(Color.WHITE) == SquareSet((1 << 16) - 1)
        assert board.occupied_by(Color.BLACK) == SquareSet(((1 << 16) - 1) << 48)
        assert len(board.occupied()) == 32


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board[E2] is None
        assert E4 in board.occupied_by(Color.WHITE)

    def test_replace_occupant_updates_bitboards(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = Piece(Color.BLACK, PieceType.KNIGHT)
        assert E4 not in board.occupied_by(Color.WHITE)
        assert E4 in board.occupied_by(Color.BLACK)
        board[E4] = None
        assert not board.occupied()

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_items_lists_occupants_in_order(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.QUEEN)
        board[A1] = Piece(Color.BLACK, PieceType.ROOK)
        assert [sq for sq, _ in board.items()] == [A1, E4]

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text
