"""Tests for Position and move application."""

import pytest

from chessgrid.core import rules
from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.notation import position_from_fen
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position

from squares import A7, A8, D5, E2, E4, E5, H1, H2


class TestPosition:
    def test_initial(self) -> None:
        pos = Position.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos.piece_at(E2) == Piece(Color.WHITE, PieceType.PAWN)

    def test_constructor_copies_board(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.KING)
        pos = Position(board)
        board[E4] = None
        assert pos.piece_at(E4) == Piece(Color.WHITE, PieceType.KING)

    def test_board_property_is_a_copy(self) -> None:
        pos = Position.initial()
        pos.board[E2] = None
        assert pos.piece_at(E2) is not None

    def test_equality(self) -> None:
        assert Position.initial() == Position.initial()
        assert Position.initial() != Position(Board.initial(), Color.BLACK)


class TestApplyMove:
    def test_moves_piece_and_flips_side(self) -> None:
        pos = Position.initial()
        nxt = rules.apply_move(pos, E2, E4)
        assert nxt.piece_at(E2) is None
        assert nxt.piece_at(E4) == Piece(Color.WHITE, PieceType.PAWN)
        assert nxt.side_to_move == Color.BLACK

    def test_source_position_untouched(self) -> None:
        pos = Position.initial()
        rules.apply_move(pos, E2, E4)
        assert pos == Position.initial()

    def test_capture_replaces_occupant(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        nxt = rules.apply_move(pos, E4, D5)
        assert nxt.piece_at(D5) == Piece(Color.WHITE, PieceType.PAWN)
        assert len(nxt.occupied_by(Color.BLACK)) == 1

    def test_pawn_promotes_to_queen_by_default(self) -> None:
        pos = position_from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        nxt = rules.apply_move(pos, A7, A8)
        assert nxt.piece_at(A8) == Piece(Color.WHITE, PieceType.QUEEN)

    def test_pawn_promotes_to_requested_piece(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/7p/4K3 b - - 0 1")
        nxt = rules.apply_move(pos, H2, H1, PieceType.KNIGHT)
        assert nxt.piece_at(H1) == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece"):
            rules.apply_move(Position.initial(), E4, E5)

    @pytest.mark.parametrize("kind", [PieceType.KING, PieceType.PAWN])
    def test_impossible_promotion_raises(self, kind: PieceType) -> None:
        pos = position_from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        with pytest.raises(ValueError, match="Invalid promotion piece"):
            rules.apply_move(pos, A7, A8, kind)
