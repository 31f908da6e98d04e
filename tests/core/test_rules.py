"""Tests for per-kind reachability tables and ray walking."""

import pytest

from chessgrid.core import rules
from chessgrid.core.bitboard import SquareSet
from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.notation import position_from_fen
from chessgrid.core.types import parse_square

from squares import (
    A1, A2, A3, A4, B1, B3, C2, C3, D1, D4, E1, E2, E3, E4, E5, E6, E7, F1, F2,
    G6, H1, H7, H8,
)

EMPTY = SquareSet.empty()


class TestStepPieces:
    def test_knight_in_corner(self) -> None:
        assert rules.knight_targets(A1) == {B3, C2}

    def test_knight_in_centre(self) -> None:
        assert len(rules.knight_targets(D4)) == 8

    def test_king_on_edge(self) -> None:
        assert rules.king_targets(E1) == {D1, F1, parse_square("d2"), E2, F2}

    def test_king_in_corner(self) -> None:
        assert len(rules.king_targets(H8)) == 3


class TestSlidingPieces:
    def test_rook_empty_board(self) -> None:
        assert len(rules.rook_moves(D4, EMPTY)) == 14

    def test_bishop_empty_board(self) -> None:
        assert len(rules.bishop_moves(D4, EMPTY)) == 13

    def test_rook_stops_on_first_occupant(self) -> None:
        reach = rules.rook_moves(A1, SquareSet.of([A3, B1]))
        assert reach == {A2, A3, B1}
        assert A4 not in reach

    def test_bishop_stops_on_first_occupant(self) -> None:
        reach = rules.bishop_moves(A1, SquareSet.of([C3]))
        assert reach == {parse_square("b2"), C3}


class TestPawn:
    def test_double_push_from_home(self) -> None:
        assert rules.pawn_pushes(E2, Color.WHITE, EMPTY) == {E3, E4}

    def test_black_double_push_from_home(self) -> None:
        assert rules.pawn_pushes(E7, Color.BLACK, EMPTY) == {E6, E5}

    def test_single_push_off_home_rank(self) -> None:
        assert rules.pawn_pushes(E3, Color.WHITE, EMPTY) == {E4}

    def test_blocked_directly(self) -> None:
        assert not rules.pawn_pushes(E2, Color.WHITE, SquareSet.of([E3]))

    def test_double_push_blocked_on_second_square(self) -> None:
        assert rules.pawn_pushes(E2, Color.WHITE, SquareSet.of([E4])) == {E3}

    def test_no_push_off_board(self) -> None:
        assert not rules.pawn_pushes(H8, Color.WHITE, EMPTY)
        assert not rules.pawn_pushes(H1, Color.BLACK, EMPTY)

    def test_attack_diagonals(self) -> None:
        assert rules.pawn_attacks(A2, Color.WHITE) == {B3}
        assert rules.pawn_attacks(H7, Color.BLACK) == {G6}
        assert rules.pawn_attacks(E4, Color.WHITE) == {
            parse_square("d5"),
            parse_square("f5"),
        }


class TestMovesFor:
    def test_excludes_own_pieces(self) -> None:
        board = Board.initial()
        assert rules.moves_for(B1, PieceType.KNIGHT, Color.WHITE, board) == {
            A3,
            C3,
        }
        assert not rules.moves_for(A1, PieceType.ROOK, Color.WHITE, board)

    def test_includes_enemy_blocker(self) -> None:
        board = position_from_fen("4k3/8/8/8/r7/8/8/R3K3 w - - 0 1").board
        reach = rules.moves_for(A1, PieceType.ROOK, Color.WHITE, board)
        assert A4 in reach
        assert parse_square("a5") not in reach
        assert E1 not in reach

    def test_pawn_pushes_only(self) -> None:
        board = position_from_fen("4k3/8/8/8/8/3p4/4P3/4K3 w - - 0 1").board
        reach = rules.moves_for(E2, PieceType.PAWN, Color.WHITE, board)
        assert reach == {E3, E4}

    def test_queen_is_composed_by_caller(self) -> None:
        with pytest.raises(ValueError, match="QUEEN"):
            rules.moves_for(D1, PieceType.QUEEN, Color.WHITE, Board.initial())
