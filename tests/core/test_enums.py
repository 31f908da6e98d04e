"""Tests for side and piece-kind enums."""

import pytest

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.types import make_square, rank_of


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite is Color.BLACK
        assert Color.BLACK.opposite is Color.WHITE

    def test_str(self) -> None:
        assert str(Color.BLACK) == "black"

    @pytest.mark.parametrize("color", list(Color))
    def test_pawn_geometry(self, color: Color) -> None:
        home = make_square(4, color.pawn_home_rank)
        two_ahead = home + 2 * color.pawn_step
        # Two pushes from home never reach the last rank.
        assert rank_of(two_ahead) != color.last_rank
        assert color.last_rank == color.opposite.pawn_home_rank + color.pawn_step // 8


class TestPieceType:
    def test_letters(self) -> None:
        assert "".join(pt.letter for pt in PieceType) == "pnbrqk"

    def test_promotion_choices(self) -> None:
        choices = {pt for pt in PieceType if pt.is_promotion_choice}
        assert choices == {
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.ROOK,
            PieceType.QUEEN,
        }
