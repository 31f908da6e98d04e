"""Sides and piece kinds, with the per-side pawn geometry."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side to move. The value doubles as an index into per-side tables."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def pawn_step(self) -> int:
        """Square-index delta of a single pawn push."""
        return 8 if self is Color.WHITE else -8

    @property
    def pawn_home_rank(self) -> int:
        return 1 if self is Color.WHITE else 6

    @property
    def last_rank(self) -> int:
        """Rank on which this side's pawns promote."""
        return 7 if self is Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Lowercase FEN letter."""
        return "pnbrqk"[self.value - 1]

    @property
    def is_promotion_choice(self) -> bool:
        """Whether a pawn on its last rank may become this kind."""
        return self in _PROMOTION_CHOICES


_PROMOTION_CHOICES = frozenset(
    {PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)
