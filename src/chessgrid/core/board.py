"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessgrid.core.bitboard import SquareSet
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.types import Square, make_square

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square occupancy table with incremental per-color bitboards.

    A square holds at most one piece. Mutation is reserved for position
    construction; game code works on copies.
    """

    __slots__ = ("_squares", "_color_bitboards")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> bitboard of all occupied squares for that color.
        self._color_bitboards: list[int] = [0] * _COLOR_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq]
        if old_piece == piece:
            return

        mask = 1 << sq
        if old_piece is not None:
            self._color_bitboards[int(old_piece.color)] &= ~mask

        self._squares[sq] = piece
        if piece is not None:
            self._color_bitboards[int(piece.color)] |= mask

    def items(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, a1 first."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    # -- Occupancy ----------------------------------------------------------

    def occupied_by(self, color: Color) -> SquareSet:
        """All squares occupied by *color*."""
        return SquareSet(self._color_bitboards[int(color)])

    def occupied(self) -> SquareSet:
        """All occupied squares regardless of color."""
        white, black = self._color_bitboards
        return SquareSet(white | black)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._color_bitboards = self._color_bitboards.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting arrangement."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
