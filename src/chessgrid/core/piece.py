"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceType

# (white, black) glyphs per piece type.
_GLYPHS: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}

_FROM_LETTER: dict[str, PieceType] = {pt.letter: pt for pt in PieceType}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, piece type) pair occupying a square."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        piece_type = _FROM_LETTER.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _GLYPHS[self.piece_type][int(self.color)]

    @property
    def label(self) -> str:
        """Readable name such as ``'white knight'``."""
        return f"{self.color} {self.piece_type.name.lower()}"
