"""Selection state values and the inbound click event."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessgrid.core.bitboard import SquareSet
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Empty:
    """Nothing is selected."""

    def __str__(self) -> str:
        return "Empty"


@dataclass(frozen=True, slots=True)
class Active:
    """A piece of the side to move is selected, with its move-set.

    The move-set is computed when the state is entered and never patched;
    a new selection always builds a new :class:`Active`.
    """

    square: Square
    piece_type: PieceType
    color: Color
    moves: SquareSet

    @property
    def piece(self) -> Piece:
        return Piece(self.color, self.piece_type)

    def __str__(self) -> str:
        return f"Active({square_name(self.square)}, {len(self.moves)} moves)"


SelectionState: TypeAlias = Empty | Active

EMPTY = Empty()


@dataclass(frozen=True, slots=True)
class SquareClicked:
    """Inbound event from the presentation layer."""

    square: Square
