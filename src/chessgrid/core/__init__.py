"""Core domain layer — board geometry and pseudo-legal reachability.

Quick start::

    from chessgrid.core import Position, parse_square, rules

    pos = Position.initial()
    e2 = parse_square("e2")
    piece = pos.piece_at(e2)
    rules.moves_for(e2, piece.piece_type, piece.color, pos.board)
"""

from chessgrid.core import rules
from chessgrid.core.bitboard import SquareSet
from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.core.types import (
    ALL_SQUARES,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    require_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "SquareSet",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "require_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    "rules",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
