"""Move-set derivation for a selected piece."""

from __future__ import annotations

from chessgrid.core import rules
from chessgrid.core.bitboard import SquareSet
from chessgrid.core.enums import PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.core.types import Square


def move_set(position: Position, square: Square, piece: Piece) -> SquareSet:
    """Pseudo-legal destinations for *piece* standing on *square*.

    Queens combine rook and bishop reach. Pawns combine forward pushes
    with the diagonals that currently hold an enemy piece; an empty
    diagonal is never a destination. Own-side squares are always removed.
    Not filtered for king safety.
    """
    color = piece.color
    own = position.occupied_by(color)
    occupied = position.occupied()

    match piece.piece_type:
        case PieceType.QUEEN:
            reach = rules.rook_moves(square, occupied) | rules.bishop_moves(
                square, occupied
            )
        case PieceType.PAWN:
            enemy = position.occupied_by(color.opposite)
            reach = rules.pawn_pushes(square, color, occupied) | (
                rules.pawn_attacks(square, color) & enemy
            )
        case _:
            reach = rules.moves_for(square, piece.piece_type, color, position.board)
    return reach - own
