"""Display projection — what each square should look like for a given state."""

from __future__ import annotations

from enum import IntEnum

from chessgrid.core.position import Position
from chessgrid.core.types import ALL_SQUARES, Square
from chessgrid.game.state import Active, SelectionState


class DisplayCategory(IntEnum):
    """Visual category of a single square."""

    PLAIN = 0
    OCCUPIED = 1  # draw the piece glyph
    HIGHLIGHTED = 2  # empty destination of the selected piece


def project(position: Position, state: SelectionState) -> dict[Square, DisplayCategory]:
    """Map every square to its :class:`DisplayCategory`.

    Occupied squares always show their piece, including the selected
    square and any capturable enemy in the move-set. Empty move-set
    members are highlighted; everything else is plain.
    """
    occupied = position.occupied()
    moves = state.moves if isinstance(state, Active) else None
    result: dict[Square, DisplayCategory] = {}
    for sq in ALL_SQUARES:
        if sq in occupied:
            result[sq] = DisplayCategory.OCCUPIED
        elif moves is not None and sq in moves:
            result[sq] = DisplayCategory.HIGHLIGHTED
        else:
            result[sq] = DisplayCategory.PLAIN
    return result
