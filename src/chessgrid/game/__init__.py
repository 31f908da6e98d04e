"""Game layer — position store, click-driven selection, display projection.

Quick start::

    from chessgrid.game import SelectionController
    from chessgrid.core import parse_square

    ctrl = SelectionController()
    ctrl.click(parse_square("e2"))  # select the pawn
    ctrl.click(parse_square("e4"))  # move it; black to move
"""

from chessgrid.game.moveset import move_set
from chessgrid.game.projection import DisplayCategory, project
from chessgrid.game.selection import SelectionController, SelectionEvents
from chessgrid.game.state import (
    EMPTY,
    Active,
    Empty,
    SelectionState,
    SquareClicked,
)
from chessgrid.game.store import PositionStore

__all__ = [
    # States / events
    "EMPTY",
    "Active",
    "Empty",
    "SelectionState",
    "SquareClicked",
    # Concrete
    "DisplayCategory",
    "PositionStore",
    "SelectionController",
    "SelectionEvents",
    # Functions
    "move_set",
    "project",
]
