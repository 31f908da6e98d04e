"""Selection controller — turns square clicks into selections and moves.

State machine (no terminal state)::

    Empty  --click own piece-------------------> Active
    Empty  --click empty / opponent piece------> Empty
    Active --click move-set member-------------> Empty   (move applied)
    Active --click another own piece-----------> Active  (re-targeted)
    Active --click anything else---------------> Active  (sticky) / Empty
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgrid.core.enums import Color
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.core.types import Square, require_square, square_name
from chessgrid.game.projection import DisplayCategory, project
from chessgrid.game.state import EMPTY, Active, SelectionState, SquareClicked
from chessgrid.game.store import PositionStore

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[SelectionState], None]
MoveCallback = Callable[[Square, Square, Position], None]  # from, to, position after


@dataclass
class SelectionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController:
    """Owns the position store and the current selection.

    Each click is resolved to completion (state replaced, move applied,
    listeners notified) before the method returns. Listeners receive only
    immutable values.

    Args:
        store: Position store to drive; a fresh starting position if omitted.
        sticky_selection: When True (default) a click on an empty or enemy
            square that is not a destination keeps the current selection.
            When False such a click clears it.
    """

    __slots__ = ("_store", "_state", "_sticky", "events")

    def __init__(
        self,
        store: PositionStore | None = None,
        *,
        sticky_selection: bool = True,
    ) -> None:
        self._store = store if store is not None else PositionStore()
        self._state: SelectionState = EMPTY
        self._sticky = sticky_selection
        self.events = SelectionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def store(self) -> PositionStore:
        return self._store

    @property
    def position(self) -> Position:
        return self._store.position

    @property
    def side_to_move(self) -> Color:
        return self._store.side_to_move

    @property
    def sticky_selection(self) -> bool:
        return self._sticky

    @sticky_selection.setter
    def sticky_selection(self, sticky: bool) -> None:
        self._sticky = sticky

    def piece_at(self, square: Square) -> Piece | None:
        return self._store.piece_at(square)

    def projection(self) -> dict[Square, DisplayCategory]:
        """Per-square display categories for the current state."""
        return project(self._store.position, self._state)

    # ── Event handling ───────────────────────────────────────────────────

    def handle(self, event: SquareClicked) -> SelectionState:
        return self.click(event.square)

    def click(self, square: Square) -> SelectionState:
        """Resolve a click on *square* and return the new selection state.

        Raises ValueError when *square* is not an index in 0..63.
        """
        require_square(square)

        previous = self._state
        moved_from: Square | None = None

        match previous:
            case Active(square=origin, moves=moves) if square in moves:
                if self._store.apply_move(origin, square):
                    moved_from = origin
                next_state: SelectionState = EMPTY
            case Active() if self._is_own_piece(square):
                next_state = self._select(square)
            case Active():
                next_state = previous if self._sticky else EMPTY
            case _:
                next_state = self._select(square) if self._is_own_piece(square) else EMPTY

        self._state = next_state
        if next_state != previous:
            _LOGGER.debug(
                "Selection %s -> %s after click on %s",
                previous,
                next_state,
                square_name(square),
            )
            self._emit_selection(next_state)
        if moved_from is not None:
            self._emit_move(moved_from, square)
        return next_state

    def reset(self, position: Position | None = None) -> None:
        """Start over from the initial (or given) position with nothing selected."""
        self._store.reset(position)
        previous = self._state
        self._state = EMPTY
        if previous != EMPTY:
            self._emit_selection(EMPTY)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_own_piece(self, square: Square) -> bool:
        piece = self._store.piece_at(square)
        return piece is not None and piece.color == self._store.side_to_move

    def _select(self, square: Square) -> Active:
        piece = self._store.piece_at(square)
        assert piece is not None
        return Active(
            square=square,
            piece_type=piece.piece_type,
            color=piece.color,
            moves=self._store.legal_destinations(square),
        )

    def _emit_selection(self, state: SelectionState) -> None:
        for cb in self.events.on_selection_changed:
            cb(state)

    def _emit_move(self, from_sq: Square, to_sq: Square) -> None:
        position = self._store.position
        for cb in self.events.on_move:
            cb(from_sq, to_sq, position)
