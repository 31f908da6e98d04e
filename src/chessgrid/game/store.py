"""PositionStore — the single source of truth for placement and turn order."""

from __future__ import annotations

import logging

from chessgrid.core import rules
from chessgrid.core.bitboard import SquareSet
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.core.types import Square, square_name
from chessgrid.game.moveset import move_set

_LOGGER = logging.getLogger(__name__)


class PositionStore:
    """Holds the current :class:`Position` and replaces it on each move.

    The position only changes through :meth:`apply_move` (or an explicit
    :meth:`reset`), so the side to move flips exactly once per accepted
    move.
    """

    __slots__ = ("_initial", "_position")

    def __init__(self, position: Position | None = None) -> None:
        self._initial = position if position is not None else Position.initial()
        self._position = self._initial

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """Current position. Immutable, safe to hand out."""
        return self._position

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    def piece_at(self, square: Square) -> Piece | None:
        return self._position.piece_at(square)

    def legal_destinations(self, square: Square) -> SquareSet:
        """Pseudo-legal move-set for the piece on *square*; empty if vacant."""
        piece = self._position.piece_at(square)
        if piece is None:
            return SquareSet.empty()
        return move_set(self._position, square, piece)

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> bool:
        """Move a piece of the side to move. Returns True if applied.

        The destination is checked against a freshly computed move-set;
        anything outside it leaves the position untouched. So does a
        *promotion* kind no pawn can become.
        """
        piece = self._position.piece_at(from_sq)
        if piece is None or piece.color != self.side_to_move:
            _LOGGER.warning(
                "Rejected move %s-%s: no %s piece on origin",
                square_name(from_sq),
                square_name(to_sq),
                self.side_to_move,
            )
            return False
        if to_sq not in self.legal_destinations(from_sq):
            _LOGGER.warning(
                "Rejected move %s-%s: destination not reachable for %s",
                square_name(from_sq),
                square_name(to_sq),
                piece.label,
            )
            return False
        if promotion is not None and not promotion.is_promotion_choice:
            _LOGGER.warning(
                "Rejected move %s-%s: cannot promote to %s",
                square_name(from_sq),
                square_name(to_sq),
                promotion.name.lower(),
            )
            return False

        self._position = rules.apply_move(self._position, from_sq, to_sq, promotion)
        _LOGGER.info(
            "%s %s-%s; %s to move",
            piece.label,
            square_name(from_sq),
            square_name(to_sq),
            self.side_to_move,
        )
        return True

    def reset(self, position: Position | None = None) -> None:
        """Return to the starting position, or adopt *position* as the new start."""
        if position is not None:
            self._initial = position
        self._position = self._initial
