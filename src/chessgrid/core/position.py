"""Position — board placement plus side to move, as an immutable value."""

from __future__ import annotations

from collections.abc import Iterator

from chessgrid.core.bitboard import SquareSet
from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.piece import Piece
from chessgrid.core.types import Square


class Position:
    """Chess position: piece placement + side to move.

    A Position never changes after construction; applying a move yields a
    new instance (see :func:`chessgrid.core.rules.apply_move`). The board
    passed in is copied so later edits by the caller cannot leak in.
    """

    __slots__ = ("_board", "_side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        self._side_to_move = side_to_move

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, white to move."""
        return cls()

    @classmethod
    def _adopt(cls, board: Board, side_to_move: Color) -> Position:
        """Wrap *board* without copying; the caller must drop its reference."""
        pos = cls.__new__(cls)
        pos._board = board
        pos._side_to_move = side_to_move
        return pos

    # ── Read-only accessors ──────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def board(self) -> Board:
        """A private copy of the placement; mutating it has no effect here."""
        return self._board.copy()

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board[sq]

    def occupied(self) -> SquareSet:
        return self._board.occupied()

    def occupied_by(self, color: Color) -> SquareSet:
        return self._board.occupied_by(color)

    def items(self) -> Iterator[tuple[Square, Piece]]:
        return self._board.items()

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._side_to_move == other._side_to_move and self._board == other._board
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self._board!r}\n{self._side_to_move} to move"
