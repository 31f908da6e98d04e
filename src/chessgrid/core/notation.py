"""FEN parsing and serialization.

Only piece placement and side to move are kept. Castling, en passant and
clock fields are checked for shape and otherwise ignored; serialization
writes neutral values for them.
"""

from __future__ import annotations

import re

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.core.types import make_square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_RE = re.compile(r"^(-|K?Q?k?q?)$")


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The first two fields are required; the remaining four are optional.
    """
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    board = _parse_placement(parts[0], fen)

    side_part = parts[1]
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    if len(parts) > 2 and not _CASTLING_RE.match(parts[2]):
        raise ValueError(f"Invalid FEN castling field: {parts[2]!r}")
    if len(parts) > 3 and parts[3] != "-":
        parse_square(parts[3])
    for clock in parts[4:]:
        if not clock.isdigit():
            raise ValueError(f"Invalid FEN clock field: {clock!r}")

    return Position(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.piece_at(make_square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side_str} - - 0 1"
