"""Squares of the 8x8 grid.

A square is a plain ``int`` in ``0..63``: ``rank * 8 + file``, so a1 is 0,
h1 is 7 and h8 is 63. Rank 0 is white's back rank. Every index that enters
the game layer from outside goes through :func:`require_square`.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"

ALL_SQUARES: tuple[Square, ...] = tuple(range(64))


def is_valid_square(sq: object) -> bool:
    """True for an ``int`` index on the board; bools and other types are not squares."""
    return isinstance(sq, int) and not isinstance(sq, bool) and 0 <= sq < 64


def require_square(sq: object) -> Square:
    """Return *sq* unchanged, or raise ``ValueError`` if it is not a board index."""
    if not is_valid_square(sq):
        raise ValueError(f"Square index out of range: {sq!r}")
    return sq  # type: ignore[return-value]


def file_of(sq: Square) -> int:
    return sq & 7


def rank_of(sq: Square) -> int:
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``28`` → ``'e4'``."""
    return FILE_NAMES[file_of(sq)] + RANK_NAMES[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Inverse of :func:`square_name`; lowercase names only."""
    if len(name) != 2:
        raise ValueError(f"Invalid square name: {name!r}")
    file = FILE_NAMES.find(name[0])
    rank = RANK_NAMES.find(name[1])
    if file < 0 or rank < 0:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(file, rank)
