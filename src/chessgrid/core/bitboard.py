"""SquareSet — an immutable 64-bit set of board squares."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chessgrid.core.types import Square, square_name

FULL_MASK = (1 << 64) - 1


class SquareSet:
    """Fixed-width bitboard exposed as a set of squares.

    Bit *n* set means square *n* is a member. Iteration yields squares in
    ascending order (a1 first).
    """

    __slots__ = ("_mask",)

    def __init__(self, mask: int = 0) -> None:
        if mask < 0 or mask > FULL_MASK:
            raise ValueError(f"Bitboard mask out of range: {mask:#x}")
        self._mask = mask

    @classmethod
    def of(cls, squares: Iterable[Square]) -> SquareSet:
        mask = 0
        for sq in squares:
            mask |= 1 << sq
        return cls(mask)

    @classmethod
    def empty(cls) -> SquareSet:
        return _EMPTY

    @classmethod
    def full(cls) -> SquareSet:
        return _FULL

    @property
    def mask(self) -> int:
        """Raw 64-bit integer value."""
        return self._mask

    # -- Set algebra ----------------------------------------------------------

    def __or__(self, other: SquareSet) -> SquareSet:
        if not isinstance(other, SquareSet):
            return NotImplemented
        return SquareSet(self._mask | other._mask)

    def __and__(self, other: SquareSet) -> SquareSet:
        if not isinstance(other, SquareSet):
            return NotImplemented
        return SquareSet(self._mask & other._mask)

    def __sub__(self, other: SquareSet) -> SquareSet:
        if not isinstance(other, SquareSet):
            return NotImplemented
        return SquareSet(self._mask & ~other._mask)

    def __invert__(self) -> SquareSet:
        return SquareSet(~self._mask & FULL_MASK)

    def with_square(self, sq: Square) -> SquareSet:
        return SquareSet(self._mask | (1 << sq))

    # -- Container protocol ---------------------------------------------------

    def __contains__(self, sq: object) -> bool:
        if not isinstance(sq, int) or not 0 <= sq < 64:
            return False
        return bool(self._mask >> sq & 1)

    def __iter__(self) -> Iterator[Square]:
        bitboard = self._mask
        while bitboard:
            lsb = bitboard & -bitboard
            yield lsb.bit_length() - 1
            bitboard ^= lsb

    def __len__(self) -> int:
        return self._mask.bit_count()

    def __bool__(self) -> bool:
        return self._mask != 0

    # -- Dunder helpers -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SquareSet):
            return self._mask == other._mask
        if isinstance(other, set):
            return set(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._mask)

    def __repr__(self) -> str:
        names = ", ".join(square_name(sq) for sq in self)
        return f"SquareSet({{{names}}})"


_EMPTY = SquareSet(0)
_FULL = SquareSet(FULL_MASK)
