"""Pseudo-legal reachability per piece kind, and move application.

Everything here is geometry only: no check detection, no castling, no
en passant. Reachability functions return :class:`SquareSet` values built
from lookup tables computed once at import time.
"""

from __future__ import annotations

from chessgrid.core.bitboard import SquareSet
from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.position import Position
from chessgrid.core.types import Square, make_square, rank_of, square_name

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


# -- Precomputed lookup tables ---------------------------------------------


def _on_board(file_idx: int, rank_idx: int) -> bool:
    return 0 <= file_idx < 8 and 0 <= rank_idx < 8


def _build_step_masks(offsets: tuple[tuple[int, int], ...]) -> tuple[int, ...]:
    masks: list[int] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        mask = 0
        for df, dr in offsets:
            if _on_board(file_idx + df, rank_idx + dr):
                mask |= 1 << make_square(file_idx + df, rank_idx + dr)
        masks.append(mask)
    return tuple(masks)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while _on_board(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attack_masks() -> tuple[tuple[int, ...], tuple[int, ...]]:
    white = _build_step_masks(((-1, 1), (1, 1)))
    black = _build_step_masks(((-1, -1), (1, -1)))
    return (white, black)


_KNIGHT_MASKS = _build_step_masks(KNIGHT_OFFSETS)
_KING_MASKS = _build_step_masks(KING_OFFSETS)
_PAWN_ATTACK_MASKS = _build_pawn_attack_masks()
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


# -- Per-kind reachability --------------------------------------------------


def knight_targets(sq: Square) -> SquareSet:
    """Every square a knight on *sq* jumps to on an empty board."""
    return SquareSet(_KNIGHT_MASKS[sq])


def king_targets(sq: Square) -> SquareSet:
    """The up-to-eight neighbours of *sq*."""
    return SquareSet(_KING_MASKS[sq])


def _slide(rays: tuple[tuple[Square, ...], ...], occupied: SquareSet) -> SquareSet:
    mask = 0
    for ray in rays:
        for to_sq in ray:
            mask |= 1 << to_sq
            if to_sq in occupied:
                break
    return SquareSet(mask)


def bishop_moves(sq: Square, occupied: SquareSet) -> SquareSet:
    """Diagonal rays from *sq*, each stopping on (and including) the first occupant."""
    return _slide(_BISHOP_RAYS[sq], occupied)


def rook_moves(sq: Square, occupied: SquareSet) -> SquareSet:
    """Orthogonal rays from *sq*, each stopping on (and including) the first occupant."""
    return _slide(_ROOK_RAYS[sq], occupied)


def pawn_pushes(sq: Square, color: Color, occupied: SquareSet) -> SquareSet:
    """Forward, non-capturing pawn steps.

    One step when the square ahead is empty; two from the home rank when
    both squares ahead are empty.
    """
    step = color.pawn_step
    one = sq + step
    if not 0 <= one < 64 or one in occupied:
        return SquareSet.empty()
    result = SquareSet(1 << one)
    if rank_of(sq) == color.pawn_home_rank:
        two = one + step
        if two not in occupied:
            result = result.with_square(two)
    return result


def pawn_attacks(sq: Square, color: Color) -> SquareSet:
    """The diagonal squares a pawn on *sq* would capture on, occupied or not."""
    return SquareSet(_PAWN_ATTACK_MASKS[int(color)][sq])


def moves_for(
    square: Square, piece_type: PieceType, color: Color, board: Board
) -> SquareSet:
    """Geometric reachability for a single non-queen piece kind.

    Squares held by *color* are excluded. Pawns get pushes only; their
    capture diagonals come from :func:`pawn_attacks`. Queens are composed
    by the caller from the rook and bishop sets.
    """
    occupied = board.occupied()
    match piece_type:
        case PieceType.PAWN:
            reach = pawn_pushes(square, color, occupied)
        case PieceType.KNIGHT:
            reach = knight_targets(square)
        case PieceType.BISHOP:
            reach = bishop_moves(square, occupied)
        case PieceType.ROOK:
            reach = rook_moves(square, occupied)
        case PieceType.KING:
            reach = king_targets(square)
        case _:
            raise ValueError(f"No single reachability rule for {piece_type.name}")
    return reach - board.occupied_by(color)


# -- Move application -------------------------------------------------------


def apply_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> Position:
    """Return the position after moving the piece on *from_sq* to *to_sq*.

    Any occupant of *to_sq* is captured. A pawn landing on its last rank
    becomes *promotion* (a queen when not given). The side to move flips.
    The caller is responsible for checking the move is reachable.

    Raises ValueError for an empty origin or a *promotion* kind no pawn
    can become (pawn or king).
    """
    piece = position.piece_at(from_sq)
    if piece is None:
        raise ValueError(f"No piece on {square_name(from_sq)}")
    if promotion is not None and not promotion.is_promotion_choice:
        raise ValueError(f"Invalid promotion piece: {promotion.name}")

    placed = piece
    if (
        piece.piece_type == PieceType.PAWN
        and rank_of(to_sq) == piece.color.last_rank
    ):
        placed = Piece(piece.color, promotion or PieceType.QUEEN)

    board = position.board
    board[from_sq] = None
    board[to_sq] = placed
    return Position._adopt(board, position.side_to_move.opposite)
