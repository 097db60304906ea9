"""Precomputed piece movement tables and sliding-piece attack generation."""

from __future__ import annotations

from functools import lru_cache

from .bitboard import (
    ALL_SET,
    DOWN,
    FIRST_RANK,
    LEFT,
    RIGHT,
    UP,
    iter_squares,
    lsb,
    msb,
    ray,
    reverse_bits,
    rotl,
    shift,
    square_bb,
)
from .types import Color

_FILE_A = ALL_SET // FIRST_RANK

_BISHOP_DIRECTIONS = ((UP, LEFT), (UP, RIGHT), (DOWN, LEFT), (DOWN, RIGHT))
_ROOK_DIRECTIONS = ((UP, 0), (0, RIGHT), (0, LEFT), (DOWN, 0))


def _knight_moves(sq: int) -> int:
    bb = square_bb(sq)
    forward_back = shift(bb, 2 * UP, 0) | shift(bb, 2 * DOWN, 0)
    left_right = shift(bb, 0, 2 * LEFT) | shift(bb, 0, 2 * RIGHT)
    return (
        shift(forward_back, 0, LEFT)
        | shift(forward_back, 0, RIGHT)
        | shift(left_right, UP, 0)
        | shift(left_right, DOWN, 0)
    )


def _king_moves(sq: int) -> int:
    origin = square_bb(sq)
    bb = origin
    bb |= shift(bb, UP, 0)
    bb |= shift(bb, DOWN, 0)
    bb |= shift(bb, 0, RIGHT)
    bb |= shift(bb, 0, LEFT)
    return bb ^ origin


def _pawn_attacks_from(sq: int) -> tuple[int, int]:
    bb = square_bb(sq)
    white = shift(bb, UP, LEFT) | shift(bb, UP, RIGHT)
    black = shift(bb, DOWN, LEFT) | shift(bb, DOWN, RIGHT)
    return white, black


def _rays(sq: int, directions) -> int:
    result = 0
    for rank_diff, file_diff in directions:
        result |= ray(sq, rank_diff, file_diff)
    return result


def _rook_between(i: int, j: int) -> int:
    return (
        (ray(i, UP, 0) & ray(j, DOWN, 0))
        | (ray(j, UP, 0) & ray(i, DOWN, 0))
        | (ray(i, 0, LEFT) & ray(j, 0, RIGHT))
        | (ray(j, 0, LEFT) & ray(i, 0, RIGHT))
    )


def _bishop_between(i: int, j: int) -> int:
    return (
        (ray(i, UP, LEFT) & ray(j, DOWN, RIGHT))
        | (ray(j, UP, LEFT) & ray(i, DOWN, RIGHT))
        | (ray(i, DOWN, LEFT) & ray(j, UP, RIGHT))
        | (ray(j, DOWN, LEFT) & ray(i, UP, RIGHT))
    )


def _ray_extending(i: int, j: int) -> int:
    dr = int(i // 8 != j // 8)
    df = int(i % 8 != j % 8)
    step = 8 * dr + df
    mask_left = 0b11111110 * _FILE_A
    mask_right = 0b01111111 * _FILE_A
    bb = square_bb(i)
    for _ in range(8):
        bb |= (bb << step) & mask_left & ALL_SET
    for _ in range(8):
        bb |= (bb >> step) & mask_right
    return bb


KNIGHT_MOVES: tuple[int, ...] = tuple(_knight_moves(sq) for sq in range(64))
KING_MOVES: tuple[int, ...] = tuple(_king_moves(sq) for sq in range(64))
PAWN_ATTACKS: tuple[tuple[int, int], ...] = tuple(_pawn_attacks_from(sq) for sq in range(64))
"""Indexed as PAWN_ATTACKS[square][color]."""

BISHOP_RAYS: tuple[int, ...] = tuple(_rays(sq, _BISHOP_DIRECTIONS) for sq in range(65))
ROOK_RAYS: tuple[int, ...] = tuple(_rays(sq, _ROOK_DIRECTIONS) for sq in range(65))
QUEEN_RAYS: tuple[int, ...] = tuple(b | r for b, r in zip(BISHOP_RAYS, ROOK_RAYS))

ROOK_RAY_BETWEEN: tuple[tuple[int, ...], ...] = tuple(
    tuple(_rook_between(i, j) for j in range(65)) for i in range(65)
)
BISHOP_RAY_BETWEEN: tuple[tuple[int, ...], ...] = tuple(
    tuple(_bishop_between(i, j) for j in range(65)) for i in range(65)
)
RAY_BETWEEN: tuple[tuple[int, ...], ...] = tuple(
    tuple(r | b for r, b in zip(rook_row, bishop_row))
    for rook_row, bishop_row in zip(ROOK_RAY_BETWEEN, BISHOP_RAY_BETWEEN)
)
RAY_EXTENDING: tuple[tuple[int, ...], ...] = tuple(
    tuple(_ray_extending(i, j) for j in range(65)) for i in range(65)
)


def _relevant_mask(sq: int, directions) -> int:
    """Squares whose occupancy can change a slider's attacks (edges excluded)."""
    mask = 0
    for rank_diff, file_diff in directions:
        bb = ray(sq, rank_diff, file_diff)
        if not bb:
            continue
        far = msb(bb) if rank_diff * 8 + file_diff > 0 else lsb(bb)
        mask |= bb & ~square_bb(far)
    return mask


BISHOP_MASKS: tuple[int, ...] = tuple(_relevant_mask(sq, _BISHOP_DIRECTIONS) for sq in range(64))
ROOK_MASKS: tuple[int, ...] = tuple(_relevant_mask(sq, _ROOK_DIRECTIONS) for sq in range(64))


def create_blockers(mask: int) -> list[int]:
    """Every subset of ``mask`` in carry-rippler order, starting and ending with ``mask``."""
    mask &= ALL_SET
    count = 1 << len(list(iter_squares(mask)))
    blockers = []
    subset = mask
    for _ in range(count + 1):
        blockers.append(subset)
        subset = (subset - 1) & mask
    return blockers


def _line_attacks(sq: int, occ: int, line: int) -> int:
    s = square_bb(sq)
    occ_line = occ & line
    forward = (occ_line - 2 * s) & ALL_SET
    backward = (reverse_bits(occ_line) - 2 * reverse_bits(s)) & ALL_SET
    return (forward ^ reverse_bits(backward)) & line


def compute_bishop_attacks(sq: int, occ: int) -> int:
    """Bishop attacks from ``sq`` given the occupancy, computed directly."""
    occ &= ALL_SET
    diag = ray(sq, UP, LEFT) | ray(sq, DOWN, RIGHT)
    anti_diag = ray(sq, UP, RIGHT) | ray(sq, DOWN, LEFT)
    return _line_attacks(sq, occ, diag) | _line_attacks(sq, occ, anti_diag)


def compute_rook_attacks(sq: int, occ: int) -> int:
    """Rook attacks from ``sq`` given the occupancy, computed directly."""
    occ &= ALL_SET
    rank_line = ray(sq, 0, LEFT) | ray(sq, 0, RIGHT)
    file_line = ray(sq, UP, 0) | ray(sq, DOWN, 0)
    return _line_attacks(sq, occ, rank_line) | _line_attacks(sq, occ, file_line)


@lru_cache(maxsize=None)
def _bishop_lookup(sq: int, relevant_occ: int) -> int:
    return compute_bishop_attacks(sq, relevant_occ)


@lru_cache(maxsize=None)
def _rook_lookup(sq: int, relevant_occ: int) -> int:
    return compute_rook_attacks(sq, relevant_occ)


def bishop_attacks(sq: int, occ: int) -> int:
    """Bishop attacks from ``sq``, memoised on the occupancy that matters."""
    return _bishop_lookup(sq, occ & BISHOP_MASKS[sq])


def rook_attacks(sq: int, occ: int) -> int:
    """Rook attacks from ``sq``, memoised on the occupancy that matters."""
    return _rook_lookup(sq, occ & ROOK_MASKS[sq])


def pawn_attacks(pawns: int, color: Color) -> int:
    """Squares attacked by a set of pawns of the given colour."""
    forward = rotl(pawns, 8 if color == Color.WHITE else -8)
    return shift(forward, 0, LEFT) | shift(forward, 0, RIGHT)