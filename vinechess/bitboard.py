"""64-bit bitboards represented as plain Python integers."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator

from .types import NO_SQUARE

ALL_SET = 0xFFFFFFFFFFFFFFFF
FIRST_RANK = 0xFF
_FILE_A = ALL_SET // FIRST_RANK

UP = 1
DOWN = -1
LEFT = -1
RIGHT = 1


def square_bb(sq: int) -> int:
    """Bitboard with only the given square set."""
    return 1 << (sq & 63)


def rank_mask(rank: int) -> int:
    """Bitboard of every square on a rank."""
    return (FIRST_RANK << 8 * rank) & ALL_SET


def file_mask(file: int) -> int:
    """Bitboard of every square on a file."""
    return (_FILE_A << file) & ALL_SET


def pop_count(bb: int) -> int:
    """Number of set squares."""
    return bin(bb & ALL_SET).count("1")


def lsb(bb: int) -> int:
    """Lowest set square, or 64 for an empty board."""
    if not bb:
        return 64
    return (bb & -bb).bit_length() - 1


def msb(bb: int) -> int:
    """Highest set square, or 64 for an empty board."""
    if not bb:
        return 64
    return (bb & ALL_SET).bit_length() - 1


def rotl(bb: int, shift: int) -> int:
    """Rotate left by ``shift`` bits; negative shifts rotate right."""
    shift %= 64
    bb &= ALL_SET
    return ((bb << shift) | (bb >> (64 - shift))) & ALL_SET


def rotr(bb: int, shift: int) -> int:
    """Rotate right by ``shift`` bits; negative shifts rotate left."""
    return rotl(bb, -shift)


def reverse_bits(bb: int) -> int:
    """Mirror the board so that square 0 becomes square 63."""
    return int(f"{bb & ALL_SET:064b}"[::-1], 2)


def shift(bb: int, rank_diff: int, file_diff: int) -> int:
    """Move every set square by the given rank and file steps, dropping wrap-arounds."""
    keep = (rotl(FIRST_RANK, file_diff) & FIRST_RANK) * _FILE_A
    res = bb & ALL_SET
    res = (res << file_diff) if file_diff > 0 else (res >> -file_diff)
    res = (res << rank_diff * 8) if rank_diff > 0 else (res >> -rank_diff * 8)
    return res & keep & ALL_SET


@lru_cache(maxsize=None)
def ray(sq: int, rank_diff: int, file_diff: int) -> int:
    """Squares reached from ``sq`` by repeating one step, not including ``sq``."""
    if sq == NO_SQUARE:
        return 0
    origin = square_bb(sq)
    res = origin
    for _ in range(7):
        res |= shift(res, rank_diff, file_diff)
    return res ^ origin


def iter_squares(bb: int) -> Iterator[int]:
    """Yield the set squares from lowest to highest."""
    bb &= ALL_SET
    while bb:
        yield lsb(bb)
        bb &= bb - 1