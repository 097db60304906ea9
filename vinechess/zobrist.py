"""Deterministic random numbers and the Zobrist hashing keys drawn from them."""

from __future__ import annotations

import math

DEFAULT_SEED = 0x1337

_MASK = 0xFFFFFFFFFFFFFFFF
_N = 312
_M = 156
_A = 0xB5026F5AA96619E9
_UPPER = 0xFFFFFFFF80000000
_LOWER = 0x7FFFFFFF
_INIT_MULT = 6364136223846793005


class MersenneTwister64:
    """64-bit Mersenne Twister producing the standard MT19937-64 sequence."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        state = [seed & _MASK]
        for i in range(1, _N):
            prev = state[-1]
            state.append((_INIT_MULT * (prev ^ (prev >> 62)) + i) & _MASK)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            x = (mt[i] & _UPPER) | (mt[(i + 1) % _N] & _LOWER)
            x_a = x >> 1
            if x & 1:
                x_a ^= _A
            mt[i] = mt[(i + _M) % _N] ^ x_a
        self._index = 0

    def next_u64(self) -> int:
        """Next unsigned 64-bit value."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= (y >> 29) & 0x5555555555555555
        y ^= (y << 17) & 0x71D67FFFEDA60000
        y ^= (y << 37) & 0xFFF7EEE000000000
        y ^= y >> 43
        return y & _MASK

    def next_below(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)``."""
        if low < 0 or high <= low:
            raise ValueError(f"empty or negative range [{low}, {high})")
        span = high - low
        if span > _MASK + 1:
            raise ValueError("range wider than 64 bits")
        if span == _MASK + 1:
            return low + self.next_u64()
        product = self.next_u64() * span
        if (product & _MASK) < span:
            threshold = (_MASK + 1 - span) % span
            while (product & _MASK) < threshold:
                product = self.next_u64() * span
        return low + (product >> 64)

    def next_double(self) -> float:
        """Uniform float in ``[0, 1)``."""
        value = float(self.next_u64()) / float(_MASK + 1)
        if value >= 1.0:
            return math.nextafter(1.0, 0.0)
        return value


def _build_tables():
    rng = MersenneTwister64(DEFAULT_SEED)
    side = rng.next_u64()
    pieces = tuple(
        tuple(tuple(rng.next_u64() for _ in range(64)) for _ in range(2))
        for _ in range(6)
    )
    castle = tuple(rng.next_u64() for _ in range(16))
    en_passant = tuple(rng.next_u64() for _ in range(8))
    return side, pieces, castle, en_passant


SIDE_TO_MOVE, PIECES, CASTLE_RIGHTS, EN_PASSANT = _build_tables()
"""Keys indexed as PIECES[piece_type - 1][color][square], CASTLE_RIGHTS[i], EN_PASSANT[file]."""