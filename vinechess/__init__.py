"""Bitboard chess move generation, perft counting and a UCI command loop."""

__version__ = "0.1.0"