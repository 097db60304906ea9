"""Move-path enumeration for checking move generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from .board import Board
from .move import Move
from .movegen import generate_moves


@dataclass(frozen=True)
class PerftBatch:
    """A position and the known leaf-node counts at several depths."""

    fen: str
    depths: tuple[tuple[int, int], ...]


PERFT_BATCHES = (
    PerftBatch(
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
        (
            (0, 1),
            (1, 20),
            (2, 400),
            (3, 8902),
            (4, 197281),
            (5, 4865609),
            (6, 119060324),
            (7, 3195901860),
        ),
    ),
    PerftBatch(
        "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq -",
        ((1, 48), (2, 2039), (3, 97862), (4, 4085603), (5, 193690690)),
    ),
)


def perft(board: Board, depth: int) -> int:
    """Number of legal move sequences of length ``depth``."""
    if depth < 0:
        raise ValueError("depth must not be negative")
    if depth == 0:
        return 1
    moves = generate_moves(board.state)
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        board.make_move(move)
        nodes += perft(board, depth - 1)
        board.undo_move()
    return nodes


def perft_divide(board: Board, depth: int) -> list[tuple[Move, int]]:
    """Each legal move with the perft count of the position it leads to."""
    if depth < 1:
        raise ValueError("depth must be at least 1")
    results = []
    for move in generate_moves(board.state):
        board.make_move(move)
        results.append((move, perft(board, depth - 1)))
        board.undo_move()
    return results


def run_perft_tests(out: TextIO, max_depth: Optional[int] = None) -> bool:
    """Check every known count up to ``max_depth``; report to ``out`` and say if all matched."""
    all_passed = True
    for batch in PERFT_BATCHES:
        board = Board(batch.fen)
        out.write(f"FEN: {batch.fen}\n")
        for depth, expected in batch.depths:
            if max_depth is not None and depth > max_depth:
                continue
            result = perft(board, depth)
            passed = result == expected
            all_passed &= passed
            mark = "✅" if passed else "❌"
            out.write(f"Depth: {depth} → Got: {result}, Expected: {expected} {mark}\n")
    return all_passed