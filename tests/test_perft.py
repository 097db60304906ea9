import io

import pytest

from vinechess.board import Board
from vinechess.perft import PERFT_BATCHES, perft, perft_divide, run_perft_tests

STARTPOS = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq -"


@pytest.mark.parametrize(
    "depth, expected", [(0, 1), (1, 20), (2, 400), (3, 8902)]
)
def test_startpos_perft(depth, expected):
    assert perft(Board(STARTPOS), depth) == expected


@pytest.mark.parametrize("depth, expected", [(1, 48), (2, 2039), (3, 97862)])
def test_kiwipete_perft(depth, expected):
    assert perft(Board(KIWIPETE), depth) == expected


def test_perft_leaves_board_unchanged():
    board = Board(KIWIPETE)
    before = board.state.hash_key
    perft(board, 2)
    assert board.state.hash_key == before


def test_divide_sums_to_perft():
    board = Board(KIWIPETE)
    divided = perft_divide(board, 2)
    assert len(divided) == 48
    assert sum(count for _, count in divided) == 2039


def test_divide_depth_one_counts_each_move_once():
    divided = perft_divide(Board(STARTPOS), 1)
    assert len(divided) == 20
    assert {count for _, count in divided} == {1}


def test_negative_depth_raises():
    with pytest.raises(ValueError):
        perft(Board(), -1)
    with pytest.raises(ValueError):
        perft_divide(Board(), 0)


def test_batches_hold_source_positions():
    assert [batch.fen for batch in PERFT_BATCHES] == [STARTPOS, KIWIPETE]
    counts = [perft(Board(batch.fen), 1) for batch in PERFT_BATCHES]
    assert counts == [dict(batch.depths)[1] for batch in PERFT_BATCHES]
    assert counts == [20, 48]


def test_run_perft_tests_report():
    out = io.StringIO()
    assert run_perft_tests(out, max_depth=2) is True
    text = out.getvalue()
    assert f"FEN: {STARTPOS}\n" in text
    assert "Depth: 1 → Got: 20, Expected: 20 ✅\n" in text
    assert "Depth: 2 → Got: 2039, Expected: 2039 ✅\n" in text
    assert "❌" not in text