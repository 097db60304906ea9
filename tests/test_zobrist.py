import itertools

import pytest

from vinechess.zobrist import (
    CASTLE_RIGHTS,
    DEFAULT_SEED,
    EN_PASSANT,
    PIECES,
    SIDE_TO_MOVE,
    MersenneTwister64,
)


def test_reference_first_output():
    rng = MersenneTwister64(5489)
    assert rng.next_u64() == 14514284786278117030


def test_reference_ten_thousandth_output():
    rng = MersenneTwister64(5489)
    for _ in range(9999):
        rng.next_u64()
    assert rng.next_u64() == 9981545732273789042


def test_same_seed_same_sequence():
    first = MersenneTwister64(DEFAULT_SEED)
    second = MersenneTwister64(DEFAULT_SEED)
    assert [first.next_u64() for _ in range(700)] == [second.next_u64() for _ in range(700)]


def test_different_seeds_differ():
    first = MersenneTwister64(1)
    second = MersenneTwister64(2)
    assert [first.next_u64() for _ in range(4)] != [second.next_u64() for _ in range(4)]


def test_outputs_fit_in_64_bits():
    rng = MersenneTwister64()
    assert all(0 <= rng.next_u64() < 1 << 64 for _ in range(1000))


def test_next_below_stays_in_range_and_covers_it():
    rng = MersenneTwister64()
    values = {rng.next_below(3, 5) for _ in range(200)}
    assert values == {3, 4}


def test_next_below_single_value():
    rng = MersenneTwister64()
    assert {rng.next_below(7, 8) for _ in range(20)} == {7}


@pytest.mark.parametrize("low, high", [(5, 5), (6, 5), (-1, 3)])
def test_next_below_rejects_bad_range(low, high):
    with pytest.raises(ValueError):
        MersenneTwister64().next_below(low, high)


def test_next_double_in_unit_interval():
    rng = MersenneTwister64()
    values = [rng.next_double() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert len(set(values)) == len(values)


def test_tables_drawn_in_order_from_default_seed():
    rng = MersenneTwister64(DEFAULT_SEED)
    assert SIDE_TO_MOVE == rng.next_u64()
    expected_pieces = [
        [[rng.next_u64() for _ in range(64)] for _ in range(2)] for _ in range(6)
    ]
    assert [[list(per_color) for per_color in per_piece] for per_piece in PIECES] == expected_pieces
    assert list(CASTLE_RIGHTS) == [rng.next_u64() for _ in range(16)]
    assert list(EN_PASSANT) == [rng.next_u64() for _ in range(8)]


def test_default_seed_keys_are_distinct():
    rng = MersenneTwister64(DEFAULT_SEED)
    count = 1 + 6 * 2 * 64 + 16 + 8
    drawn = [rng.next_u64() for _ in range(count)]
    assert len(set(drawn)) == count
    keys = [SIDE_TO_MOVE]
    keys.extend(itertools.chain.from_iterable(itertools.chain.from_iterable(PIECES)))
    keys.extend(CASTLE_RIGHTS)
    keys.extend(EN_PASSANT)
    assert keys == drawn