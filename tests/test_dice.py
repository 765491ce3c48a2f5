import random

import pytest

from ludogame.dice import roll


def test_roll_stays_in_inclusive_range():
    rng = random.Random(7)
    results = {roll(1, 6, rng) for _ in range(600)}
    assert results == {1, 2, 3, 4, 5, 6}


def test_single_value_range():
    rng = random.Random(1)
    assert all(roll(4, 4, rng) == 4 for _ in range(20))


def test_same_seed_gives_same_sequence():
    first = [roll(1, 6, random.Random(42)) for _ in range(1)]
    a = random.Random(42)
    b = random.Random(42)
    seq_a = [roll(1, 6, a) for _ in range(30)]
    seq_b = [roll(1, 6, b) for _ in range(30)]
    assert seq_a == seq_b
    assert seq_a[0] == first[0]


def test_default_source_used_without_rng():
    values = [roll(0, 1) for _ in range(200)]
    assert set(values) <= {0, 1}
    assert len(values) == 200


def test_empty_range_raises():
    with pytest.raises(ValueError):
        roll(6, 1)