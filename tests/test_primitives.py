"""Range and edge-case behavior of the primitive draws."""

import pytest

from simrand import Rng
from simrand.mathutil import INT32_MAX, INT32_MIN


@pytest.fixture
def rng():
    return Rng(2024)


def test_i_is_max_exclusive(rng):
    seen = {rng.i(-3, 4) for _ in range(2000)}
    assert seen == set(range(-3, 4))


def test_i_empty_range_returns_lo(rng):
    assert rng.i(5, 5) == 5


def test_i_inverted_range_raises(rng):
    with pytest.raises(ValueError):
        rng.i(5, 4)


def test_i_uncapped_is_max_inclusive(rng):
    seen = {rng.i_uncapped(-3, 3) for _ in range(2000)}
    assert seen == set(range(-3, 4))


def test_i_uncapped_truncates_float_bounds(rng):
    for _ in range(500):
        assert 1 <= rng.i_uncapped(1.9, 2.9) <= 2


def test_int32_full_range(rng):
    for _ in range(1000):
        assert INT32_MIN <= rng.int32() < INT32_MAX


def test_unit_and_f_ranges(rng):
    for _ in range(2000):
        assert 0.0 <= rng.unit() < 1.0
        assert -2.5 <= rng.f(-2.5, 7.0) < 7.0
        assert 0.0 <= rng.probability() < 1.0
        assert 0.0 <= rng.next() < 1.0


def test_b_is_not_clamped(rng):
    assert all(rng.b(1.5) for _ in range(200))
    assert not any(rng.b(-0.5) for _ in range(200))
    assert not any(rng.b(0.0) for _ in range(200))


def test_b_frequency(rng):
    hits = sum(rng.b(0.3) for _ in range(20000))
    assert abs(hits / 20000 - 0.3) < 0.02


def test_sign_values(rng):
    signs = [rng.sign(0.8) for _ in range(5000)]
    assert set(signs) == {-1, 1}
    assert abs(signs.count(1) / 5000 - 0.8) < 0.03
    assert all(rng.sign(1.0) == 1 for _ in range(100))


def test_flip_coin_is_bool(rng):
    results = {rng.flip_coin() for _ in range(200)}
    assert results == {True, False}
