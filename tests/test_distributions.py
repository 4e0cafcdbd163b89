"""Gaussian, Gaussian-biased ranges, triangular and power draws."""

import math
import random
import statistics

import pytest

from simrand import Rng
from simrand.state import make_engine


@pytest.fixture
def rng():
    return Rng(31337)


def test_gaussian_matches_box_muller_formula():
    rng = Rng(8)
    engine = make_engine(8)
    for _ in range(50):
        u1 = engine.random()
        u2 = engine.random()
        expected = math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2) * 3.0 + 10.0
        assert rng.gaussian(10.0, 3.0) == pytest.approx(expected)


def test_gaussian_moments(rng):
    samples = [rng.gaussian(5.0, 2.0) for _ in range(20000)]
    assert statistics.fmean(samples) == pytest.approx(5.0, abs=0.1)
    assert statistics.pstdev(samples) == pytest.approx(2.0, abs=0.1)


def test_gaussian_survives_zero_uniform(rng, monkeypatch):
    values = iter([0.0, 0.25])
    monkeypatch.setattr(rng._engine, "random", lambda: next(values))
    assert math.isfinite(rng.gaussian())


def test_normalized_g_is_clamped(rng):
    for _ in range(2000):
        assert 0.0 <= rng.normalized_g(0.9) <= 1.0


def test_gf_range_is_inclusive(rng):
    samples = [rng.gf(10.0, 20.0, 1.0) for _ in range(2000)]
    assert all(10.0 <= s <= 20.0 for s in samples)
    # Mean at the top edge clamps a large share of draws onto hi.
    assert 20.0 in samples


def test_gi_range_is_inclusive(rng):
    samples = [rng.gi(0, 10, 1.0) for _ in range(2000)]
    assert all(0 <= s <= 10 for s in samples)
    assert 10 in samples
    assert all(0 <= rng.gi(0, 10, 0.0) <= 10 for _ in range(2000))


def test_gi_centers_on_mean(rng):
    samples = [rng.gi(0, 100, 0.5) for _ in range(5000)]
    assert statistics.fmean(samples) == pytest.approx(49.5, abs=2.0)


def test_triangular_range_and_mode(rng):
    samples = [rng.triangular(0.0, 10.0, 2.0) for _ in range(20000)]
    assert all(0.0 <= s <= 10.0 for s in samples)
    # Mean of a triangular distribution is (lo + hi + mode) / 3.
    assert statistics.fmean(samples) == pytest.approx(4.0, abs=0.1)


def test_triangular_uses_one_draw():
    rng = Rng(4)
    reference = random.Random()
    reference.setstate(rng.get_state())
    rng.triangular(0.0, 1.0, 0.5)
    reference.random()
    assert rng.unit() == reference.random()


def test_triangular_degenerate_range_returns_lo():
    rng = Rng(4)
    reference = random.Random()
    reference.setstate(rng.get_state())
    assert rng.triangular(3.0, 3.0, 3.0) == 3.0
    reference.random()
    assert rng.unit() == reference.random()


def test_pow_special_floors(rng):
    assert rng.pow(0, 10, 1) == 1
    for _ in range(200):
        assert rng.pow(0, 4, 2) in {1, 2, 4, 8, 16}
        assert rng.pow(1, 3, 3) in {3, 9, 27}


def test_pow_negative_exponent_does_not_shift(rng):
    for _ in range(100):
        assert rng.pow(-2, -1, 2) == 0


def test_gaussian_pow(rng):
    assert rng.gaussian_pow(0, 8, 0.5, 1) == 1
    for _ in range(200):
        assert rng.gaussian_pow(0, 8, 0.5) in {2**k for k in range(9)}
        assert rng.gaussian_pow(0, 3, 0.5, 10) in {1, 10, 100, 1000}
