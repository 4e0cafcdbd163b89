"""The process-wide shared Rng."""

import threading

import pytest

import simrand
from simrand import config, determinism


@pytest.fixture(autouse=True)
def fresh_shared_rng():
    simrand.reset_rng()
    yield
    simrand.reset_rng()


def test_get_rng_is_a_singleton():
    assert simrand.get_rng() is simrand.get_rng()


def test_get_rng_uses_configured_seed(monkeypatch):
    monkeypatch.setattr(config, "RNG_SEED", 1234)
    rng = simrand.get_rng()
    assert rng.seed == 1234
    assert rng.i(0, 1000) == simrand.Rng(1234).i(0, 1000)


def test_get_rng_generates_seed_when_zero(monkeypatch):
    monkeypatch.setattr(config, "RNG_SEED", 0)
    rng = simrand.get_rng()
    first = rng.i(0, 1000)
    assert first == simrand.Rng(rng.seed).i(0, 1000)


def test_set_sim_seed_keeps_identity():
    rng = simrand.get_rng()
    simrand.set_sim_seed(55)
    assert simrand.get_rng() is rng
    assert rng.seed == 55


def test_concurrent_first_use_builds_one_instance():
    seen = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        seen.append(determinism.get_rng())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len({id(r) for r in seen}) == 1
