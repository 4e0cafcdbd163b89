"""Unbound-mode locking and critical sections across threads."""

import threading
import time

import pytest

from simrand import Rng, UnboundModeError


def test_run_unbound_locked_restores_mode():
    rng = Rng(21)
    expected = Rng(21).i(0, 1000)
    seen = rng.run_unbound_locked(lambda: rng.is_unbound)
    assert seen is True
    assert not rng.is_unbound
    assert rng.i(0, 1000) == expected


def test_run_unbound_locked_returns_result_and_uses_seed():
    rng = Rng(21)
    value = rng.run_unbound_locked(lambda: rng.i(0, 1_000_000), seed=5)
    assert value == Rng(5).i(0, 1_000_000)


def test_run_unbound_locked_restores_after_exception():
    rng = Rng(21)

    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        rng.run_unbound_locked(boom)
    assert not rng.is_unbound
    assert not rng.locks.mode.locked()


def test_lock_and_seed_scope():
    rng = Rng(3)
    with rng.lock_and_seed(10) as inside:
        assert inside is rng
        assert rng.is_unbound
        assert rng.locks.mode.locked()
        value = rng.i(0, 100)
    assert value == Rng(10).i(0, 100)
    assert not rng.is_unbound
    assert not rng.locks.mode.locked()


def test_lock_and_seed_releases_lock_when_enter_fails():
    rng = Rng(3)
    token = rng.enter_unbound()
    with pytest.raises(UnboundModeError):
        with rng.lock_and_seed():
            pass
    assert not rng.locks.mode.locked()
    rng.exit_unbound(token)


def test_unbound_windows_never_interleave():
    rng = Rng(1)
    inside = 0
    max_inside = 0
    guard = threading.Lock()
    observed = []

    def action():
        nonlocal inside, max_inside
        with guard:
            inside += 1
            max_inside = max(max_inside, inside)
        observed.append(rng.is_unbound)
        time.sleep(0.002)
        observed.append(rng.is_unbound)
        with guard:
            inside -= 1

    def worker():
        for _ in range(10):
            rng.run_unbound_locked(action)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert max_inside == 1
    assert all(observed)
    assert len(observed) == 80
    assert not rng.is_unbound


def test_run_locked_sections_are_atomic():
    rng = Rng(1)
    log = []

    def section(tag):
        def run():
            for _ in range(5):
                log.append(tag)
                time.sleep(0.0005)
        return run

    threads = [threading.Thread(target=rng.run_locked, args=(section(k),)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    chunks = [log[k:k + 5] for k in range(0, len(log), 5)]
    assert len(chunks) == 4
    assert all(len(set(c)) == 1 for c in chunks)


def test_critical_lock_is_independent_of_mode_lock():
    rng = Rng(1)
    with rng.lock_and_seed():
        assert rng.run_locked(lambda: 42) == 42
        with rng.critical() as r:
            assert r.is_unbound
