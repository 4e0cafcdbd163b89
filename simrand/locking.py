"""
Locks around the shared generator.

- The mode lock serializes unbound windows: only one thread at a time may swap the
  deterministic engine out.
- The critical-section lock lets a caller make several draws that no other locked
  caller can interleave with.

Both are plain `threading.Lock`s (not reentrant): acquiring one twice from the same thread
deadlocks. Bare draws take neither lock.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from .state import GeneratorState, UnboundToken


@dataclass
class RngLocks:
    mode: threading.Lock = field(default_factory=threading.Lock)
    critical: threading.Lock = field(default_factory=threading.Lock)


class LockedUnboundRng:
    """
    Scoped unbound window: mode lock + enter_unbound() on entry, exit_unbound() + release on exit.

    Usage:
        with LockedUnboundRng(rng, rng.locks.mode, seed=0):
            jitter = rng.f(-1.0, 1.0)
    """

    def __init__(self, state: GeneratorState, lock: threading.Lock, seed: int = 0):
        self._state = state
        self._lock = lock
        self._seed = seed
        self._token: Optional[UnboundToken] = None

    def __enter__(self) -> GeneratorState:
        self._lock.acquire()
        try:
            self._token = self._state.enter_unbound(self._seed)
        except BaseException:
            self._lock.release()
            raise
        return self._state

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._token is not None:
                self._state.exit_unbound(self._token)
        finally:
            self._token = None
            self._lock.release()
