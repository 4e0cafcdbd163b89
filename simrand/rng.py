"""
The Rng object: one deterministic stream plus the locks and helpers around it.

Create one per process (see `simrand.determinism.get_rng()`) and hand it to every consumer
of randomness. Per-system sub-streams are deliberately not offered: all consumers share
one sequence, so call order is part of the replay.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Type, TypeVar

import pygame

from . import colors, points
from .locking import LockedUnboundRng, RngLocks
from .perlin import SequenceSampler
from .registry import FunctionRegistry

T = TypeVar("T")


class Rng(SequenceSampler):
    """Deterministic generator with unbound-mode locking and a registered-function table."""

    def __init__(self, seed: Optional[int] = None, *, max_exclude_retries: Optional[int] = None):
        super().__init__(seed, max_exclude_retries=max_exclude_retries)
        self.locks = RngLocks()
        self.functions = FunctionRegistry()

    def __repr__(self) -> str:
        mode = "unbound" if self.is_unbound else "deterministic"
        return f"<Rng seed={self.seed} mode={mode}>"

    # -----------------------------
    # Mode control
    # -----------------------------

    def lock_and_seed(self, seed: int = 0) -> LockedUnboundRng:
        """Scoped unbound window under the mode lock; always restored on exit."""
        return LockedUnboundRng(self, self.locks.mode, seed)

    def run_unbound_locked(self, action: Callable[[], T], seed: int = 0) -> T:
        """Run `action` in an exclusive unbound window; mode is restored even if it raises."""
        with self.lock_and_seed(seed):
            return action()

    def run_locked(self, action: Callable[[], T]) -> T:
        """Run `action` under the critical-section lock (independent of the mode lock)."""
        with self.locks.critical:
            return action()

    @contextmanager
    def critical(self) -> Iterator["Rng"]:
        with self.locks.critical:
            yield self

    # -----------------------------
    # Registered functions
    # -----------------------------

    def register_function(self, func: Callable[[], Any], result_type: type = object) -> int:
        return self.functions.register(func, result_type)

    def call_function(self, handle: int, expected_type: Type[T] = object) -> T:
        return self.functions.call(handle, expected_type)

    # -----------------------------
    # Colors / points
    # -----------------------------

    def rgba(self) -> pygame.Color:
        return colors.rgba(self)

    def vary_color(self, color, step: int) -> pygame.Color:
        return colors.vary_color(self, color, step)

    def cubic_point(self, lo: float, hi: float) -> pygame.math.Vector3:
        return points.cubic_point(self, lo, hi)

    def point(self, min_x, max_x, min_y, max_y, min_z, max_z) -> pygame.math.Vector3:
        return points.point(self, min_x, max_x, min_y, max_y, min_z, max_z)
