"""
Primitive draws. Everything else in simrand composes from these.
"""

from __future__ import annotations

from .mathutil import INT32_MAX, INT32_MIN
from .state import GeneratorState


class PrimitiveSampler(GeneratorState):
    """Uniform integer / float / boolean draws on the active engine."""

    def int32(self) -> int:
        """Full-range signed 32-bit integer."""
        return self._engine.randrange(INT32_MIN, INT32_MAX)

    def i(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi). An empty range (lo == hi) returns lo."""
        if hi <= lo:
            if hi == lo:
                return lo
            raise ValueError(f"empty range for i({lo}, {hi})")
        return self._engine.randrange(lo, hi)

    def i_uncapped(self, lo: float, hi: float) -> int:
        """Integer in [lo, hi]. Bounds are truncated to ints and `hi` is inclusive."""
        return self.i(int(lo), int(hi) + 1)

    def unit(self) -> float:
        """Float in [0, 1)."""
        return self._engine.random()

    def f(self, lo: float, hi: float) -> float:
        """Float in [lo, hi)."""
        return self._engine.random() * (hi - lo) + lo

    def b(self, chance: float = 0.5) -> bool:
        """True with probability `chance`. Not clamped: <= 0 never, > 1 always."""
        return self._engine.random() < chance

    def sign(self, threshold: float = 0.5) -> int:
        """+1 with probability `threshold`, otherwise -1."""
        return 1 if self._engine.random() < threshold else -1

    def flip_coin(self) -> bool:
        return self.b()

    def probability(self) -> float:
        return self.f(0.0, 1.0)

    def next(self) -> float:
        return self.unit()
