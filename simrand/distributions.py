"""
Derived distributions built on the primitive draws.

Boundary convention for the Gaussian-biased ranges:
- gf(lo, hi) lies in [lo, hi] (the normalized draw is clamped to [0, 1], so hi is reachable)
- gi(lo, hi) lies in [lo, hi] too; it truncates toward zero, so hi only comes out when the
  normalized draw clamps to exactly 1.0
"""

from __future__ import annotations

import math
import sys

from .mathutil import clamp
from .primitives import PrimitiveSampler


class DistributionSampler(PrimitiveSampler):
    """Gaussian, triangular and power-law draws."""

    def gaussian(self, mean: float = 0.0, deviation: float = 1.0) -> float:
        """
        Box-Muller, one value per call.

        Each call draws exactly two uniforms. The second normal is discarded, not cached.
        """
        u1 = self._engine.random() or sys.float_info.min
        u2 = self._engine.random()
        std_normal = math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)
        return mean + deviation * std_normal

    def normalized_g(self, mean: float = 0.0) -> float:
        """Narrow Gaussian around `mean` clamped into [0, 1]: a reusable "biased fraction"."""
        return clamp(self.gaussian(mean, 0.25), 0.0, 1.0)

    def gf(self, lo: float, hi: float, mean: float = 0.5) -> float:
        return lo + self.normalized_g(mean) * (hi - lo)

    def gi(self, lo: int, hi: int, mean: float = 0.5) -> int:
        return int(lo + (hi - lo) * self.normalized_g(mean))

    def triangular(self, lo: float, hi: float, mode: float) -> float:
        """Inverse-CDF sample of the triangular distribution on [lo, hi] peaking at `mode`."""
        u = self._engine.random()
        if hi == lo:
            return lo
        if u < (mode - lo) / (hi - lo):
            return lo + math.sqrt(u * (hi - lo) * (mode - lo))
        return hi - math.sqrt((1 - u) * (hi - lo) * (hi - mode))

    def pow(self, lo: int, hi: int, floor: int = 2) -> int:
        """`floor` raised to a uniform exponent in [lo, hi]."""
        if floor == 1:
            return 1
        return _int_pow(floor, self.i(lo, hi + 1))

    def gaussian_pow(self, lo: int, hi: int, pivot: float, floor: int = 2) -> int:
        """`floor` raised to a Gaussian-biased exponent in [lo, hi] centered on `pivot`."""
        if floor == 1:
            return 1
        return _int_pow(floor, self.gi(lo, hi, pivot))


def _int_pow(floor: int, exponent: int) -> int:
    if floor == 2 and exponent >= 0:
        return 1 << exponent
    return int(floor**exponent)
