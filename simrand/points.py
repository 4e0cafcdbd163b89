"""
Random points as pygame.math.Vector3 values.
"""

from __future__ import annotations

from pygame.math import Vector3

from .primitives import PrimitiveSampler


def cubic_point(rng: PrimitiveSampler, lo: float, hi: float) -> Vector3:
    """Point in the cube [lo, hi)^3."""
    return Vector3(rng.f(lo, hi), rng.f(lo, hi), rng.f(lo, hi))


def point(
    rng: PrimitiveSampler,
    min_x: float,
    max_x: float,
    min_y: float,
    max_y: float,
    min_z: float,
    max_z: float,
) -> Vector3:
    """Point in an axis-aligned box, each axis half-open like `f()`."""
    return Vector3(rng.f(min_x, max_x), rng.f(min_y, max_y), rng.f(min_z, max_z))
