"""
Small numeric helpers shared by the samplers.
"""

from __future__ import annotations

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1


def clamp(value, lo, hi):
    """Clamp `value` into [lo, hi] (inclusive)."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return ((int(value) - INT32_MIN) % 2**32) + INT32_MIN
