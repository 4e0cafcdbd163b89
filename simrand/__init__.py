"""
simrand: one deterministic random stream for a whole simulation.

Same seed, same calls, same results. Code that needs throwaway randomness (cosmetic jitter,
particles) borrows an "unbound" wall-clock engine through `Rng.lock_and_seed()` without
disturbing the deterministic stream.
"""

from __future__ import annotations

from .determinism import get_rng, reset_rng, set_sim_seed
from .errors import RngError, TypeMismatch, UnboundModeError, UnknownFunction
from .mathutil import clamp
from .registry import FunctionRegistry
from .rng import Rng
from .state import UnboundToken

__all__ = [
    "FunctionRegistry",
    "Rng",
    "RngError",
    "TypeMismatch",
    "UnboundModeError",
    "UnboundToken",
    "UnknownFunction",
    "__version__",
    "clamp",
    "get_rng",
    "reset_rng",
    "set_sim_seed",
]

__version__ = "0.1.0"
