"""
Process-wide access to the shared Rng.

Goals:
- Provide a single seeded RNG for all simulation randomness (spawns, procedural world, etc.)
- Keep the object's identity stable across re-seeds, so cached references stay valid

Non-goals:
- Independent per-system sub-streams (every consumer shares one sequence)
"""

from __future__ import annotations

import threading
from typing import Optional

from . import config
from .debug import debug_log
from .rng import Rng

_GLOBAL_RNG: Optional[Rng] = None
_INIT_LOCK = threading.Lock()


def get_rng() -> Rng:
    """
    Get the shared Rng, creating it on first use.

    The first call seeds from `config.RNG_SEED`; a zero seed is replaced by a generated one,
    which is logged and available afterwards as `get_rng().seed`.
    """
    global _GLOBAL_RNG
    rng = _GLOBAL_RNG
    if rng is not None:
        return rng
    with _INIT_LOCK:
        if _GLOBAL_RNG is None:
            rng = Rng()
            seed = rng.set_seed_if_not_zero(config.RNG_SEED)
            debug_log(f"shared rng ready (seed={seed})")
            _GLOBAL_RNG = rng
        return _GLOBAL_RNG


def set_sim_seed(seed: int) -> None:
    """Re-seed the shared Rng in place."""
    get_rng().set_seed(seed)


def reset_rng() -> None:
    """Forget the shared Rng; the next get_rng() builds a fresh one."""
    global _GLOBAL_RNG
    with _INIT_LOCK:
        _GLOBAL_RNG = None
