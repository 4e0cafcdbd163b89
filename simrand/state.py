"""
Generator state: the active engine and, while unbound mode is on, the parked one.

Goals:
- Hold exactly one active deterministic engine, replaced wholesale on re-seed
- Let callers temporarily swap in a wall-clock seeded engine ("unbound" mode) and get the
  untouched deterministic engine back afterwards

Non-goals:
- Cryptographic security
- Perfect cross-language reproducibility (this is Python's Mersenne Twister)
"""

from __future__ import annotations

import random
import time
from typing import Any, Optional

from .debug import debug_log
from .errors import UnboundModeError
from .mathutil import INT32_MAX, INT32_MIN, to_int32


def wall_clock_seed() -> int:
    """Non-reproducible seed derived from the wall clock."""
    return to_int32(time.time_ns() // 1000)


def make_engine(seed: int) -> random.Random:
    # Seed with the unsigned bit pattern: random.Random(-n) and random.Random(n) are the same stream.
    return random.Random(int(seed) & 0xFFFFFFFF)


class UnboundToken:
    """
    Proof of an outstanding `enter_unbound()`.

    Only the token returned by `enter_unbound()` can be used to leave unbound mode.
    """

    __slots__ = ("seed",)

    def __init__(self, seed: int):
        self.seed = seed

    def __repr__(self) -> str:
        return f"<UnboundToken seed={self.seed}>"


class GeneratorState:
    """Owns the active engine and the parked engine slot."""

    def __init__(self, seed: Optional[int] = None):
        self._seed: int = wall_clock_seed() if seed is None else to_int32(seed)
        self._engine: random.Random = make_engine(self._seed)
        self._parked: Optional[random.Random] = None
        self._token: Optional[UnboundToken] = None

    @property
    def seed(self) -> int:
        """Last seed applied to the deterministic stream."""
        return self._seed

    @property
    def is_unbound(self) -> bool:
        return self._parked is not None

    # -----------------------------
    # Seeding
    # -----------------------------

    def set_seed(self, seed: int) -> None:
        """
        Replace the active engine with a fresh one seeded by `seed`.

        While unbound this re-seeds the unbound engine only: the parked deterministic engine
        and `self.seed` are left alone.
        """
        seed = to_int32(seed)
        self._engine = make_engine(seed)
        if self._token is not None:
            self._token.seed = seed
            debug_log(f"re-seeded unbound engine with {seed}")
            return
        self._seed = seed
        debug_log(f"seeded with {seed}")

    def set_seed_if_not_zero(self, seed: int) -> int:
        """
        Seed deterministically and return the seed actually used.

        A zero seed first seeds from the wall clock and then draws a full-range 32-bit seed
        from that engine, so callers always end up with a concrete seed they can log and replay.
        """
        seed = to_int32(seed)
        if seed == 0:
            self.set_seed(wall_clock_seed())
            seed = self._engine.randrange(INT32_MIN, INT32_MAX)
            debug_log(f"generated seed {seed}")
        self.set_seed(seed)
        return seed

    # -----------------------------
    # Unbound mode
    # -----------------------------

    def enter_unbound(self, seed: int = 0) -> UnboundToken:
        """
        Park the deterministic engine and activate one seeded by `seed` (wall clock if zero).

        Raises UnboundModeError if unbound mode is already active: a second park would
        drop the deterministic engine for good.
        """
        if self._parked is not None:
            raise UnboundModeError("enter_unbound() called while already unbound")
        unbound_seed = to_int32(seed) if seed else wall_clock_seed()
        self._parked = self._engine
        self._engine = make_engine(unbound_seed)
        self._token = UnboundToken(unbound_seed)
        debug_log(f"entered unbound mode (seed={unbound_seed})", throttle_key="enter_unbound")
        return self._token

    def exit_unbound(self, token: UnboundToken) -> None:
        """Restore the parked deterministic engine."""
        if self._parked is None:
            raise UnboundModeError("exit_unbound() called without a matching enter_unbound()")
        if token is not self._token:
            raise UnboundModeError(f"exit_unbound() called with a stale token {token!r}")
        self._engine = self._parked
        self._parked = None
        self._token = None
        debug_log("exited unbound mode", throttle_key="exit_unbound")

    # -----------------------------
    # Snapshots (save / replay)
    # -----------------------------

    def _deterministic_engine(self) -> random.Random:
        return self._parked if self._parked is not None else self._engine

    def get_state(self) -> Any:
        """
        Snapshot of the deterministic engine's internal state.

        Inside an unbound window this is the parked engine, never the throwaway one.
        """
        return self._deterministic_engine().getstate()

    def set_state(self, state: Any) -> None:
        """Restore a `get_state()` snapshot into the deterministic engine (parked or active)."""
        self._deterministic_engine().setstate(state)
