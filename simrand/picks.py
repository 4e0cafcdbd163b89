"""
Collection operations: shuffles, uniform / weighted / Gaussian picks, enum sampling.

Empty sources are not errors: single picks return None and batch picks return [].
Exclusion and "try distinct" retries are bounded; once the budget is spent the last draw
is accepted even if it is excluded or a duplicate.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, MutableSequence, Optional, Sequence, Type, TypeVar

from . import config
from .debug import debug_log
from .distributions import DistributionSampler
from .mathutil import INT32_MAX, clamp

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class CollectionSampler(DistributionSampler):
    """Picks and shuffles over caller-supplied sequences."""

    def __init__(self, seed: Optional[int] = None, *, max_exclude_retries: Optional[int] = None):
        super().__init__(seed)
        if max_exclude_retries is None:
            max_exclude_retries = config.RNG_MAX_EXCLUDE_RETRIES
        self.max_exclude_retries = max(0, int(max_exclude_retries))

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """In-place Fisher-Yates; returns `items` for chaining."""
        for k in range(len(items)):
            j = self.i(0, k + 1)
            items[j], items[k] = items[k], items[j]
        return items

    def value(self, source: Sequence[T], *exclude: T) -> Optional[T]:
        """Uniform pick, redrawing (a bounded number of times) while the pick is in `exclude`."""
        n = len(source)
        if n == 0:
            return None
        picked = source[self.i(0, n) % n]
        if exclude:
            picked = self._redraw_excluded(picked, exclude, lambda: source[self.i(0, n) % n])
        return picked

    def gaussian_value(self, source: Sequence[T], mean: float = 0.5, exclude: Iterable[T] = ()) -> Optional[T]:
        """Pick biased toward the element whose normalized index is `mean`."""
        n = len(source)
        if n == 0:
            return None
        picked = source[self.gi(0, n - 1, mean)]
        exclude = tuple(exclude)
        if exclude:
            picked = self._redraw_excluded(picked, exclude, lambda: source[self.gi(0, n - 1, mean)])
        return picked

    def gaussian_values(self, source: Sequence[T], count: int, mean: float = 0.5) -> list[T]:
        n = len(source)
        if n == 0:
            return []
        return [source[self.gi(0, n - 1, mean)] for _ in range(count)]

    def values(
        self,
        source: Sequence[T],
        count: int,
        try_distinct: bool = False,
        max_tries: Optional[int] = None,
    ) -> list[T]:
        """
        `count` draws with replacement.

        With `try_distinct`, each slot redraws up to `max_tries` times (default count**2)
        while its pick is already in the result. Distinctness is best-effort only.
        """
        n = len(source)
        if n == 0:
            return []
        if max_tries is None:
            max_tries = count * count
        out: list[T] = []
        for _ in range(count):
            item = source[self.i(0, n)]
            tries = 0
            while try_distinct and item in out and tries < max_tries:
                tries += 1
                item = source[self.i(0, n)]
            out.append(item)
        return out

    def pick(self, *values: T) -> Optional[T]:
        """Uniform pick among the arguments."""
        return self.value(values)

    def pick_any(self, values: Sequence[T], probabilities: Sequence[float]) -> Optional[T]:
        """
        Weighted pick: `values[k]` is chosen with probability proportional to `probabilities[k]`.

        The weights are read, not modified. Falls back to a uniform pick when no bucket
        matches (all-zero weights, or rounding at the top of the cumulative distribution).
        """
        pick = self.probability()
        total = float(sum(probabilities))
        if total > 0.0:
            cumulative = 0.0
            for value, weight in zip(values, probabilities):
                cumulative += weight / total
                if weight != 0 and pick <= cumulative:
                    return value
        return self.value(values)

    def enum(self, enum_cls: Type[E], *negate: E) -> Optional[E]:
        """Uniform pick over an Enum's members, optionally leaving some out."""
        members = list(enum_cls)
        if negate:
            return self.value([m for m in members if m not in negate])
        if not members:
            return None
        return members[self.i(0, INT32_MAX) % len(members)]

    def gaussian_enum(self, enum_cls: Type[E], pivot: Optional[float] = None) -> Optional[E]:
        """
        Gaussian-biased enum pick.

        Without a pivot the bias leans toward the first members (the mean itself is drawn
        from [0, 0.15)). With a pivot in [0, 1] the pick centers on that fraction of the
        member list.
        """
        members = list(enum_cls)
        n = len(members)
        if n == 0:
            return None
        if pivot is None:
            return members[clamp(self.gi(0, n, self.f(0.0, 0.15)), 0, n - 1)]
        pivot = clamp(self.gf(pivot - 0.5, pivot + 0.5), 0.0, 1.0)
        return members[clamp(self.gi(0, n, pivot), 0, n - 1)]

    def vary_within(self, value, lo, hi, step):
        """One bounded random-walk step: value + [-step, step], clamped into [lo, hi]."""
        return clamp(value + self.i_uncapped(-step, step), lo, hi)

    def decide(self, a: T, b: T, chance_a: float = 0.5) -> T:
        return a if self.b(chance_a) else b

    def shuffle_order(self, a: T, b: T) -> tuple[T, T]:
        if self.flip_coin():
            return a, b
        return b, a

    def _redraw_excluded(self, picked: Any, exclude: Sequence[Any], draw) -> Any:
        tries = 0
        while picked in exclude:
            if tries >= self.max_exclude_retries:
                debug_log(
                    f"exclusion retries exhausted after {tries} draws; keeping {picked!r}",
                    throttle_key="exclude_exhausted",
                )
                break
            tries += 1
            picked = draw()
        return picked
