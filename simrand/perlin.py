"""
Pseudo-Perlin sequences: bounded random walks that give smooth, correlated integer noise.

This is not real Perlin noise. The walk drifts by at most `step` per element, flips
direction more often the further it is from the middle, and reflects off the bounds with a
short lockout so it does not immediately turn around again.
"""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from .picks import CollectionSampler

T = TypeVar("T")

# Elements after a boundary hit during which the walk cannot flip direction.
BOUNDARY_LOCKOUT: int = 10


class SequenceSampler(CollectionSampler):
    def pseudo_perlin_int(
        self,
        lo: int,
        hi: int,
        count: int,
        step: int,
        no_step_chance: float = 0.0,
    ) -> list[int]:
        out: list[int] = []
        if count <= 0:
            return out

        current = self.i_uncapped(lo, hi)
        sign = 1
        mid = float((hi - lo) // 2)
        extent = mid * 2
        two_thirds = (extent + mid) / 2
        countdown = 0

        for _ in range(count):
            countdown -= 1
            distance_from_mid = abs(current - mid)
            if two_thirds:
                flip_chance = distance_from_mid / two_thirds
            else:
                flip_chance = 1.0 if distance_from_mid > 0 else 0.0
            # The flip draw is consumed even while the lockout is active.
            if self.b(flip_chance) and countdown <= 0:
                sign = -sign

            if not self.b(no_step_chance):
                current += self.i_uncapped(0, step) * sign

            if current >= hi:
                countdown = BOUNDARY_LOCKOUT
                current = hi
                sign = -1
            elif current <= lo:
                countdown = BOUNDARY_LOCKOUT
                current = lo
                sign = 1

            out.append(current)

        return out

    def pseudo_perlin_int_from(
        self,
        source: Optional[Sequence[T]],
        count: int,
        step: int,
        no_step_chance: float = 0.0,
    ) -> list:
        """Walk over the indexes of `source` and map each step back into `source`."""
        if not source:
            return [0]
        if len(source) == 1:
            return [source[0]] * max(0, count)
        indexes = self.pseudo_perlin_int(0, len(source) - 1, count, step, no_step_chance)
        return [source[k] for k in indexes]
