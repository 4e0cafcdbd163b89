"""
Random colors as pygame.Color values.
"""

from __future__ import annotations

import pygame

from .picks import CollectionSampler


def rgba(rng: CollectionSampler) -> pygame.Color:
    """Uniform color: r, g, b, a each in [0, 255], drawn in that order."""
    return pygame.Color(rng.i(0, 256), rng.i(0, 256), rng.i(0, 256), rng.i(0, 256))


def vary_color(rng: CollectionSampler, color, step: int) -> pygame.Color:
    """Nudge each of r, g, b by at most `step` (alpha unchanged). Returns a new color."""
    color = pygame.Color(color)
    return pygame.Color(
        rng.vary_within(color.r, 0, 255, step),
        rng.vary_within(color.g, 0, 255, step),
        rng.vary_within(color.b, 0, 255, step),
        color.a,
    )
