"""Spatial metrics: connected components, diversity, and the influence field."""

from __future__ import annotations

import math

import numpy as np

from life_arena.config.constants import (
    DIVERSITY_COMPONENT_SCALE,
    INFLUENCE_FALLOFF,
    INFLUENCE_RADIUS,
)
from life_arena.domain.grid import Grid


def component_count(grid: Grid) -> int:
    """Count 4-connected components of alive cells (no wraparound).

    Diagonal contact does not join components, unlike the 8-cell
    neighborhood used when stepping.
    """
    n = len(grid)
    seen: set[tuple[int, int]] = set()
    components = 0

    for row in range(n):
        for col in range(n):
            if not grid[row][col] or (row, col) in seen:
                continue
            components += 1
            stack = [(row, col)]
            seen.add((row, col))
            while stack:
                r, c = stack.pop()
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                    if not (0 <= nr < n and 0 <= nc < n):
                        continue
                    if (nr, nc) in seen or not grid[nr][nc]:
                        continue
                    seen.add((nr, nc))
                    stack.append((nr, nc))

    return components


def diversity(grid: Grid) -> float:
    """Component count scaled into [0, 1]."""
    return min(component_count(grid) / DIVERSITY_COMPONENT_SCALE, 1.0)


def _influence_kernel(radius: int, falloff: float) -> np.ndarray:
    size = 2 * radius + 1
    kernel = np.zeros((size, size), dtype=np.float64)
    for dr in range(-radius, radius + 1):
        for dc in range(-radius, radius + 1):
            distance = math.sqrt(dr * dr + dc * dc)
            kernel[dr + radius, dc + radius] = max(0.0, 1.0 - distance / falloff)
    return kernel


_KERNEL = _influence_kernel(INFLUENCE_RADIUS, INFLUENCE_FALLOFF)


def influence_field(grid: Grid) -> np.ndarray:
    """Heat map where every alive cell spreads ``max(0, 1 - d/3)`` over its 5x5 square.

    Contributions add up across sources; the part of a square that falls
    outside the grid is discarded.
    """
    n = len(grid)
    radius = INFLUENCE_RADIUS
    influence = np.zeros((n, n), dtype=np.float64)
    for row in range(n):
        for col in range(n):
            if not grid[row][col]:
                continue
            r0, r1 = max(row - radius, 0), min(row + radius + 1, n)
            c0, c1 = max(col - radius, 0), min(col + radius + 1, n)
            influence[r0:r1, c0:c1] += _KERNEL[
                r0 - row + radius : r1 - row + radius,
                c0 - col + radius : c1 - col + radius,
            ]
    return influence
