"""Information-theoretic grid metrics."""

from __future__ import annotations

import math

from life_arena.domain.grid import Grid, grid_population


def binary_entropy(p: float) -> float:
    """Shannon entropy in bits of a Bernoulli(p) variable; 0 at p in {0, 1}."""
    if p <= 0.0 or p >= 1.0:
        return 0.0
    return -(p * math.log2(p) + (1.0 - p) * math.log2(1.0 - p))


def grid_entropy(grid: Grid, population: int | None = None) -> float:
    """Entropy of the alive/dead proportion over the whole grid."""
    total_cells = len(grid) * len(grid[0]) if grid else 0
    if total_cells == 0:
        return 0.0
    if population is None:
        population = grid_population(grid)
    return binary_entropy(population / total_cells)
