"""Generation stepping: apply a rule-set to a whole grid."""

from __future__ import annotations

from life_arena.domain.grid import Grid, count_neighbors
from life_arena.domain.rules import RuleSet


def next_generation(grid: Grid, rules: RuleSet, n: int | None = None) -> Grid:
    """Return the generation that follows *grid* under *rules*.

    Every cell is computed from the input grid only and written into a fresh
    output, so the input is never aliased or mutated.
    """
    if n is None:
        n = len(grid)
    return tuple(
        tuple(
            rules.survives(count_neighbors(grid, row, col, n))
            if grid[row][col]
            else rules.is_born(count_neighbors(grid, row, col, n))
            for col in range(n)
        )
        for row in range(n)
    )


def run_generations(grid: Grid, rules: RuleSet, generations: int) -> Grid:
    """Apply :func:`next_generation` *generations* times."""
    if generations < 0:
        raise ValueError("generations must be >= 0")
    n = len(grid)
    for _ in range(generations):
        grid = next_generation(grid, rules, n)
    return grid
