"""Bounded square boolean grid and Moore-neighborhood counting.

Grids are immutable nested tuples indexed ``grid[row][col]``. Cells outside
``[0, n)`` are treated as dead: there is no wraparound, so boundary cells have
fewer effective neighbors.
"""

from __future__ import annotations

import logging
from random import Random
from typing import Iterable, TypeAlias

from life_arena.config.constants import RANDOM_DENSITY

logger = logging.getLogger(__name__)

Grid: TypeAlias = tuple[tuple[bool, ...], ...]
"""Square matrix of cell states; ``True`` is alive."""

Cell: TypeAlias = tuple[int, int]
"""A ``(row, col)`` coordinate."""

_MOORE_OFFSETS: tuple[Cell, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def validate_grid_size(n: int) -> int:
    """Return *n* unchanged, raising ``ValueError`` if it is not a usable side length."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"grid size must be an integer, got {n!r}")
    if n < 1:
        raise ValueError("grid size must be >= 1")
    return n


def create_empty_grid(n: int) -> Grid:
    """Return an n x n grid with every cell dead."""
    validate_grid_size(n)
    row = (False,) * n
    return (row,) * n


def create_random_grid(n: int, density: float = RANDOM_DENSITY, rng: Random | None = None) -> Grid:
    """Return an n x n grid where each cell is alive independently with probability *density*."""
    validate_grid_size(n)
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be in [0.0, 1.0]")
    rng = rng or Random()
    threshold = 1.0 - density
    return tuple(tuple(rng.random() > threshold for _ in range(n)) for _ in range(n))


def count_neighbors(grid: Grid, row: int, col: int, n: int | None = None) -> int:
    """Count alive cells in the Moore neighborhood of ``(row, col)``.

    Neighbors outside ``[0, n)`` are skipped, never wrapped.
    """
    if n is None:
        n = len(grid)
    count = 0
    for dr, dc in _MOORE_OFFSETS:
        r = row + dr
        c = col + dc
        if 0 <= r < n and 0 <= c < n and grid[r][c]:
            count += 1
    return count


def grid_population(grid: Grid) -> int:
    """Return the number of alive cells."""
    return sum(sum(row) for row in grid)


def alive_cells(grid: Grid) -> list[Cell]:
    """Return alive coordinates in row-major order."""
    return [(r, c) for r, row in enumerate(grid) for c, alive in enumerate(row) if alive]


def grid_from_rows(rows: Iterable[Iterable[object]]) -> Grid:
    """Build a grid from any nested iterable of truthy values, checking it is square."""
    grid = tuple(tuple(bool(cell) for cell in row) for row in rows)
    n = len(grid)
    validate_grid_size(n)
    if any(len(row) != n for row in grid):
        raise ValueError("grid rows must all have length equal to the row count")
    return grid


def _as_cell(entry: object) -> Cell | None:
    try:
        row, col = entry  # type: ignore[misc]
    except (TypeError, ValueError):
        return None
    if isinstance(row, bool) or isinstance(col, bool):
        return None
    if not isinstance(row, int) or not isinstance(col, int):
        return None
    return row, col


def place_cells(grid: Grid, cells: Iterable[Cell], offset: Cell = (0, 0)) -> Grid:
    """Return a copy of *grid* with *cells* (shifted by *offset*) set alive.

    Coordinates that land outside the grid, and entries that are not a pair of
    integers, are dropped.
    """
    n = len(grid)
    rows = [list(row) for row in grid]
    dropped = 0
    for entry in cells:
        cell = _as_cell(entry)
        if cell is None:
            dropped += 1
            continue
        r = cell[0] + offset[0]
        c = cell[1] + offset[1]
        if 0 <= r < n and 0 <= c < n:
            rows[r][c] = True
        else:
            dropped += 1
    if dropped:
        logger.warning(
            "Dropped %d out-of-bounds or malformed cell(s) for %dx%d grid", dropped, n, n
        )
    return tuple(tuple(row) for row in rows)


def set_cell(grid: Grid, row: int, col: int, alive: bool) -> Grid:
    """Return a copy of *grid* with one cell set to *alive*."""
    n = len(grid)
    if not (0 <= row < n and 0 <= col < n):
        raise ValueError(f"cell ({row}, {col}) is outside the {n}x{n} grid")
    updated = list(grid[row])
    updated[col] = alive
    return grid[:row] + (tuple(updated),) + grid[row + 1 :]


def toggle_cell(grid: Grid, row: int, col: int) -> Grid:
    """Return a copy of *grid* with one cell flipped."""
    n = len(grid)
    if not (0 <= row < n and 0 <= col < n):
        raise ValueError(f"cell ({row}, {col}) is outside the {n}x{n} grid")
    return set_cell(grid, row, col, not grid[row][col])
