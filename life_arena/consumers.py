"""Data adapters for presentation consumers: heat-map overlays and the column sequencer.

These only reshape grid and metric snapshots; drawing and sound synthesis
belong to the consumer.
"""

from __future__ import annotations

import numpy as np

from life_arena.config.constants import TICK_INTERVAL_MS
from life_arena.domain.grid import Grid

PENTATONIC_SCALE: tuple[float, ...] = (
    261.63,  # C4
    293.66,  # D4
    329.63,  # E4
    392.00,  # G4
    440.00,  # A4
    523.25,  # C5
    587.33,  # D5
    659.25,  # E5
    783.99,  # G5
    880.00,  # A5
)

MIN_SEQUENCER_INTERVAL_MS = 100.0


def heatmap_overlay(
    influence: np.ndarray, threshold: float = 0.1, max_alpha: float = 0.6
) -> np.ndarray:
    """Per-cell overlay opacity: influence normalized by its maximum.

    Cells at or below *threshold* of the maximum get 0; an all-zero field
    yields an all-zero overlay.
    """
    overlay = np.zeros_like(influence, dtype=np.float64)
    if influence.size == 0:
        return overlay
    peak = float(influence.max())
    if peak <= 0.0:
        return overlay
    normalized = influence / peak
    mask = normalized > threshold
    overlay[mask] = normalized[mask] * max_alpha
    return overlay


def sequencer_interval_ms(speed_ms: float = TICK_INTERVAL_MS) -> float:
    """Sequencer step interval: slightly faster than the simulation, never below 100 ms."""
    return max(speed_ms * 0.8, MIN_SEQUENCER_INTERVAL_MS)


class ColumnSequencer:
    """Sweeps a cursor across grid columns, turning alive cells into note triggers.

    The cursor has its own cadence, independent of the simulation tick.
    """

    def __init__(self, scale: tuple[float, ...] = PENTATONIC_SCALE) -> None:
        if not scale:
            raise ValueError("scale must not be empty")
        self.scale = scale
        self.column = 0

    def notes_for_column(self, grid: Grid, column: int) -> list[float]:
        """Frequencies for the alive cells of one column, top row first."""
        return [
            self.scale[row % len(self.scale)]
            for row in range(len(grid))
            if grid[row][column]
        ]

    def advance(self, grid: Grid) -> list[float]:
        """Emit the current column's notes and move the cursor right, wrapping."""
        n = len(grid)
        if n == 0:
            return []
        column = self.column % n
        notes = self.notes_for_column(grid, column)
        self.column = (column + 1) % n
        return notes

    def reset(self) -> None:
        self.column = 0
