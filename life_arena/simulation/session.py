"""Free-play simulation session: one grid, one rule-set, one analyzer.

The session is driven by an external tick driver. Every tick computes the
next generation, analyzes it once, and caches the report and description so
readers never trigger recomputation.
"""

from __future__ import annotations

import logging
import time
from random import Random

from life_arena.config.types import SessionConfig
from life_arena.description import PatternDescription, generate_description
from life_arena.domain.grid import (
    Grid,
    create_empty_grid,
    create_random_grid,
    grid_from_rows,
    grid_population,
)
from life_arena.domain.grid import toggle_cell as _toggle_cell
from life_arena.domain.presets import load_preset as _load_preset
from life_arena.domain.rules import RuleSet
from life_arena.io.snapshot import PatternSnapshot
from life_arena.metrics.analyzer import AnalysisReport, PatternAnalyzer
from life_arena.simulation.step import next_generation

logger = logging.getLogger(__name__)


class SessionRunningError(RuntimeError):
    """Raised when the grid or rules are edited while the session is running."""


class LifeSession:
    """Owns the grid, rules, generation counter, and analysis history of one run."""

    def __init__(self, config: SessionConfig | None = None, rng: Random | None = None) -> None:
        self.config = config or SessionConfig()
        self.rng = rng or Random(self.config.seed)
        self.grid_size = self.config.grid_size
        self.rules = self.config.rules
        self.is_running = False
        self.generation = 0
        self.description: PatternDescription | None = None
        self.analyzer = PatternAnalyzer()
        if self.config.preset is not None:
            grid = _load_preset(self.config.preset, self.grid_size)
        else:
            grid = create_empty_grid(self.grid_size)
        self._restart(grid)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def population(self) -> int:
        return grid_population(self.grid)

    @property
    def report(self) -> AnalysisReport:
        report = self.analyzer.report
        if report is None:
            raise RuntimeError("session has not analyzed a grid yet")
        return report

    # ------------------------------------------------------------------
    # Tick driver interface
    # ------------------------------------------------------------------

    def start(self) -> None:
        self.is_running = True

    def pause(self) -> None:
        self.is_running = False

    def tick(self) -> AnalysisReport:
        """Advance one generation and refresh the cached analysis."""
        self.grid = next_generation(self.grid, self.rules, self.grid_size)
        self.generation += 1
        report = self.analyzer.observe(self.grid)
        description = generate_description(report.metrics, self.generation, self.rng)
        if description is not None:
            self.description = description
        logger.debug("generation=%d population=%d", self.generation, report.population)
        return report

    def run(self, generations: int) -> AnalysisReport:
        """Tick *generations* times and return the last report."""
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            self.tick()
        return self.report

    # ------------------------------------------------------------------
    # Edits (paused only)
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Stop the session and clear the grid."""
        self.is_running = False
        self._restart(create_empty_grid(self.grid_size))

    def randomize(self, density: float | None = None) -> None:
        self._require_paused("randomize")
        density = self.config.density if density is None else density
        self._restart(create_random_grid(self.grid_size, density, rng=self.rng))

    def load_preset(self, key: str) -> None:
        self._require_paused("load a preset")
        self._restart(_load_preset(key, self.grid_size))

    def load_grid(self, grid: Grid) -> None:
        self._require_paused("load a grid")
        grid = grid_from_rows(grid)
        if len(grid) != self.grid_size:
            raise ValueError(f"grid must be {self.grid_size}x{self.grid_size}")
        self._restart(grid)

    def toggle_cell(self, row: int, col: int) -> None:
        """Flip one cell; the generation counter is kept, the history restarts."""
        self._require_paused("toggle cells")
        self.grid = _toggle_cell(self.grid, row, col)
        self.analyzer.clear()
        self.analyzer.observe(self.grid)

    def set_rules(self, rules: RuleSet) -> None:
        self._require_paused("change rules")
        self.rules = rules

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def snapshot(self, name: str | None = None, description: str | None = None) -> PatternSnapshot:
        """Freeze the current state for export, defaulting to the generated name/text."""
        if name is None:
            name = self.description.name if self.description else "Untitled Pattern"
        if description is None:
            description = self.description.text if self.description else ""
        return PatternSnapshot(
            name=name,
            description=description,
            grid=self.grid,
            grid_size=self.grid_size,
            generation=self.generation,
            population=self.population,
            rules=self.rules,
            timestamp=int(time.time() * 1000),
        )

    def _require_paused(self, action: str) -> None:
        if self.is_running:
            raise SessionRunningError(f"cannot {action} while the session is running")

    def _restart(self, grid: Grid) -> None:
        self.grid = grid
        self.generation = 0
        self.description = None
        self.analyzer.clear()
        self.analyzer.observe(grid)
