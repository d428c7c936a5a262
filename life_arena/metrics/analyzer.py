"""Per-tick pattern analysis over a grid and its rolling history."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from life_arena.config.constants import GRID_HISTORY_SIZE, POPULATION_HISTORY_SIZE
from life_arena.domain.grid import Grid, grid_population
from life_arena.metrics.historical import (
    FAMOUS_PATTERNS,
    HistoricalMatch,
    HistoricalPattern,
    match_grid_history,
)
from life_arena.metrics.information import grid_entropy
from life_arena.metrics.spatial import diversity, influence_field
from life_arena.metrics.temporal import growth_trend, stability_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternMetrics:
    """Metrics derived from one grid and the population history up to it."""

    entropy: float
    diversity: float
    stability: float
    growth: float
    influence: np.ndarray = field(repr=False, compare=False)

    def scalars(self) -> dict[str, float]:
        """Scalar metrics only, for logging and persistence."""
        return {
            "entropy": self.entropy,
            "diversity": self.diversity,
            "stability": self.stability,
            "growth": self.growth,
        }


@dataclass(frozen=True)
class AnalysisReport:
    population: int
    metrics: PatternMetrics
    matches: tuple[HistoricalMatch, ...]


def compute_metrics(grid: Grid, population_history: Sequence[int]) -> PatternMetrics:
    """Compute every metric from scratch for *grid*.

    *population_history* must already include the population of *grid*.
    """
    population = population_history[-1] if population_history else grid_population(grid)
    return PatternMetrics(
        entropy=grid_entropy(grid, population),
        diversity=diversity(grid),
        stability=stability_score(population_history),
        growth=growth_trend(population_history),
        influence=influence_field(grid),
    )


class PatternAnalyzer:
    """Owns the population and grid ring buffers for one simulation session.

    Not thread-safe: one writer should call :meth:`observe` per tick.
    """

    def __init__(
        self,
        population_history_size: int = POPULATION_HISTORY_SIZE,
        grid_history_size: int = GRID_HISTORY_SIZE,
        catalog: Sequence[HistoricalPattern] = FAMOUS_PATTERNS,
    ) -> None:
        if population_history_size < 1:
            raise ValueError("population_history_size must be >= 1")
        if grid_history_size < 1:
            raise ValueError("grid_history_size must be >= 1")
        self.population_history: deque[int] = deque(maxlen=population_history_size)
        self.grid_history: deque[Grid] = deque(maxlen=grid_history_size)
        self.catalog = tuple(catalog)
        self.report: AnalysisReport | None = None

    def observe(self, grid: Grid) -> AnalysisReport:
        """Record *grid*, recompute metrics and matches, and cache the report."""
        population = grid_population(grid)
        self.population_history.append(population)
        self.grid_history.append(grid)
        metrics = compute_metrics(grid, self.population_history)
        matches = tuple(match_grid_history(self.grid_history, self.catalog))
        self.report = AnalysisReport(population=population, metrics=metrics, matches=matches)
        logger.debug(
            "observed population=%d entropy=%.3f diversity=%.2f matches=%s",
            population,
            metrics.entropy,
            metrics.diversity,
            [match.name for match in matches],
        )
        return self.report

    def clear(self) -> None:
        self.population_history.clear()
        self.grid_history.clear()
        self.report = None
