"""Lockstep evolution of several rule-sets and end-of-round scoring.

Each competitor advances exactly one generation per scheduler tick until the
shared generation cap; after that its grid and statistics are frozen. When
every competitor has finished the round is scored and the scheduler becomes
terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Sequence

from life_arena.config.constants import (
    STABILITY_PENALTY,
    STABILITY_REWARD,
    STABILITY_SCORE_WEIGHT,
    STABLE_POPULATION_DELTA,
    SURVIVAL_BONUS,
)
from life_arena.config.types import CompetitionConfig
from life_arena.domain.grid import Grid, create_random_grid, grid_population
from life_arena.domain.rules import CompetitorRules
from life_arena.simulation.step import next_generation

logger = logging.getLogger(__name__)


class CompetitionStatus(Enum):
    """Scheduler lifecycle."""

    RUNNING = "running"
    COMPLETE = "complete"


@dataclass
class CompetitorState:
    """One rule-set's grid and running statistics within a round."""

    grid: Grid
    rules: CompetitorRules
    population: int
    generation: int = 0
    max_population: int = 0
    stability: int = 0

    @classmethod
    def create(cls, rules: CompetitorRules, grid: Grid) -> CompetitorState:
        population = grid_population(grid)
        return cls(grid=grid, rules=rules, population=population, max_population=population)

    @property
    def name(self) -> str:
        return self.rules.name


def accumulate_stability(stability: int, population_delta: int) -> int:
    """Reward a small population change, penalize a large one, never below 0."""
    if abs(population_delta) < STABLE_POPULATION_DELTA:
        stability += STABILITY_REWARD
    else:
        stability -= STABILITY_PENALTY
    return max(0, stability)


def composite_score(state: CompetitorState) -> int:
    """``max_population + 2 * stability`` plus 50 unless the competitor died out."""
    survival = SURVIVAL_BONUS if state.population > 0 else 0
    return state.max_population + state.stability * STABILITY_SCORE_WEIGHT + survival


class CompetitionScheduler:
    """Runs a fixed set of competitors for ``max_generations`` ticks.

    Not thread-safe; a single tick driver owns the scheduler.
    """

    def __init__(self, competitors: Sequence[CompetitorState], max_generations: int) -> None:
        if not competitors:
            raise ValueError("competitors must not be empty")
        if max_generations < 1:
            raise ValueError("max_generations must be >= 1")
        sizes = {len(state.grid) for state in competitors}
        if len(sizes) != 1:
            raise ValueError("all competitor grids must share one dimension")
        self.competitors: list[CompetitorState] = list(competitors)
        self.max_generations = max_generations
        self.grid_size = sizes.pop()
        self.status = CompetitionStatus.RUNNING
        self.winner: CompetitorState | None = None
        self._check_complete()

    @classmethod
    def create(cls, config: CompetitionConfig, rng: Random | None = None) -> CompetitionScheduler:
        """Enter every configured rule-set with its own randomized grid."""
        rng = rng or Random(config.seed)
        competitors = [
            CompetitorState.create(
                rules, create_random_grid(config.grid_size, config.density, rng=rng)
            )
            for rules in config.competitors
        ]
        return cls(competitors, config.max_generations)

    @property
    def is_complete(self) -> bool:
        return self.status is CompetitionStatus.COMPLETE

    def is_active(self, state: CompetitorState) -> bool:
        return state.generation < self.max_generations

    def tick(self) -> None:
        """Advance every active competitor one generation; no-op once complete."""
        if self.is_complete:
            return
        for state in self.competitors:
            if not self.is_active(state):
                continue
            grid = next_generation(state.grid, state.rules.rules, self.grid_size)
            population = grid_population(grid)
            state.stability = accumulate_stability(state.stability, population - state.population)
            state.max_population = max(state.max_population, population)
            state.grid = grid
            state.population = population
            state.generation += 1
        self._check_complete()

    def run(self) -> CompetitorState:
        """Tick until the round completes and return the winner."""
        while not self.is_complete:
            self.tick()
        if self.winner is None:
            raise RuntimeError("round finished without a winner")
        return self.winner

    def restart(self, grids: Sequence[Grid]) -> None:
        """Start a fresh round with the same rule-sets and new starting grids."""
        if len(grids) != len(self.competitors):
            raise ValueError("restart needs exactly one grid per competitor")
        if any(len(grid) != self.grid_size for grid in grids):
            raise ValueError("restart grids must match the competition grid size")
        self.competitors = [
            CompetitorState.create(state.rules, grid)
            for state, grid in zip(self.competitors, grids, strict=True)
        ]
        self.status = CompetitionStatus.RUNNING
        self.winner = None

    def scores(self) -> list[tuple[str, int]]:
        """Composite score per competitor, in entry order."""
        return [(state.name, composite_score(state)) for state in self.competitors]

    def progress(self) -> float:
        """Fraction of the generation cap reached by the slowest competitor."""
        slowest = min(state.generation for state in self.competitors)
        return min(slowest / self.max_generations, 1.0)

    def _check_complete(self) -> None:
        if any(self.is_active(state) for state in self.competitors):
            return
        best = self.competitors[0]
        best_score = composite_score(best)
        for state in self.competitors[1:]:
            score = composite_score(state)
            if score > best_score:
                best, best_score = state, score
        self.winner = best
        self.status = CompetitionStatus.COMPLETE
        logger.info("Race complete: winner=%s score=%d", best.name, best_score)
