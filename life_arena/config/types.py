"""Configuration dataclasses for sessions and competitions.

Every config is frozen and validates itself in ``__post_init__`` so invalid
values are rejected at the boundary instead of inside the stepping code.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from life_arena.config.constants import (
    COMPETITION_GRID_SIZE,
    GRID_SIZE,
    MAX_GENERATIONS,
    RANDOM_DENSITY,
)
from life_arena.domain.rules import CONWAY_CLASSIC, PREDEFINED_RULES, CompetitorRules, RuleSet

__all__ = [
    "CompetitionConfig",
    "SessionConfig",
]


def _validate_density(density: float) -> None:
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be in [0.0, 1.0]")


@dataclass(frozen=True)
class SessionConfig:
    """Runtime settings for one free-play simulation session."""

    grid_size: int = GRID_SIZE
    generations: int = 100
    rules: RuleSet = CONWAY_CLASSIC
    density: float = RANDOM_DENSITY
    preset: str | None = None
    seed: int = 0

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be >= 1")
        if self.generations < 0:
            raise ValueError("generations must be >= 0")
        _validate_density(self.density)


@dataclass(frozen=True)
class CompetitionConfig:
    """Runtime settings for one or more competition rounds."""

    grid_size: int = COMPETITION_GRID_SIZE
    max_generations: int = MAX_GENERATIONS
    density: float = RANDOM_DENSITY
    competitors: tuple[CompetitorRules, ...] = PREDEFINED_RULES
    n_rounds: int = 1
    seed: int = 0
    out_dir: Path = Path("data")

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be >= 1")
        if self.max_generations < 1:
            raise ValueError("max_generations must be >= 1")
        if self.n_rounds < 1:
            raise ValueError("n_rounds must be >= 1")
        if not self.competitors:
            raise ValueError("competitors must not be empty")
        names = [competitor.name for competitor in self.competitors]
        if len(set(names)) != len(names):
            raise ValueError("competitor names must be distinct")
        _validate_density(self.density)
