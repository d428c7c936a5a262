"""Life-like cellular automata: stepping, pattern analysis, and rule-set competitions."""

from life_arena.domain.grid import Grid, count_neighbors, create_empty_grid, create_random_grid
from life_arena.domain.rules import CONWAY_CLASSIC, PREDEFINED_RULES, RuleSet
from life_arena.experiments.competition import CompetitionScheduler
from life_arena.metrics.analyzer import PatternAnalyzer, PatternMetrics
from life_arena.simulation.session import LifeSession
from life_arena.simulation.step import next_generation

__all__ = [
    "CONWAY_CLASSIC",
    "CompetitionScheduler",
    "Grid",
    "LifeSession",
    "PREDEFINED_RULES",
    "PatternAnalyzer",
    "PatternMetrics",
    "RuleSet",
    "count_neighbors",
    "create_empty_grid",
    "create_random_grid",
    "next_generation",
]
