"""Experiments layer: competition scheduling and batch runs."""

from life_arena.experiments.competition import (
    CompetitionScheduler,
    CompetitionStatus,
    CompetitorState,
    accumulate_stability,
    composite_score,
)
from life_arena.experiments.runs import (
    CompetitionResult,
    SessionResult,
    run_competition,
    run_session,
)

__all__ = [
    "CompetitionResult",
    "CompetitionScheduler",
    "CompetitionStatus",
    "CompetitorState",
    "SessionResult",
    "accumulate_stability",
    "composite_score",
    "run_competition",
    "run_session",
]
