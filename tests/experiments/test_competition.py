"""Tests for life_arena.experiments.competition."""

from __future__ import annotations

from random import Random

import pytest

from life_arena.config.types import CompetitionConfig
from life_arena.domain.grid import create_empty_grid, create_random_grid, place_cells
from life_arena.domain.rules import CONWAY_CLASSIC, PREDEFINED_RULES, CompetitorRules, RuleSet
from life_arena.experiments.competition import (
    CompetitionScheduler,
    CompetitionStatus,
    CompetitorState,
    accumulate_stability,
    composite_score,
)

CONWAY = CompetitorRules("Conway", "#000000", CONWAY_CLASSIC)
BLOCK = [(4, 4), (4, 5), (5, 4), (5, 5)]


def _state(cells: list[tuple[int, int]], rules: CompetitorRules = CONWAY) -> CompetitorState:
    return CompetitorState.create(rules, place_cells(create_empty_grid(10), cells))


class TestStabilityAccumulator:
    def test_small_change_rewarded(self) -> None:
        assert accumulate_stability(3, 4) == 4
        assert accumulate_stability(3, -4) == 4

    def test_large_change_penalized(self) -> None:
        assert accumulate_stability(3, 10) == 1
        assert accumulate_stability(3, -5) == 1

    def test_floor_at_zero(self) -> None:
        assert accumulate_stability(1, 7) == 0
        assert accumulate_stability(0, 50) == 0


class TestScoring:
    def test_block_scores_population_stability_and_survival(self) -> None:
        scheduler = CompetitionScheduler([_state(BLOCK)], max_generations=10)
        winner = scheduler.run()
        assert winner.stability == 10
        assert composite_score(winner) == 4 + 20 + 50

    def test_extinct_competitor_gets_no_survival_bonus(self) -> None:
        scheduler = CompetitionScheduler([_state([(2, 2)])], max_generations=10)
        state = scheduler.run()
        assert state.population == 0
        assert state.max_population == 1
        assert composite_score(state) == 1 + 20

    def test_first_maximum_wins_ties(self) -> None:
        twin = CompetitorRules("Twin", "#ffffff", CONWAY_CLASSIC)
        scheduler = CompetitionScheduler([_state(BLOCK), _state(BLOCK, twin)], max_generations=3)
        assert scheduler.run().name == "Conway"


class TestScheduler:
    def test_predefined_race_runs_to_cap(self) -> None:
        scheduler = CompetitionScheduler.create(CompetitionConfig(seed=7))
        assert len(scheduler.competitors) == 6
        assert scheduler.status is CompetitionStatus.RUNNING
        ticks = 0
        while not scheduler.is_complete:
            scheduler.tick()
            ticks += 1
        assert ticks == 100
        assert all(state.generation == 100 for state in scheduler.competitors)
        assert scheduler.winner is not None
        scores = dict(scheduler.scores())
        assert scores[scheduler.winner.name] == max(scores.values())

    def test_run_on_completed_round_returns_same_winner(self) -> None:
        scheduler = CompetitionScheduler([_state(BLOCK)], max_generations=3)
        winner = scheduler.run()
        assert scheduler.run() is winner
        assert winner.generation == 3

    def test_tick_after_completion_is_noop(self) -> None:
        scheduler = CompetitionScheduler.create(
            CompetitionConfig(max_generations=5), rng=Random(3)
        )
        scheduler.run()
        before = [(s.generation, s.population, s.stability, s.grid) for s in scheduler.competitors]
        scheduler.tick()
        after = [(s.generation, s.population, s.stability, s.grid) for s in scheduler.competitors]
        assert after == before
        assert scheduler.status is CompetitionStatus.COMPLETE

    def test_competitors_step_independently(self) -> None:
        seeds = CompetitorRules("Seeds", "#f59e0b", RuleSet(2, 2, 3))
        scheduler = CompetitionScheduler([_state(BLOCK), _state(BLOCK, seeds)], max_generations=2)
        scheduler.tick()
        conway, seeded = scheduler.competitors
        assert conway.population == 4
        # Block cells have 3 neighbors, so they die under survival 2..2.
        assert seeded.population == 0
        assert scheduler.progress() == pytest.approx(0.5)

    def test_restart_resets_round(self) -> None:
        config = CompetitionConfig(grid_size=12, max_generations=4)
        scheduler = CompetitionScheduler.create(config, rng=Random(0))
        scheduler.run()
        rng = Random(1)
        grids = [create_random_grid(12, 0.3, rng=rng) for _ in PREDEFINED_RULES]
        scheduler.restart(grids)
        assert scheduler.status is CompetitionStatus.RUNNING
        assert scheduler.winner is None
        assert [state.grid for state in scheduler.competitors] == grids
        assert all(state.generation == 0 for state in scheduler.competitors)
        assert all(state.stability == 0 for state in scheduler.competitors)
        assert [state.name for state in scheduler.competitors] == [r.name for r in PREDEFINED_RULES]

    def test_restart_rejects_wrong_grid_count(self) -> None:
        scheduler = CompetitionScheduler([_state(BLOCK)], max_generations=2)
        with pytest.raises(ValueError, match="one grid per competitor"):
            scheduler.restart([])

    def test_rejects_mixed_grid_sizes(self) -> None:
        small = CompetitorState.create(CONWAY, create_empty_grid(5))
        with pytest.raises(ValueError, match="dimension"):
            CompetitionScheduler([_state(BLOCK), small], max_generations=2)

    def test_rejects_empty_competitors(self) -> None:
        with pytest.raises(ValueError):
            CompetitionScheduler([], max_generations=2)

    def test_initial_state(self) -> None:
        state = _state(BLOCK)
        assert state.population == state.max_population == 4
        assert state.generation == 0
        assert state.stability == 0
