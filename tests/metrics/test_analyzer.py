"""Tests for life_arena.metrics.analyzer.PatternAnalyzer."""

from __future__ import annotations

import pytest

from life_arena.domain.grid import create_empty_grid, place_cells
from life_arena.metrics.analyzer import PatternAnalyzer, compute_metrics


def test_empty_grid_metrics_are_zero() -> None:
    report = PatternAnalyzer().observe(create_empty_grid(15))
    assert report.population == 0
    assert report.metrics.entropy == 0.0
    assert report.metrics.diversity == 0.0
    assert report.metrics.stability == 0.0
    assert report.metrics.growth == 0.0
    assert report.matches == ()


def test_single_sample_has_no_trend() -> None:
    grid = place_cells(create_empty_grid(10), [(1, 1), (5, 5)])
    report = PatternAnalyzer().observe(grid)
    assert report.metrics.stability == 0.0
    assert report.metrics.growth == 0.0
    assert report.metrics.diversity == pytest.approx(0.2)
    assert report.metrics.entropy > 0.0


def test_report_is_cached() -> None:
    analyzer = PatternAnalyzer()
    assert analyzer.report is None
    report = analyzer.observe(create_empty_grid(5))
    assert analyzer.report is report


def test_buffers_evict_oldest() -> None:
    analyzer = PatternAnalyzer(population_history_size=3, grid_history_size=2)
    for k in range(5):
        analyzer.observe(place_cells(create_empty_grid(10), [(0, c) for c in range(k)]))
    assert list(analyzer.population_history) == [2, 3, 4]
    assert len(analyzer.grid_history) == 2


def test_stability_after_ten_constant_samples() -> None:
    analyzer = PatternAnalyzer()
    grid = place_cells(create_empty_grid(10), [(4, 4), (4, 5), (5, 4), (5, 5)])
    for _ in range(9):
        assert analyzer.observe(grid).metrics.stability == 0.0
    assert analyzer.observe(grid).metrics.stability == 1.0


def test_clear_resets_history() -> None:
    analyzer = PatternAnalyzer()
    analyzer.observe(create_empty_grid(5))
    analyzer.clear()
    assert analyzer.report is None
    assert len(analyzer.population_history) == 0


def test_invalid_buffer_size() -> None:
    with pytest.raises(ValueError):
        PatternAnalyzer(population_history_size=0)


def test_compute_metrics_influence_shape() -> None:
    grid = place_cells(create_empty_grid(12), [(3, 3)])
    metrics = compute_metrics(grid, [1])
    assert metrics.influence.shape == (12, 12)
    assert set(metrics.scalars()) == {"entropy", "diversity", "stability", "growth"}
