"""Metrics layer: entropy, diversity, temporal trends, influence, and historical matching."""

from life_arena.metrics.analyzer import (
    AnalysisReport,
    PatternAnalyzer,
    PatternMetrics,
    compute_metrics,
)
from life_arena.metrics.historical import (
    FAMOUS_PATTERNS,
    HistoricalMatch,
    HistoricalPattern,
    match_signature,
    signature_similarity,
)
from life_arena.metrics.information import binary_entropy, grid_entropy
from life_arena.metrics.spatial import component_count, diversity, influence_field
from life_arena.metrics.temporal import growth_trend, population_variance, stability_score

__all__ = [
    "AnalysisReport",
    "FAMOUS_PATTERNS",
    "HistoricalMatch",
    "HistoricalPattern",
    "PatternAnalyzer",
    "PatternMetrics",
    "binary_entropy",
    "component_count",
    "compute_metrics",
    "diversity",
    "growth_trend",
    "grid_entropy",
    "influence_field",
    "match_signature",
    "population_variance",
    "signature_similarity",
    "stability_score",
]
