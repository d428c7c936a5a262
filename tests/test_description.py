"""Tests for life_arena.description."""

from __future__ import annotations

from random import Random

import numpy as np
import pytest

from life_arena.description import (
    BehaviorCategory,
    classify_behavior,
    generate_description,
)
from life_arena.metrics.analyzer import PatternMetrics


def _metrics(
    entropy: float = 0.0, diversity: float = 0.0, stability: float = 0.0, growth: float = 0.0
) -> PatternMetrics:
    return PatternMetrics(
        entropy=entropy,
        diversity=diversity,
        stability=stability,
        growth=growth,
        influence=np.zeros((3, 3)),
    )


class TestClassify:
    @pytest.mark.parametrize(
        ("metrics", "expected"),
        [
            (
                _metrics(stability=0.9, growth=0.9, diversity=0.9, entropy=0.9),
                BehaviorCategory.STABLE,
            ),
            (_metrics(growth=0.5, diversity=0.9), BehaviorCategory.GROWING),
            (_metrics(growth=-0.5, entropy=0.9), BehaviorCategory.DECLINING),
            (_metrics(diversity=0.7, entropy=0.9), BehaviorCategory.COMPLEX),
            (_metrics(entropy=0.8), BehaviorCategory.CHAOTIC),
            (_metrics(stability=0.5, growth=0.1), BehaviorCategory.TRANSITIONAL),
        ],
    )
    def test_first_matching_category_wins(
        self, metrics: PatternMetrics, expected: BehaviorCategory
    ) -> None:
        assert classify_behavior(metrics) is expected

    def test_thresholds_are_strict(self) -> None:
        assert classify_behavior(_metrics(stability=0.8)) is BehaviorCategory.TRANSITIONAL
        assert classify_behavior(_metrics(growth=0.3)) is BehaviorCategory.TRANSITIONAL


class TestGenerate:
    def test_none_before_generation_five(self) -> None:
        assert generate_description(_metrics(stability=1.0), generation=4, rng=Random(0)) is None

    def test_present_at_generation_five(self) -> None:
        description = generate_description(_metrics(stability=1.0), generation=5, rng=Random(0))
        assert description is not None
        assert description.category is BehaviorCategory.STABLE
        assert "100% consistency" in description.text
        assert description.name.endswith("Formation")

    def test_seeded_rng_is_deterministic(self) -> None:
        metrics = _metrics(diversity=0.8)
        first = generate_description(metrics, generation=10, rng=Random(42))
        second = generate_description(metrics, generation=10, rng=Random(42))
        assert first == second

    def test_growth_text_embeds_rate(self) -> None:
        description = generate_description(_metrics(growth=-0.45), generation=9, rng=Random(1))
        assert description is not None
        assert description.name.startswith("Contracting")
        assert "45.0%" in description.text
        assert "contraction" in description.text

    def test_chaotic_text_embeds_entropy(self) -> None:
        description = generate_description(_metrics(entropy=0.93), generation=6, rng=Random(2))
        assert description is not None
        assert "(0.93)" in description.text
