"""Tests for life_arena.metrics.temporal."""

from __future__ import annotations

import pytest

from life_arena.metrics.temporal import growth_trend, population_variance, stability_score


class TestStability:
    def test_requires_ten_samples(self) -> None:
        assert stability_score([5] * 9) == 0.0
        assert stability_score([]) == 0.0

    def test_constant_population_is_fully_stable(self) -> None:
        assert stability_score([42] * 10) == 1.0

    def test_variance_scaling(self) -> None:
        assert stability_score([0, 10] * 5) == pytest.approx(0.75)

    def test_floors_at_zero(self) -> None:
        assert stability_score([0, 40] * 5) == 0.0

    def test_uses_only_last_ten(self) -> None:
        history = [1000, 0] * 5 + [7] * 10
        assert stability_score(history) == 1.0


class TestGrowth:
    def test_requires_five_samples(self) -> None:
        assert growth_trend([1, 2, 3, 4]) == 0.0
        assert growth_trend([9]) == 0.0

    def test_slow_growth(self) -> None:
        assert growth_trend([0, 1, 2, 3, 4]) == pytest.approx(0.08)

    def test_clamped_high(self) -> None:
        assert growth_trend([0, 25, 50, 75, 100]) == 1.0

    def test_clamped_low(self) -> None:
        assert growth_trend([100, 80, 60, 40, 20]) == -1.0

    def test_uses_last_five(self) -> None:
        assert growth_trend([500, 0, 10, 10, 10, 10, 10]) == 0.0


def test_population_variance() -> None:
    assert population_variance([]) == 0.0
    assert population_variance([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(4.0)
