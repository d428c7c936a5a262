"""Temporal metrics over the rolling population history."""

from __future__ import annotations

from typing import Sequence

from life_arena.config.constants import (
    GROWTH_SCALE,
    GROWTH_WINDOW,
    STABILITY_VARIANCE_SCALE,
    STABILITY_WINDOW,
)


def population_variance(values: Sequence[float]) -> float:
    """Population (not sample) variance; 0 for an empty sequence."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((value - mean) ** 2 for value in values) / len(values)


def stability_score(history: Sequence[int]) -> float:
    """``max(0, 1 - variance/100)`` over the last 10 samples, or 0 with fewer samples."""
    if len(history) < STABILITY_WINDOW:
        return 0.0
    recent = list(history)[-STABILITY_WINDOW:]
    return max(0.0, 1.0 - population_variance(recent) / STABILITY_VARIANCE_SCALE)


def growth_trend(history: Sequence[int]) -> float:
    """Population trend over the last 5 samples, scaled and clamped to [-1, 1]."""
    if len(history) < GROWTH_WINDOW:
        return 0.0
    recent = list(history)[-GROWTH_WINDOW:]
    trend = (recent[-1] - recent[0]) / len(recent)
    return max(-1.0, min(1.0, trend / GROWTH_SCALE))
