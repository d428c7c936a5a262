"""Behavior labels, generated names, and prose summaries for analyzed patterns.

Category selection is deterministic given the metrics. Phrasing draws from
small word pools through an injected ``random.Random`` so callers can seed it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from random import Random

from life_arena.config.constants import DESCRIPTION_MIN_GENERATION
from life_arena.metrics.analyzer import PatternMetrics

STABLE_THRESHOLD = 0.8
GROWTH_THRESHOLD = 0.3
COMPLEX_THRESHOLD = 0.6
CHAOTIC_THRESHOLD = 0.7

DESCRIPTORS = ("elegant", "complex", "simple", "intricate", "balanced")


class BehaviorCategory(Enum):
    STABLE = "stable"
    GROWING = "growing"
    DECLINING = "declining"
    COMPLEX = "complex"
    CHAOTIC = "chaotic"
    TRANSITIONAL = "transitional"


@dataclass(frozen=True)
class PatternDescription:
    category: BehaviorCategory
    name: str
    text: str


def classify_behavior(metrics: PatternMetrics) -> BehaviorCategory:
    """Pick the first category whose threshold the metrics clear."""
    if metrics.stability > STABLE_THRESHOLD:
        return BehaviorCategory.STABLE
    if abs(metrics.growth) > GROWTH_THRESHOLD:
        return BehaviorCategory.GROWING if metrics.growth > 0 else BehaviorCategory.DECLINING
    if metrics.diversity > COMPLEX_THRESHOLD:
        return BehaviorCategory.COMPLEX
    if metrics.entropy > CHAOTIC_THRESHOLD:
        return BehaviorCategory.CHAOTIC
    return BehaviorCategory.TRANSITIONAL


def _stable(metrics: PatternMetrics, rng: Random) -> tuple[str, str]:
    text = (
        f"This {rng.choice(DESCRIPTORS)} pattern has achieved remarkable stability with "
        f"{metrics.stability * 100:.0f}% consistency. The configuration maintains its "
        "structure across generations, suggesting a well-balanced ecosystem."
    )
    name = f"{rng.choice(('Stable', 'Steady', 'Balanced'))} Formation"
    return name, text


def _trending(metrics: PatternMetrics, rng: Random) -> tuple[str, str]:
    growing = metrics.growth > 0
    trend = "expansion" if growing else "contraction"
    direction = "increases" if growing else "decreases"
    outlook = "favorable" if growing else "challenging"
    text = (
        f"An {rng.choice(DESCRIPTORS)} pattern showing {trend} behavior. Population "
        f"{direction} by approximately {abs(metrics.growth * 100):.1f}% per generation, "
        f"indicating {outlook} conditions."
    )
    noun = rng.choice(("Colony", "Cluster", "Formation"))
    name = f"{'Expanding' if growing else 'Contracting'} {noun}"
    return name, text


def _complex(metrics: PatternMetrics, rng: Random) -> tuple[str, str]:
    text = (
        f"A highly {rng.choice(DESCRIPTORS)} pattern with {metrics.diversity * 100:.0f}% "
        "structural diversity. Multiple distinct clusters interact dynamically, creating "
        "emergent behaviors typical of complex adaptive systems."
    )
    name = (
        f"{rng.choice(('Complex', 'Diverse', 'Multi'))} "
        f"{rng.choice(('System', 'Network', 'Assembly'))}"
    )
    return name, text


def _chaotic(metrics: PatternMetrics, rng: Random) -> tuple[str, str]:
    text = (
        f"A {rng.choice(DESCRIPTORS)} chaotic pattern with high entropy ({metrics.entropy:.2f}). "
        "The unpredictable evolution suggests sensitivity to initial conditions, a hallmark "
        "of deterministic chaos."
    )
    name = (
        f"{rng.choice(('Chaotic', 'Random', 'Turbulent'))} "
        f"{rng.choice(('Field', 'Storm', 'Flux'))}"
    )
    return name, text


def _transitional(metrics: PatternMetrics, rng: Random) -> tuple[str, str]:
    text = (
        f"A {rng.choice(DESCRIPTORS)} pattern in transition. With moderate stability and "
        "growth rates, this configuration represents the dynamic equilibrium often seen in "
        "evolving systems."
    )
    name = (
        f"{rng.choice(('Transitional', 'Evolving', 'Dynamic'))} "
        f"{rng.choice(('Pattern', 'Structure', 'Form'))}"
    )
    return name, text


_WRITERS = {
    BehaviorCategory.STABLE: _stable,
    BehaviorCategory.GROWING: _trending,
    BehaviorCategory.DECLINING: _trending,
    BehaviorCategory.COMPLEX: _complex,
    BehaviorCategory.CHAOTIC: _chaotic,
    BehaviorCategory.TRANSITIONAL: _transitional,
}


def generate_description(
    metrics: PatternMetrics, generation: int, rng: Random | None = None
) -> PatternDescription | None:
    """Describe the pattern, or return ``None`` before generation 5."""
    if generation < DESCRIPTION_MIN_GENERATION:
        return None
    category = classify_behavior(metrics)
    name, text = _WRITERS[category](metrics, rng or Random())
    return PatternDescription(category=category, name=name, text=text)
