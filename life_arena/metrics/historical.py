"""Coarse matching of population signatures against famous patterns.

A signature is the population at three consecutive generations. Matching is
a nearest-neighbor test on those three integers, not a shape comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from life_arena.config.constants import MATCH_THRESHOLD, MAX_MATCHES, SIGNATURE_LENGTH
from life_arena.domain.grid import Grid, grid_population


@dataclass(frozen=True)
class HistoricalPattern:
    """Read-only catalog entry for a well-known pattern."""

    name: str
    description: str
    signature: tuple[int, ...]
    discovered_by: str | None = None
    year: int | None = None


@dataclass(frozen=True)
class HistoricalMatch:
    pattern: HistoricalPattern
    similarity: float

    @property
    def name(self) -> str:
        return self.pattern.name

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.pattern.name,
            "similarity": self.similarity,
            "description": self.pattern.description,
            "discovered_by": self.pattern.discovered_by,
            "year": self.pattern.year,
        }


FAMOUS_PATTERNS: tuple[HistoricalPattern, ...] = (
    HistoricalPattern(
        "Glider",
        "The first discovered spaceship that travels diagonally",
        (5, 4, 3),
        "Richard K. Guy",
        1970,
    ),
    HistoricalPattern(
        "Blinker",
        "The simplest oscillator with period 2",
        (3, 3, 3),
        "John Conway",
        1970,
    ),
    HistoricalPattern(
        "Toad",
        "A period-2 oscillator shaped like a toad",
        (6, 6, 6),
        "John Conway",
        1970,
    ),
    HistoricalPattern(
        "Beacon",
        "A period-2 oscillator that flashes like a beacon",
        (6, 8, 6),
        "John Conway",
        1970,
    ),
    HistoricalPattern(
        "Pulsar",
        "A period-3 oscillator discovered early in Game of Life research",
        (48, 56, 48),
        "John Conway",
        1970,
    ),
)


def signature_similarity(sig_a: Sequence[int], sig_b: Sequence[int]) -> float:
    """``max(0, 1 - maxdiff / mean)`` where the mean is over both signatures.

    Signatures of different lengths never match. When both signatures are all
    zeros the mean is 0 and the result is 1 only for identical signatures.
    """
    if len(sig_a) != len(sig_b) or not sig_a:
        return 0.0
    max_diff = max(abs(a - b) for a, b in zip(sig_a, sig_b, strict=True))
    avg = (sum(sig_a) + sum(sig_b)) / (len(sig_a) * 2)
    if avg == 0:
        return 1.0 if max_diff == 0 else 0.0
    return max(0.0, 1.0 - max_diff / avg)


def population_signature(grids: Sequence[Grid]) -> tuple[int, ...]:
    """Populations of the last three grids, oldest first."""
    return tuple(grid_population(grid) for grid in list(grids)[-SIGNATURE_LENGTH:])


def match_signature(
    signature: Sequence[int],
    catalog: Sequence[HistoricalPattern] = FAMOUS_PATTERNS,
    threshold: float = MATCH_THRESHOLD,
    limit: int = MAX_MATCHES,
) -> list[HistoricalMatch]:
    """Return catalog entries more similar than *threshold*, best first, at most *limit*."""
    matches = [
        HistoricalMatch(pattern, signature_similarity(signature, pattern.signature))
        for pattern in catalog
    ]
    kept = [match for match in matches if match.similarity > threshold]
    # sorted() is stable, so equal similarities keep catalog order.
    kept = sorted(kept, key=lambda match: match.similarity, reverse=True)
    return kept[:limit]


def match_grid_history(
    grids: Sequence[Grid], catalog: Sequence[HistoricalPattern] = FAMOUS_PATTERNS
) -> list[HistoricalMatch]:
    """Match the recent grid history, or return nothing before three grids are recorded."""
    if len(grids) < SIGNATURE_LENGTH:
        return []
    return match_signature(population_signature(grids), catalog)
