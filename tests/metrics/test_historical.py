"""Tests for life_arena.metrics.historical."""

from __future__ import annotations

import pytest

from life_arena.domain.grid import create_empty_grid, place_cells
from life_arena.metrics.historical import (
    FAMOUS_PATTERNS,
    HistoricalPattern,
    match_grid_history,
    match_signature,
    population_signature,
    signature_similarity,
)


class TestSimilarity:
    def test_identical_signatures(self) -> None:
        assert signature_similarity((3, 3, 3), (3, 3, 3)) == 1.0

    def test_all_zero_signatures(self) -> None:
        assert signature_similarity((0, 0, 0), (0, 0, 0)) == 1.0

    def test_formula(self) -> None:
        # maxdiff 1, mean (19 + 18) / 6
        assert signature_similarity((6, 7, 6), (6, 6, 6)) == pytest.approx(1 - 6 / 37)

    def test_never_negative(self) -> None:
        assert signature_similarity((0, 0, 0), (48, 56, 48)) == 0.0

    def test_length_mismatch(self) -> None:
        assert signature_similarity((1, 2), (1, 2, 3)) == 0.0


class TestMatchSignature:
    def test_exact_blinker(self) -> None:
        matches = match_signature((3, 3, 3))
        assert [match.name for match in matches] == ["Blinker"]
        assert matches[0].similarity == 1.0

    def test_exact_pulsar(self) -> None:
        matches = match_signature((48, 56, 48))
        assert matches[0].name == "Pulsar"
        assert matches[0].similarity == 1.0

    def test_sorted_descending(self) -> None:
        matches = match_signature((6, 7, 6))
        assert [match.name for match in matches] == ["Beacon", "Toad"]
        assert matches[0].similarity >= matches[1].similarity

    def test_far_signature_has_no_matches(self) -> None:
        assert match_signature((500, 500, 500)) == []

    def test_truncated_to_three(self) -> None:
        catalog = [HistoricalPattern(f"P{i}", "", (10, 10, 10 + i)) for i in range(5)]
        matches = match_signature((10, 10, 10), catalog)
        assert [match.name for match in matches] == ["P0", "P1", "P2"]

    def test_match_payload(self) -> None:
        payload = match_signature((5, 4, 3))[0].to_dict()
        assert payload["name"] == "Glider"
        assert payload["discovered_by"] == "Richard K. Guy"
        assert payload["year"] == 1970


class TestGridHistory:
    def test_needs_three_grids(self) -> None:
        grid = place_cells(create_empty_grid(10), [(1, 1), (1, 2), (1, 3)])
        assert match_grid_history([grid, grid]) == []
        assert [m.name for m in match_grid_history([grid] * 3)] == ["Blinker"]

    def test_signature_is_last_three_in_order(self) -> None:
        grids = [
            place_cells(create_empty_grid(10), [(0, c) for c in range(k)]) for k in (1, 5, 4, 3)
        ]
        assert population_signature(grids) == (5, 4, 3)
        assert match_grid_history(grids)[0].name == "Glider"


def test_catalog_signatures_have_three_samples() -> None:
    assert all(len(pattern.signature) == 3 for pattern in FAMOUS_PATTERNS)
