"""Tests for life_arena.domain.grid module."""

from __future__ import annotations

import logging
from random import Random

import pytest

from life_arena.domain.grid import (
    alive_cells,
    count_neighbors,
    create_empty_grid,
    create_random_grid,
    grid_from_rows,
    grid_population,
    place_cells,
    set_cell,
    toggle_cell,
    validate_grid_size,
)


def _full_grid(n: int) -> tuple[tuple[bool, ...], ...]:
    return tuple((True,) * n for _ in range(n))


class TestCountNeighbors:
    def test_empty_grid_has_no_neighbors_anywhere(self) -> None:
        grid = create_empty_grid(6)
        assert all(count_neighbors(grid, r, c, 6) == 0 for r in range(6) for c in range(6))

    def test_full_grid_interior_has_eight(self) -> None:
        grid = _full_grid(5)
        for r in range(1, 4):
            for c in range(1, 4):
                assert count_neighbors(grid, r, c, 5) == 8

    def test_full_grid_edges_do_not_wrap(self) -> None:
        grid = _full_grid(5)
        assert count_neighbors(grid, 0, 0, 5) == 3
        assert count_neighbors(grid, 4, 4, 5) == 3
        assert count_neighbors(grid, 0, 2, 5) == 5
        assert count_neighbors(grid, 2, 4, 5) == 5

    def test_cell_itself_is_not_counted(self) -> None:
        grid = place_cells(create_empty_grid(3), [(1, 1)])
        assert count_neighbors(grid, 1, 1, 3) == 0
        assert count_neighbors(grid, 0, 0, 3) == 1

    def test_size_defaults_to_grid_length(self) -> None:
        grid = _full_grid(3)
        assert count_neighbors(grid, 1, 1) == 8


class TestFactories:
    def test_empty_grid_shape(self) -> None:
        grid = create_empty_grid(4)
        assert len(grid) == 4
        assert all(len(row) == 4 for row in grid)
        assert grid_population(grid) == 0

    def test_random_grid_is_seeded(self) -> None:
        a = create_random_grid(20, rng=Random(3))
        b = create_random_grid(20, rng=Random(3))
        assert a == b

    def test_random_grid_density_is_roughly_thirty_percent(self) -> None:
        grid = create_random_grid(50, rng=Random(0))
        fraction = grid_population(grid) / 2500
        assert 0.25 < fraction < 0.35

    def test_random_grid_extreme_densities(self) -> None:
        assert grid_population(create_random_grid(5, density=0.0, rng=Random(1))) == 0
        assert grid_population(create_random_grid(5, density=1.0, rng=Random(1))) == 25

    @pytest.mark.parametrize("n", [0, -1])
    def test_invalid_size_rejected(self, n: int) -> None:
        with pytest.raises(ValueError):
            create_empty_grid(n)

    def test_validate_rejects_bool(self) -> None:
        with pytest.raises(ValueError):
            validate_grid_size(True)  # type: ignore[arg-type]

    def test_grid_from_rows_requires_square(self) -> None:
        with pytest.raises(ValueError):
            grid_from_rows([[1, 0], [1]])
        assert grid_from_rows([[1, 0], [0, 0]]) == ((True, False), (False, False))


class TestEdits:
    def test_place_cells_does_not_mutate_input(self) -> None:
        grid = create_empty_grid(5)
        placed = place_cells(grid, [(1, 1), (2, 2)])
        assert grid_population(grid) == 0
        assert alive_cells(placed) == [(1, 1), (2, 2)]

    def test_place_cells_applies_offset(self) -> None:
        placed = place_cells(create_empty_grid(5), [(0, 0)], offset=(2, 3))
        assert alive_cells(placed) == [(2, 3)]

    def test_place_cells_drops_out_of_bounds(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="life_arena.domain.grid"):
            placed = place_cells(create_empty_grid(3), [(0, 0), (5, 5), (-1, 0)])
        assert alive_cells(placed) == [(0, 0)]
        assert "Dropped 2" in caplog.text

    def test_place_cells_drops_malformed_entries(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="life_arena.domain.grid"):
            placed = place_cells(create_empty_grid(5), [(1, 1), (2.5, 1), (3,), (True, 0)])
        assert alive_cells(placed) == [(1, 1)]
        assert "Dropped 3" in caplog.text

    def test_toggle_cell_round_trip(self) -> None:
        grid = create_empty_grid(3)
        toggled = toggle_cell(grid, 1, 2)
        assert toggled[1][2] is True
        assert toggle_cell(toggled, 1, 2) == grid

    def test_set_cell_out_of_bounds_raises(self) -> None:
        with pytest.raises(ValueError):
            set_cell(create_empty_grid(3), 3, 0, True)
