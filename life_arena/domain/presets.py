"""Named starting patterns stamped onto an empty grid before a session starts."""

from __future__ import annotations

from dataclasses import dataclass

from life_arena.domain.grid import Cell, Grid, create_empty_grid, place_cells


@dataclass(frozen=True)
class Preset:
    """A named set of ``(row, col)`` cells positioned for a 30x30 grid."""

    key: str
    name: str
    description: str
    cells: tuple[Cell, ...]


PRESETS: dict[str, Preset] = {
    preset.key: preset
    for preset in (
        Preset(
            "glider",
            "Glider",
            "A simple pattern that moves across the grid",
            ((1, 2), (2, 3), (3, 1), (3, 2), (3, 3)),
        ),
        Preset(
            "oscillator",
            "Blinker",
            "Oscillates between two states",
            ((15, 14), (15, 15), (15, 16)),
        ),
        Preset(
            "still_life",
            "Block",
            "A stable pattern that never changes",
            ((14, 14), (14, 15), (15, 14), (15, 15)),
        ),
        Preset(
            "toad",
            "Toad",
            "A 2-period oscillator",
            ((14, 15), (14, 16), (14, 17), (15, 14), (15, 15), (15, 16)),
        ),
        Preset(
            "beacon",
            "Beacon",
            "Another 2-period oscillator",
            ((12, 12), (12, 13), (13, 12), (13, 13), (14, 14), (14, 15), (15, 14), (15, 15)),
        ),
        Preset(
            "pulsar",
            "Pulsar",
            "A 3-period oscillator",
            (
                (10, 12), (10, 13), (10, 14), (10, 18), (10, 19), (10, 20),
                (12, 10), (12, 15), (12, 17), (12, 22),
                (13, 10), (13, 15), (13, 17), (13, 22),
                (14, 10), (14, 15), (14, 17), (14, 22),
                (15, 12), (15, 13), (15, 14), (15, 18), (15, 19), (15, 20),
                (17, 12), (17, 13), (17, 14), (17, 18), (17, 19), (17, 20),
                (18, 10), (18, 15), (18, 17), (18, 22),
                (19, 10), (19, 15), (19, 17), (19, 22),
                (20, 10), (20, 15), (20, 17), (20, 22),
                (22, 12), (22, 13), (22, 14), (22, 18), (22, 19), (22, 20),
            ),
        ),
        Preset(
            "glider_gun",
            "Glider Gun",
            "Creates gliders infinitely",
            (
                (5, 1), (5, 2), (6, 1), (6, 2),
                (5, 11), (6, 11), (7, 11), (4, 12), (8, 12), (3, 13), (9, 13),
                (3, 14), (9, 14), (6, 15), (4, 16), (8, 16), (5, 17), (6, 17), (7, 17), (6, 18),
                (3, 21), (4, 21), (5, 21), (3, 22), (4, 22), (5, 22), (2, 23), (6, 23),
                (1, 25), (2, 25), (6, 25), (7, 25),
                (3, 35), (4, 35), (3, 36), (4, 36),
            ),
        ),
        Preset(
            "lightweight",
            "Lightweight Spaceship",
            "Travels across the grid",
            (
                (10, 11), (10, 14), (11, 15), (12, 11), (12, 15),
                (13, 12), (13, 13), (13, 14), (13, 15),
            ),
        ),
    )
}


def get_preset(key: str) -> Preset:
    """Look up a preset by key, raising ``ValueError`` listing valid keys."""
    try:
        return PRESETS[key]
    except KeyError as exc:
        valid = ", ".join(sorted(PRESETS))
        raise ValueError(f"preset must be one of {valid}") from exc


def load_preset(key: str, n: int) -> Grid:
    """Return a fresh n x n grid holding the preset's cells.

    Cells that fall outside a smaller grid are dropped (the glider gun is
    wider than the default 30x30 grid).
    """
    return place_cells(create_empty_grid(n), get_preset(key).cells)
