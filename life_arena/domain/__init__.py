"""Domain layer: grid model, rule-sets, and starting presets."""

from life_arena.domain.grid import (
    Cell,
    Grid,
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
from life_arena.domain.presets import PRESETS, Preset, get_preset, load_preset
from life_arena.domain.rules import (
    CONWAY_CLASSIC,
    PREDEFINED_RULES,
    CompetitorRules,
    RuleSet,
    parse_rule_set,
)

__all__ = [
    "CONWAY_CLASSIC",
    "Cell",
    "CompetitorRules",
    "Grid",
    "PREDEFINED_RULES",
    "PRESETS",
    "Preset",
    "RuleSet",
    "alive_cells",
    "count_neighbors",
    "create_empty_grid",
    "create_random_grid",
    "get_preset",
    "grid_from_rows",
    "grid_population",
    "load_preset",
    "parse_rule_set",
    "place_cells",
    "set_cell",
    "toggle_cell",
    "validate_grid_size",
]
