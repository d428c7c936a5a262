"""Configuration layer: constants and typed config dataclasses.

Only constants are re-exported here; the dataclasses in
``life_arena.config.types`` depend on the domain layer and are imported
from that module directly.
"""

from life_arena.config.constants import (
    COMPETITION_GRID_SIZE,
    GRID_SIZE,
    MAX_GENERATIONS,
    RANDOM_DENSITY,
    TICK_INTERVAL_MS,
)

__all__ = [
    "COMPETITION_GRID_SIZE",
    "GRID_SIZE",
    "MAX_GENERATIONS",
    "RANDOM_DENSITY",
    "TICK_INTERVAL_MS",
]
