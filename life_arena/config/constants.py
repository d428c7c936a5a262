"""Centralized domain constants for cellular-automaton sessions and competitions.

All magic numbers shared by the engine, analyzer, and scheduler are defined
here. The analyzer constants are calibrated against 15-50 cell grids and
must stay exact: description thresholds and historical matching depend on them.
"""

from __future__ import annotations

GRID_SIZE = 30
"""Default side length of a free-play session grid."""

COMPETITION_GRID_SIZE = 20
"""Default side length of every competitor grid."""

MAX_GENERATIONS = 100
"""Generation cap for one competition round."""

RANDOM_DENSITY = 0.3
"""Probability that a randomized cell starts alive."""

MAX_NEIGHBORS = 8
"""Size of the Moore neighborhood; upper bound for every rule threshold."""

TICK_INTERVAL_MS = 200
"""Default tick-driver interval in milliseconds."""

POPULATION_HISTORY_SIZE = 20
"""Number of recent population counts kept by the analyzer."""

GRID_HISTORY_SIZE = 6
"""Number of recent grids kept by the analyzer."""

STABILITY_WINDOW = 10
"""Population samples required for the stability metric."""

STABILITY_VARIANCE_SCALE = 100.0
"""Variance that maps to zero stability."""

GROWTH_WINDOW = 5
"""Population samples required for the growth metric."""

GROWTH_SCALE = 10.0
"""Per-generation population trend that maps to growth 1.0."""

DIVERSITY_COMPONENT_SCALE = 10
"""Component count that maps to diversity 1.0."""

INFLUENCE_RADIUS = 2
"""Half-width of the square each alive cell spreads influence into."""

INFLUENCE_FALLOFF = 3.0
"""Distance at which a single cell's influence decays to zero."""

SIGNATURE_LENGTH = 3
"""Consecutive generations in a historical population signature."""

MATCH_THRESHOLD = 0.7
"""Minimum (exclusive) similarity for a historical match."""

MAX_MATCHES = 3
"""Number of historical matches reported per tick."""

DESCRIPTION_MIN_GENERATION = 5
"""Generation before which no description is produced."""

STABLE_POPULATION_DELTA = 5
"""Population change below which a competitor tick counts as stable."""

STABILITY_REWARD = 1
"""Stability points gained for a stable competitor tick."""

STABILITY_PENALTY = 2
"""Stability points lost for an unstable competitor tick."""

STABILITY_SCORE_WEIGHT = 2
"""Weight of accumulated stability in the competition score."""

SURVIVAL_BONUS = 50
"""Score bonus for a competitor still alive at the end of a round."""

FLUSH_THRESHOLD = 8_192
"""Flush log rows to Parquet once this in-memory row count is reached."""
