"""Read-only export snapshot of a session, as a JSON-compatible payload."""

from __future__ import annotations

from dataclasses import dataclass

from life_arena.domain.grid import Grid, grid_from_rows
from life_arena.domain.rules import RuleSet

SNAPSHOT_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class PatternSnapshot:
    name: str
    description: str
    grid: Grid
    grid_size: int
    generation: int
    population: int
    rules: RuleSet
    timestamp: int
    """Milliseconds since the Unix epoch."""

    def to_dict(self) -> dict[str, object]:
        return {
            "schema_version": SNAPSHOT_SCHEMA_VERSION,
            "name": self.name,
            "description": self.description,
            "grid": [list(row) for row in self.grid],
            "grid_size": self.grid_size,
            "generation": self.generation,
            "population": self.population,
            "rules": self.rules.to_dict(),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> PatternSnapshot:
        """Rebuild a snapshot, raising ``ValueError`` for malformed payloads."""
        try:
            raw_grid = payload["grid"]
            raw_rules = payload["rules"]
            grid_size = int(payload["grid_size"])  # type: ignore[call-overload]
            generation = int(payload["generation"])  # type: ignore[call-overload]
            timestamp = int(payload["timestamp"])  # type: ignore[call-overload]
        except KeyError as exc:
            raise ValueError(f"snapshot payload missing field {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise ValueError(f"snapshot payload has a non-integer field: {exc}") from exc
        if not isinstance(raw_grid, list) or not all(isinstance(row, list) for row in raw_grid):
            raise ValueError("snapshot grid must be a list of lists")
        if not isinstance(raw_rules, dict):
            raise ValueError("snapshot rules must be an object")
        grid = grid_from_rows(raw_grid)
        if len(grid) != grid_size:
            raise ValueError("snapshot grid_size does not match the grid")
        # Population is recomputed; a stale stored count is not trusted.
        population = sum(sum(row) for row in grid)
        return cls(
            name=str(payload.get("name", "")),
            description=str(payload.get("description", "")),
            grid=grid,
            grid_size=grid_size,
            generation=generation,
            population=population,
            rules=RuleSet.from_dict(raw_rules),
            timestamp=timestamp,
        )
