"""Survival/birth rule-sets and the predefined competition catalog."""

from __future__ import annotations

from dataclasses import dataclass

from life_arena.config.constants import MAX_NEIGHBORS


@dataclass(frozen=True)
class RuleSet:
    """Transition thresholds for a life-like automaton.

    An alive cell survives when its neighbor count lies in
    ``[survival_min, survival_max]``; a dead cell is born when the count
    equals ``birth_count``.
    """

    survival_min: int
    survival_max: int
    birth_count: int

    def __post_init__(self) -> None:
        for name in ("survival_min", "survival_max", "birth_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
            if not 0 <= value <= MAX_NEIGHBORS:
                raise ValueError(f"{name} must be in [0, {MAX_NEIGHBORS}]")
        if self.survival_min > self.survival_max:
            raise ValueError("survival_min must be <= survival_max")

    def survives(self, neighbors: int) -> bool:
        return self.survival_min <= neighbors <= self.survival_max

    def is_born(self, neighbors: int) -> bool:
        return neighbors == self.birth_count

    def to_dict(self) -> dict[str, int]:
        return {
            "survival_min": self.survival_min,
            "survival_max": self.survival_max,
            "birth_count": self.birth_count,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> RuleSet:
        """Build a rule-set from a ``to_dict`` payload, raising ``ValueError`` on bad input."""
        try:
            return cls(
                survival_min=payload["survival_min"],  # type: ignore[arg-type]
                survival_max=payload["survival_max"],  # type: ignore[arg-type]
                birth_count=payload["birth_count"],  # type: ignore[arg-type]
            )
        except KeyError as exc:
            raise ValueError(f"rules payload missing field {exc.args[0]!r}") from exc


@dataclass(frozen=True)
class CompetitorRules:
    """A rule-set entered into a competition under a display name and color."""

    name: str
    color: str
    rules: RuleSet


CONWAY_CLASSIC = RuleSet(survival_min=2, survival_max=3, birth_count=3)

PREDEFINED_RULES: tuple[CompetitorRules, ...] = (
    CompetitorRules("Conway's Classic", "#22c55e", CONWAY_CLASSIC),
    CompetitorRules("Replicator", "#3b82f6", RuleSet(1, 1, 1)),
    CompetitorRules("Seeds", "#f59e0b", RuleSet(2, 2, 3)),
    CompetitorRules("Flock", "#ef4444", RuleSet(1, 2, 3)),
    CompetitorRules("Maze", "#8b5cf6", RuleSet(3, 4, 3)),
    CompetitorRules("HighLife", "#06b6d4", RuleSet(2, 3, 6)),
)
"""Competition catalog, in the order competitors are entered."""


def parse_rule_set(raw: str) -> RuleSet:
    """Parse ``"S_MIN,S_MAX,BIRTH"`` (for example ``"2,3,3"``) into a rule-set."""
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    if len(parts) != 3:
        raise ValueError("rules must use S_MIN,S_MAX,BIRTH format")
    try:
        survival_min, survival_max, birth_count = (int(part) for part in parts)
    except ValueError as exc:
        raise ValueError("rules must contain integers") from exc
    return RuleSet(survival_min, survival_max, birth_count)
