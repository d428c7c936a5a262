"""CLI entrypoint for session and competition runs.

This module owns CLI argument parsing and mode dispatch. Domain logic lives in:

- ``life_arena.simulation``   – stepping and ``LifeSession``
- ``life_arena.experiments``  – competition scheduling and batch runs
- ``life_arena.io``           – Parquet schemas, paths, and snapshots
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from life_arena.config.constants import (
    COMPETITION_GRID_SIZE,
    GRID_SIZE,
    MAX_GENERATIONS,
    RANDOM_DENSITY,
)
from life_arena.config.types import CompetitionConfig, SessionConfig
from life_arena.domain.presets import PRESETS
from life_arena.domain.rules import CONWAY_CLASSIC, parse_rule_set
from life_arena.experiments.runs import run_competition, run_session

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI value coercion
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_str(cli_val: str | None, key: str, file_cfg: dict[str, object]) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run life-like cellular automaton sessions")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--competition",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Race the predefined rule-sets instead of running one session",
    )
    parser.add_argument("--grid-size", type=int, default=None)
    parser.add_argument("--generations", type=int, default=None)
    parser.add_argument(
        "--rules", type=str, default=None, help="S_MIN,S_MAX,BIRTH (session mode only)"
    )
    parser.add_argument(
        "--preset",
        type=str,
        choices=sorted(PRESETS),
        default=None,
        help="Starting pattern (session mode only)",
    )
    parser.add_argument("--density", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--rounds", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        competition = _get_bool(args.competition, "competition", file_cfg, False)
        seed = _get_int(args.seed, "seed", file_cfg, 0)
        density = _get_float(args.density, "density", file_cfg, RANDOM_DENSITY)
        out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))
        rules_raw = _get_optional_str(args.rules, "rules", file_cfg)
        preset = _get_optional_str(args.preset, "preset", file_cfg)

        if competition:
            if rules_raw is not None or preset is not None:
                raise ValueError("--rules and --preset only apply to session mode")
            config = CompetitionConfig(
                grid_size=_get_int(args.grid_size, "grid_size", file_cfg, COMPETITION_GRID_SIZE),
                max_generations=_get_int(
                    args.generations, "generations", file_cfg, MAX_GENERATIONS
                ),
                density=density,
                n_rounds=_get_int(args.rounds, "rounds", file_cfg, 1),
                seed=seed,
                out_dir=out_dir,
            )
        else:
            session_config = SessionConfig(
                grid_size=_get_int(args.grid_size, "grid_size", file_cfg, GRID_SIZE),
                generations=_get_int(args.generations, "generations", file_cfg, 100),
                rules=CONWAY_CLASSIC if rules_raw is None else parse_rule_set(rules_raw),
                density=density,
                preset=preset,
                seed=seed,
            )
            if session_config.preset is not None and session_config.preset not in PRESETS:
                raise ValueError(f"preset must be one of {', '.join(sorted(PRESETS))}")
    except ValueError as exc:
        parser.error(str(exc))

    if competition:
        results = run_competition(config)
        summary: dict[str, object] = {
            "mode": "competition",
            "out_dir": str(out_dir),
            "rounds": [
                {"round": result.round, "seed": result.seed, "winner": result.winner}
                for result in results
            ],
        }
    else:
        session_result = run_session(session_config, out_dir)
        summary = {
            "mode": "session",
            "out_dir": str(out_dir),
            "generations": session_result.generations,
            "final_population": session_result.final_population,
            "name": session_result.name,
            "category": session_result.category,
        }
    print(json.dumps(summary, ensure_ascii=False))


if __name__ == "__main__":
    main()
