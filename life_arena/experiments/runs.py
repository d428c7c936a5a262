"""Batch runs of sessions and competition rounds with Parquet/JSON artifacts."""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from random import Random

import pyarrow as pa
import pyarrow.parquet as pq

from life_arena.config.constants import FLUSH_THRESHOLD
from life_arena.config.types import CompetitionConfig, SessionConfig
from life_arena.experiments.competition import (
    CompetitionScheduler,
    CompetitorState,
    composite_score,
)
from life_arena.io import paths
from life_arena.io.schemas import (
    COMPETITION_LOG_SCHEMA,
    COMPETITION_SUMMARY_SCHEMA,
    GENERATION_LOG_SCHEMA,
    LOG_SCHEMA_VERSION,
)
from life_arena.metrics.analyzer import AnalysisReport
from life_arena.simulation.persistence import empty_columns, flush_columns
from life_arena.simulation.session import LifeSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionResult:
    generations: int
    final_population: int
    name: str
    category: str | None


@dataclass(frozen=True)
class CompetitionResult:
    """Outcome of one competition round."""

    round: int
    seed: int
    winner: str
    scores: tuple[tuple[str, int], ...]


def _generation_row(
    generation: int, report: AnalysisReport, session: LifeSession
) -> dict[str, object]:
    top = report.matches[0] if report.matches else None
    category = session.description.category.value if session.description else None
    return {
        "generation": generation,
        "population": report.population,
        "entropy": report.metrics.entropy,
        "diversity": report.metrics.diversity,
        "stability": report.metrics.stability,
        "growth": report.metrics.growth,
        "influence_max": float(report.metrics.influence.max()),
        "top_match": top.name if top else None,
        "top_match_similarity": top.similarity if top else None,
        "category": category,
    }


def run_session(config: SessionConfig, out_dir: Path) -> SessionResult:
    """Run one session for ``config.generations`` ticks and persist its log and final snapshot.

    Without a preset the session starts from a randomized grid.
    """
    out_dir = Path(out_dir)
    paths.logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    paths.snapshots_dir(out_dir).mkdir(parents=True, exist_ok=True)

    session = LifeSession(config)
    if config.preset is None:
        session.randomize()

    rows = [_generation_row(0, session.report, session)]
    session.start()
    for _ in range(config.generations):
        report = session.tick()
        rows.append(_generation_row(session.generation, report, session))
    session.pause()

    pq.write_table(
        pa.Table.from_pylist(rows, schema=GENERATION_LOG_SCHEMA), paths.generation_log_path(out_dir)
    )
    snapshot = session.snapshot()
    paths.final_snapshot_path(out_dir).write_text(
        json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2)
    )
    logger.info(
        "Session finished: generations=%d population=%d name=%s",
        session.generation,
        session.population,
        snapshot.name,
    )
    return SessionResult(
        generations=session.generation,
        final_population=session.population,
        name=snapshot.name,
        category=rows[-1]["category"],  # type: ignore[arg-type]
    )


def _append_log(columns: dict[str, list[object]], round_index: int, state: CompetitorState) -> None:
    columns["round"].append(round_index)
    columns["competitor"].append(state.name)
    columns["generation"].append(state.generation)
    columns["population"].append(state.population)
    columns["max_population"].append(state.max_population)
    columns["stability"].append(state.stability)


def run_competition(config: CompetitionConfig) -> list[CompetitionResult]:
    """Run ``config.n_rounds`` rounds (seeds ``seed``, ``seed + 1``, ...) and persist artifacts."""
    out_dir = Path(config.out_dir)
    paths.logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    log_path = paths.competition_log_path(out_dir)

    results: list[CompetitionResult] = []
    summary_rows: list[dict[str, object]] = []
    log_columns = empty_columns(COMPETITION_LOG_SCHEMA)
    writer: pq.ParquetWriter | None = None

    try:
        for round_index in range(config.n_rounds):
            seed = config.seed + round_index
            scheduler = CompetitionScheduler.create(config, Random(seed))
            while True:
                for state in scheduler.competitors:
                    _append_log(log_columns, round_index, state)
                if scheduler.is_complete:
                    break
                scheduler.tick()
                if len(log_columns["round"]) >= FLUSH_THRESHOLD:
                    writer = flush_columns(log_columns, log_path, COMPETITION_LOG_SCHEMA, writer)

            winner = scheduler.run()
            for state in scheduler.competitors:
                rules = state.rules.rules
                summary_rows.append(
                    {
                        "schema_version": LOG_SCHEMA_VERSION,
                        "round": round_index,
                        "seed": seed,
                        "competitor": state.name,
                        "color": state.rules.color,
                        "survival_min": rules.survival_min,
                        "survival_max": rules.survival_max,
                        "birth_count": rules.birth_count,
                        "final_population": state.population,
                        "max_population": state.max_population,
                        "stability": state.stability,
                        "score": composite_score(state),
                        "winner": state is winner,
                    }
                )
            results.append(
                CompetitionResult(
                    round=round_index,
                    seed=seed,
                    winner=winner.name,
                    scores=tuple(scheduler.scores()),
                )
            )
            logger.info("Round %d (seed=%d) won by %s", round_index, seed, winner.name)
        writer = flush_columns(log_columns, log_path, COMPETITION_LOG_SCHEMA, writer)
    finally:
        if writer is not None:
            writer.close()

    pq.write_table(
        pa.Table.from_pylist(summary_rows, schema=COMPETITION_SUMMARY_SCHEMA),
        paths.competition_summary_path(out_dir),
    )
    win_counts = Counter(result.winner for result in results)
    payload = {
        "n_rounds": config.n_rounds,
        "wins": {rules.name: win_counts.get(rules.name, 0) for rules in config.competitors},
    }
    paths.win_counts_path(out_dir).write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    return results
