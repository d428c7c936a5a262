"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def snapshots_dir(out_dir: Path) -> Path:
    """Return path to the snapshots subdirectory within an output directory."""
    return out_dir / "snapshots"


def generation_log_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "generation_log.parquet"


def final_snapshot_path(out_dir: Path) -> Path:
    return snapshots_dir(out_dir) / "final_snapshot.json"


def competition_log_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "competition_log.parquet"


def competition_summary_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "competition_summary.parquet"


def win_counts_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "win_counts.json"
