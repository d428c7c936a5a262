"""Parquet schema definitions for session and competition artifacts.

All Arrow schemas used for persisting logs are centralised here so that every
writer and reader works against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

LOG_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("entropy", pa.float64()),
        ("diversity", pa.float64()),
        ("stability", pa.float64()),
        ("growth", pa.float64()),
        ("influence_max", pa.float64()),
        ("top_match", pa.string()),
        ("top_match_similarity", pa.float64()),
        ("category", pa.string()),
    ]
)

COMPETITION_LOG_SCHEMA = pa.schema(
    [
        ("round", pa.int64()),
        ("competitor", pa.string()),
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("max_population", pa.int64()),
        ("stability", pa.int64()),
    ]
)

COMPETITION_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("round", pa.int64()),
        ("seed", pa.int64()),
        ("competitor", pa.string()),
        ("color", pa.string()),
        ("survival_min", pa.int64()),
        ("survival_max", pa.int64()),
        ("birth_count", pa.int64()),
        ("final_population", pa.int64()),
        ("max_population", pa.int64()),
        ("stability", pa.int64()),
        ("score", pa.int64()),
        ("winner", pa.bool_()),
    ]
)
