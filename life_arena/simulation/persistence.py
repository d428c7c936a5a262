"""Parquet persistence helpers for buffered log columns."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq


def flush_columns(
    columns: dict[str, list[object]],
    path: Path,
    schema: pa.Schema,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write buffered rows to Parquet, opening the writer lazily, and clear the buffers."""
    first = schema.names[0]
    if not columns[first]:
        return writer
    table = pa.Table.from_pydict(columns, schema=schema)
    if writer is None:
        writer = pq.ParquetWriter(path, schema)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


def empty_columns(schema: pa.Schema) -> dict[str, list[object]]:
    """Return an empty column buffer keyed by the schema's field names."""
    return {name: [] for name in schema.names}
