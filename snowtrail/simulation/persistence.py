"""Parquet persistence helpers for the per-step frame log."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from snowtrail.io.schemas import FRAME_LOG_SCHEMA


def new_frame_columns() -> dict[str, list[int | bool]]:
    """Return empty column buffers matching :data:`FRAME_LOG_SCHEMA`."""
    return {name: [] for name in FRAME_LOG_SCHEMA.names}


def flush_frame_columns(
    frame_columns: dict[str, list[int | bool]],
    frame_log_path: Path,
    frame_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated frame rows to Parquet and clear in-memory buffers."""
    if not frame_columns["step"]:
        return frame_writer
    table = pa.Table.from_pydict(frame_columns, schema=FRAME_LOG_SCHEMA)
    if frame_writer is None:
        frame_log_path.parent.mkdir(parents=True, exist_ok=True)
        frame_writer = pq.ParquetWriter(frame_log_path, FRAME_LOG_SCHEMA)
    frame_writer.write_table(table)
    for values in frame_columns.values():
        values.clear()
    return frame_writer
