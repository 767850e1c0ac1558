"""Parquet schema for the per-step frame log."""

from __future__ import annotations

import pyarrow as pa

FRAME_LOG_SCHEMA_VERSION = 1

FRAME_LOG_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("row", pa.int64()),
        ("col", pa.int64()),
        ("fired", pa.bool_()),
        ("hit_count", pa.int64()),
        ("live_particles", pa.int64()),
        ("trail_size", pa.int64()),
    ],
    metadata={"schema_version": str(FRAME_LOG_SCHEMA_VERSION)},
)
