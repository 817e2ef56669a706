"""Parquet schema for the per-session move log.

One row per movement attempt. Rejected moves carry ``accepted=False``, the
error message, and the unchanged position and turn.
"""

from __future__ import annotations

import pyarrow as pa

MOVE_LOG_SCHEMA_VERSION = 1

MOVE_LOG_SCHEMA = pa.schema(
    [
        ("turn", pa.int64()),
        ("command", pa.string()),
        ("accepted", pa.bool_()),
        ("error", pa.string()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("z", pa.int64()),
        ("w", pa.int64()),
        ("trap", pa.bool_()),
        ("exit", pa.bool_()),
    ],
    metadata={"schema_version": str(MOVE_LOG_SCHEMA_VERSION)},
)
