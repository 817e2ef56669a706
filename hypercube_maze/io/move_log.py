"""Move-log row construction and Parquet persistence."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from hypercube_maze.domain.coordinate import Coordinate
from hypercube_maze.io.schemas import MOVE_LOG_SCHEMA

MoveLogRow = dict[str, object]


def move_log_row(
    *,
    turn: int,
    command: str,
    position: Coordinate,
    accepted: bool,
    error: str | None = None,
    trap: bool = False,
    exit: bool = False,
) -> MoveLogRow:
    return {
        "turn": turn,
        "command": command,
        "accepted": accepted,
        "error": error,
        "x": position.x,
        "y": position.y,
        "z": position.z,
        "w": position.w,
        "trap": trap,
        "exit": exit,
    }


def write_move_log(rows: list[MoveLogRow], path: Path) -> Path:
    """Write rows to ``path`` as Parquet, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(pa.Table.from_pylist(rows, schema=MOVE_LOG_SCHEMA), path)
    return path
