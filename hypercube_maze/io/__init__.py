"""IO layer: move-log schema and Parquet writer."""

from hypercube_maze.io.move_log import MoveLogRow, move_log_row, write_move_log
from hypercube_maze.io.schemas import MOVE_LOG_SCHEMA, MOVE_LOG_SCHEMA_VERSION

__all__ = [
    "MOVE_LOG_SCHEMA",
    "MOVE_LOG_SCHEMA_VERSION",
    "MoveLogRow",
    "move_log_row",
    "write_move_log",
]
