"""Configuration layer: constants and typed config dataclasses."""

from hypercube_maze.config.constants import (
    AXES,
    COMMAND_TOKENS,
    DEFAULT_SIZE_PRIME_SUM,
    DEFAULT_SIZE_TIME_SHIFTING,
    MAX_SIZE,
    MOVE_TOKENS,
    TRAP_MODULUS,
    TRAP_WEIGHTS,
    TURN_WEIGHT,
    UINT32_RANGE,
)
from hypercube_maze.config.types import MazeConfig, SessionConfig, TrapRule

__all__ = [
    "AXES",
    "COMMAND_TOKENS",
    "DEFAULT_SIZE_PRIME_SUM",
    "DEFAULT_SIZE_TIME_SHIFTING",
    "MAX_SIZE",
    "MOVE_TOKENS",
    "MazeConfig",
    "SessionConfig",
    "TRAP_MODULUS",
    "TRAP_WEIGHTS",
    "TURN_WEIGHT",
    "TrapRule",
    "UINT32_RANGE",
]
