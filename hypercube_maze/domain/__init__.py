"""Domain layer: coordinates, random source, trap rules, and the maze engine."""

from hypercube_maze.domain.coordinate import Coordinate, CoordinateKey, Direction
from hypercube_maze.domain.errors import InvalidDirection, MoveError, OutOfBounds
from hypercube_maze.domain.hypercube import CellMemory, Hypercube, MoveResult
from hypercube_maze.domain.random_source import SecureRandom
from hypercube_maze.domain.traps import (
    is_prime,
    prime_sum_trap,
    time_shifting_trap,
    time_shifting_value,
    trap_predicate,
)

__all__ = [
    "CellMemory",
    "Coordinate",
    "CoordinateKey",
    "Direction",
    "Hypercube",
    "InvalidDirection",
    "MoveError",
    "MoveResult",
    "OutOfBounds",
    "SecureRandom",
    "is_prime",
    "prime_sum_trap",
    "time_shifting_trap",
    "time_shifting_value",
    "trap_predicate",
]
