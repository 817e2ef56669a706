"""Hypercube maze engine.

Move invariant: a rejected move (unknown token or boundary wall) leaves
``position``, ``turn`` and ``visited`` untouched. A committed move changes
exactly one axis by one step, increments ``turn`` once, and upserts exactly
one visited-memory record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hypercube_maze.config.constants import AXES
from hypercube_maze.config.types import MazeConfig, TrapRule
from hypercube_maze.domain.coordinate import Coordinate, CoordinateKey, Direction
from hypercube_maze.domain.errors import OutOfBounds
from hypercube_maze.domain.random_source import SecureRandom
from hypercube_maze.domain.traps import trap_predicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellMemory:
    """What the player learned on entering a cell."""

    trap: bool
    turn: int


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a committed move."""

    position: Coordinate
    trap: bool
    exit: bool
    turn: int


@dataclass
class Hypercube:
    """4D grid of side ``size`` with a fixed exit at the center."""

    size: int
    trap_rule: TrapRule
    exit: Coordinate
    position: Coordinate
    turn: int = 0
    visited: dict[CoordinateKey, CellMemory] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        config: MazeConfig,
        rng: SecureRandom | None = None,
        start: Coordinate | None = None,
    ) -> Hypercube:
        """Build a fresh maze; the start cell is drawn per axis unless given."""
        if start is None:
            source = rng if rng is not None else SecureRandom()
            start = Coordinate(*(source.next_int(config.size) for _ in AXES))
        elif not start.is_inside(config.size):
            raise ValueError(f"start {start} is outside a grid of size {config.size}")

        cube = cls(
            size=config.size,
            trap_rule=config.trap_rule,
            exit=Coordinate.center(config.size),
            position=start,
        )
        logger.debug(
            "Created hypercube size=%d rule=%s start=%s exit=%s",
            cube.size,
            cube.trap_rule.value,
            cube.position,
            cube.exit,
        )
        return cube

    def is_inside(self, coord: Coordinate) -> bool:
        return coord.is_inside(self.size)

    def is_exit(self, coord: Coordinate) -> bool:
        return coord == self.exit

    def is_trap(self, coord: Coordinate, turn: int | None = None) -> bool:
        """Evaluate the configured trap rule; defaults to the current turn."""
        return trap_predicate(self.trap_rule)(coord, self.turn if turn is None else turn)

    def move(self, direction: str | Direction) -> MoveResult:
        """Step one cell along an axis.

        Raises :exc:`InvalidDirection` or :exc:`OutOfBounds` without mutating
        any state.
        """
        parsed = Direction.parse(direction)
        candidate = self.position.shifted(parsed.axis, parsed.delta)
        if not self.is_inside(candidate):
            logger.info("Rejected %s from %s: boundary wall", parsed.value, self.position)
            raise OutOfBounds()

        # Trap evaluation sees the turn of the move being made.
        self.turn += 1
        self.position = candidate
        trap = self.is_trap(candidate)
        self.visited[candidate.key()] = CellMemory(trap=trap, turn=self.turn)

        result = MoveResult(
            position=candidate,
            trap=trap,
            exit=self.is_exit(candidate),
            turn=self.turn,
        )
        logger.debug(
            "Turn %d: %s -> %s trap=%s exit=%s",
            result.turn,
            parsed.value,
            candidate,
            result.trap,
            result.exit,
        )
        return result
