"""Configuration dataclasses for maze construction and game sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from hypercube_maze.config.constants import (
    DEFAULT_SIZE_PRIME_SUM,
    DEFAULT_SIZE_TIME_SHIFTING,
    MAX_SIZE,
)

__all__ = [
    "MazeConfig",
    "SessionConfig",
    "TrapRule",
]


class TrapRule(Enum):
    """Which predicate classifies a cell as lethal."""

    PRIME_SUM = "prime_sum"
    TIME_SHIFTING = "time_shifting"

    @property
    def default_size(self) -> int:
        if self is TrapRule.PRIME_SUM:
            return DEFAULT_SIZE_PRIME_SUM
        return DEFAULT_SIZE_TIME_SHIFTING


@dataclass(frozen=True)
class MazeConfig:
    """Construction-time parameters of one hypercube."""

    size: int = DEFAULT_SIZE_TIME_SHIFTING
    trap_rule: TrapRule = TrapRule.TIME_SHIFTING

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError("size must be an integer")
        if self.size < 1:
            raise ValueError("size must be >= 1")
        if self.size > MAX_SIZE:
            raise ValueError(f"size must be <= {MAX_SIZE}")
        if not isinstance(self.trap_rule, TrapRule):
            raise ValueError("trap_rule must be a TrapRule")

    @classmethod
    def for_rule(cls, trap_rule: TrapRule, size: int | None = None) -> MazeConfig:
        """Build a config using the rule's default size unless one is given."""
        return cls(size=trap_rule.default_size if size is None else size, trap_rule=trap_rule)


@dataclass(frozen=True)
class SessionConfig:
    """Parameters of one interactive game session."""

    maze: MazeConfig = field(default_factory=MazeConfig)
    move_log_path: Path | None = None
