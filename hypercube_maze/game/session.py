"""Game session: command dispatch and the win/lose/quit state machine.

The session never exits the process. Terminal outcomes are returned to the
caller as a ``GameState`` and the caller decides what to do with them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from hypercube_maze.config.constants import (
    HELP_COMMAND,
    MAP_COMMAND,
    QUIT_COMMAND,
    VIEW_COMMAND,
)
from hypercube_maze.domain.errors import MoveError
from hypercube_maze.domain.hypercube import Hypercube
from hypercube_maze.io.move_log import MoveLogRow, move_log_row
from hypercube_maze.viz.slice import render_slice
from hypercube_maze.viz.text import format_help, format_memory, format_position

logger = logging.getLogger(__name__)


class GameState(Enum):
    ACTIVE = "active"
    TRAPPED = "trapped"
    EXITED = "exited"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.ACTIVE


@dataclass(frozen=True)
class CommandOutcome:
    """Session state after a command plus the text to show the player."""

    state: GameState
    lines: tuple[str, ...]


@dataclass
class GameSession:
    """Drives one hypercube from the first command to a terminal state."""

    cube: Hypercube
    state: GameState = GameState.ACTIVE
    move_log: list[MoveLogRow] = field(default_factory=list)

    def intro(self) -> tuple[str, ...]:
        return (
            "You awaken inside a shifting hypercube.",
            format_help(),
            f"Starting position: {format_position(self.cube.position)}",
            render_slice(self.cube),
        )

    def handle(self, raw_command: str) -> CommandOutcome:
        if self.state.is_terminal:
            raise RuntimeError(f"session already ended ({self.state.value})")

        command = raw_command.strip()
        if command == QUIT_COMMAND:
            return self._finish(GameState.QUIT, ("You surrender to the maze.",))
        if command == HELP_COMMAND:
            return CommandOutcome(self.state, (format_help(),))
        if command == VIEW_COMMAND:
            return CommandOutcome(self.state, (render_slice(self.cube),))
        if command == MAP_COMMAND:
            return CommandOutcome(self.state, (format_memory(self.cube),))
        return self._handle_move(command)

    def _handle_move(self, command: str) -> CommandOutcome:
        try:
            result = self.cube.move(command)
        except MoveError as exc:
            self.move_log.append(
                move_log_row(
                    turn=self.cube.turn,
                    command=command,
                    position=self.cube.position,
                    accepted=False,
                    error=str(exc),
                )
            )
            return CommandOutcome(self.state, (f"Warning: {exc}",))

        self.move_log.append(
            move_log_row(
                turn=result.turn,
                command=command,
                position=result.position,
                accepted=True,
                trap=result.trap,
                exit=result.exit,
            )
        )
        lines = [f"Turn {result.turn}", f"Position: {format_position(result.position)}"]
        if result.trap:
            lines.append("The room shifted into a lethal state. You did not survive.")
            return self._finish(GameState.TRAPPED, tuple(lines))
        if result.exit:
            lines.append("You found the exit at the center of the hypercube!")
            return self._finish(GameState.EXITED, tuple(lines))
        lines.append(render_slice(self.cube))
        return CommandOutcome(self.state, tuple(lines))

    def abandon(self) -> CommandOutcome:
        """End an active session without a command, e.g. when input closes."""
        if self.state.is_terminal:
            return CommandOutcome(self.state, ())
        return self._finish(GameState.QUIT, ())

    def _finish(self, state: GameState, lines: tuple[str, ...]) -> CommandOutcome:
        self.state = state
        logger.info("Session ended: %s after %d turns", state.value, self.cube.turn)
        return CommandOutcome(state, lines)

    def summary(self) -> dict[str, object]:
        return {
            "outcome": self.state.value,
            "turns": self.cube.turn,
            "cells_visited": len(self.cube.visited),
            "size": self.cube.size,
            "trap_rule": self.cube.trap_rule.value,
        }
