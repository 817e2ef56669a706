"""Game layer: session state machine and CLI."""

from hypercube_maze.game.cli import main, run_session
from hypercube_maze.game.session import CommandOutcome, GameSession, GameState

__all__ = [
    "CommandOutcome",
    "GameSession",
    "GameState",
    "main",
    "run_session",
]
