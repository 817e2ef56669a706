"""Recoverable move errors raised by the maze engine."""

from __future__ import annotations


class MoveError(ValueError):
    """A rejected move. The engine state is left untouched."""


class InvalidDirection(MoveError):
    """The command is not one of the eight movement tokens."""

    def __init__(self, token: str) -> None:
        super().__init__("Invalid direction.")
        self.token = token


class OutOfBounds(MoveError):
    """The move would leave the grid domain."""

    def __init__(self) -> None:
        super().__init__("You hit the boundary wall.")
