"""Centralized domain constants for the hypercube maze.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_SIZE_PRIME_SUM = 5
"""Default grid side length for the static prime-sum trap rule."""

DEFAULT_SIZE_TIME_SHIFTING = 4
"""Default grid side length for the time-shifting trap rule."""

MAX_SIZE = 32
"""Largest accepted grid side length; the slice view walks size**3 cells."""

AXES: tuple[str, ...] = ("x", "y", "z", "w")
"""Axis names in coordinate order."""

TRAP_WEIGHTS: tuple[int, int, int, int] = (7, 11, 13, 17)
"""Per-axis weights of the time-shifting trap value."""

TURN_WEIGHT = 19
"""Weight of the turn counter in the time-shifting trap value."""

TRAP_MODULUS = 97
"""Modulus applied to the time-shifting trap value before the primality test."""

UINT32_RANGE = 2**32
"""Size of the 32-bit draw space used by the secure random source."""

MOVE_TOKENS: tuple[str, ...] = ("xp", "xn", "yp", "yn", "zp", "zn", "wp", "wn")
"""Movement commands: one per axis per sign."""

QUIT_COMMAND = "exit"
HELP_COMMAND = "help"
VIEW_COMMAND = "view"
MAP_COMMAND = "map"

COMMAND_TOKENS: tuple[str, ...] = (QUIT_COMMAND, HELP_COMMAND, VIEW_COMMAND, MAP_COMMAND)
"""Non-movement commands handled by the game session."""
