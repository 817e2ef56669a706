"""Visualization layer: slice renderer and text views."""

from hypercube_maze.viz.slice import (
    EXIT_MARKER,
    PLAYER_MARKER,
    SAFE_MARKER,
    TRAP_MARKER,
    UNKNOWN_MARKER,
    build_slice_array,
    classify_cell,
    render_slice,
)
from hypercube_maze.viz.text import format_help, format_memory, format_position

__all__ = [
    "EXIT_MARKER",
    "PLAYER_MARKER",
    "SAFE_MARKER",
    "TRAP_MARKER",
    "UNKNOWN_MARKER",
    "build_slice_array",
    "classify_cell",
    "format_help",
    "format_memory",
    "format_position",
    "render_slice",
]
