"""ASCII rendering of the 3D (x, y, z) slice through the player's w-level.

Rendering is read-only: it inspects engine state and never mutates it.
"""

from __future__ import annotations

import numpy as np

from hypercube_maze.domain.coordinate import Coordinate
from hypercube_maze.domain.hypercube import Hypercube

PLAYER_MARKER = "P"
EXIT_MARKER = "E"
TRAP_MARKER = "X"
SAFE_MARKER = "."
UNKNOWN_MARKER = "?"

LEGEND: tuple[tuple[str, str], ...] = (
    (PLAYER_MARKER, "You"),
    (EXIT_MARKER, "Exit (center)"),
    (TRAP_MARKER, "Known trap (when discovered)"),
    (SAFE_MARKER, "Known safe"),
    (UNKNOWN_MARKER, "Unvisited (unknown)"),
)


def classify_cell(cube: Hypercube, coord: Coordinate) -> str:
    """Return the marker for one cell.

    Priority: player, exit (always visible), visited trap/safe, unknown.
    """
    if coord == cube.position:
        return PLAYER_MARKER
    if cube.is_exit(coord):
        return EXIT_MARKER
    memory = cube.visited.get(coord.key())
    if memory is not None:
        return TRAP_MARKER if memory.trap else SAFE_MARKER
    return UNKNOWN_MARKER


def build_slice_array(cube: Hypercube, w_level: int | None = None) -> np.ndarray:
    """Return a ``(size, size, size)`` marker array indexed ``[y, z, x]``.

    The slice is taken at ``w_level``, defaulting to the player's current w.
    """
    w = cube.position.w if w_level is None else w_level
    n = cube.size
    grid = np.full((n, n, n), UNKNOWN_MARKER, dtype="<U1")
    for y in range(n):
        for z in range(n):
            for x in range(n):
                grid[y, z, x] = classify_cell(cube, Coordinate(x, y, z, w))
    return grid


def render_slice(cube: Hypercube) -> str:
    """Render the player's current slice as text, one block per y-layer."""
    w = cube.position.w
    grid = build_slice_array(cube, w)
    lines = [
        f"3D Slice at W = {w}",
        "Z increases downward. X increases right. Y layers separated.",
        "",
    ]
    for y, layer in enumerate(grid):
        lines.append(f"--- Y = {y} ---")
        for row in layer:
            lines.append("".join(f" {marker} " for marker in row))
        lines.append("")
    lines.append("Legend:")
    lines.extend(f" {marker} = {label}" for marker, label in LEGEND)
    return "\n".join(lines)
