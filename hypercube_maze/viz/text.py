"""Plain-text views: command reference, position, and visited memory."""

from __future__ import annotations

from hypercube_maze.domain.coordinate import Coordinate
from hypercube_maze.domain.hypercube import Hypercube

HELP_TEXT = """Movement Commands:
 xp -> +X (right)
 xn -> -X (left)
 yp -> +Y (forward layer)
 yn -> -Y (back layer)
 zp -> +Z (down)
 zn -> -Z (up)
 wp -> +W (next 3D slice)
 wn -> -W (previous 3D slice)

Other Commands:
 map  -> show visited memory
 view -> render 3D slice
 help -> show commands
 exit -> quit"""


def format_help() -> str:
    return HELP_TEXT


def format_position(coord: Coordinate) -> str:
    return f"(x={coord.x}, y={coord.y}, z={coord.z}, w={coord.w})"


def format_memory(cube: Hypercube) -> str:
    """List visited cells in discovery order with their latest trap status."""
    if not cube.visited:
        return "Memory:\n (nothing visited yet)"
    lines = ["Memory:"]
    for key, memory in cube.visited.items():
        status = "trap" if memory.trap else "safe"
        lines.append(f" {','.join(str(c) for c in key)} -> {status} (turn {memory.turn})")
    return "\n".join(lines)
