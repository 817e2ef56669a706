"""Tests for the 3D slice renderer."""

from __future__ import annotations

import numpy as np

from hypercube_maze.config.types import MazeConfig, TrapRule
from hypercube_maze.domain.coordinate import Coordinate
from hypercube_maze.domain.hypercube import CellMemory, Hypercube
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

CONFIG = MazeConfig(size=4, trap_rule=TrapRule.TIME_SHIFTING)


def _walked_cube() -> Hypercube:
    """Player at (1,2,2,2) after stepping to (0,2,2,2) and back."""
    cube = Hypercube.create(CONFIG, start=Coordinate(1, 2, 2, 2))
    assert not cube.move("xn").trap
    assert not cube.move("xp").trap
    return cube


class TestBuildSliceArray:
    def test_shape_and_dtype(self) -> None:
        grid = build_slice_array(_walked_cube())
        assert grid.shape == (4, 4, 4)
        assert grid.dtype == np.dtype("<U1")

    def test_row_markers(self) -> None:
        grid = build_slice_array(_walked_cube())
        # Indexed [y, z, x]
        assert list(grid[2, 2]) == [SAFE_MARKER, PLAYER_MARKER, EXIT_MARKER, UNKNOWN_MARKER]

    def test_exactly_one_player(self) -> None:
        grid = build_slice_array(_walked_cube())
        assert int(np.sum(grid == PLAYER_MARKER)) == 1

    def test_known_trap_marker(self) -> None:
        cube = _walked_cube()
        cube.visited[(3, 0, 1, 2)] = CellMemory(trap=True, turn=1)
        assert build_slice_array(cube)[0, 1, 3] == TRAP_MARKER

    def test_other_w_levels_excluded(self) -> None:
        cube = _walked_cube()
        cube.visited[(3, 0, 0, 1)] = CellMemory(trap=True, turn=1)
        assert TRAP_MARKER not in build_slice_array(cube)

    def test_explicit_w_level(self) -> None:
        cube = _walked_cube()
        grid = build_slice_array(cube, w_level=0)
        assert PLAYER_MARKER not in grid
        assert EXIT_MARKER not in grid
        assert set(np.unique(grid)) == {UNKNOWN_MARKER}


class TestClassifyCell:
    def test_player_beats_exit(self) -> None:
        cube = Hypercube.create(CONFIG, start=Coordinate(2, 2, 2, 2))
        assert classify_cell(cube, cube.exit) == PLAYER_MARKER

    def test_exit_beats_visited(self) -> None:
        cube = _walked_cube()
        cube.visited[cube.exit.key()] = CellMemory(trap=True, turn=9)
        assert classify_cell(cube, cube.exit) == EXIT_MARKER

    def test_exit_visible_when_unvisited(self) -> None:
        cube = Hypercube.create(CONFIG, start=Coordinate(0, 0, 0, 2))
        assert classify_cell(cube, Coordinate(2, 2, 2, 2)) == EXIT_MARKER

    def test_unknown(self) -> None:
        cube = _walked_cube()
        assert classify_cell(cube, Coordinate(3, 3, 3, 2)) == UNKNOWN_MARKER


class TestRenderSlice:
    def test_layout(self) -> None:
        text = render_slice(_walked_cube())
        lines = text.splitlines()
        assert lines[0] == "3D Slice at W = 2"
        for y in range(4):
            assert f"--- Y = {y} ---" in lines
        y2 = lines.index("--- Y = 2 ---")
        assert lines[y2 + 3] == " .  P  E  ? "
        assert "Legend:" in lines

    def test_render_is_pure(self) -> None:
        cube = _walked_cube()
        before = (cube.position, cube.turn, dict(cube.visited))
        first = render_slice(cube)
        second = render_slice(cube)
        assert first == second
        assert (cube.position, cube.turn, dict(cube.visited)) == before
