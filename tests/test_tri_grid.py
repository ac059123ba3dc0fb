import pytest

from mazegen.exceptions import DisconnectedGridError
from mazegen.generators import RecursiveBacktrackerGenerator
from mazegen.grid import Position, TriDirection, TriGrid
from mazegen.maze import Maze

from maze_checks import assert_perfect_maze


def test_up_and_down_triangles_have_three_sides():
    grid = TriGrid(4, 3)
    up, down = Position(1, 1), Position(1, 2)
    assert sorted(grid.neighbors(up)) == [Position(1, 0), Position(1, 2), Position(2, 1)]
    assert sorted(grid.neighbors(down)) == [Position(0, 2), Position(1, 1), Position(1, 3)]
    assert grid.neighbor_pos(up, TriDirection.NORTH) is None
    assert grid.neighbor_pos(down, TriDirection.SOUTH) is None


def test_connection_is_symmetric():
    grid = TriGrid(4, 3)
    up, below = Position(0, 0), Position(1, 0)
    assert grid.connect_to(below, up)
    assert grid.is_connected_to(up, TriDirection.SOUTH)
    assert grid.is_connected_to(below, TriDirection.NORTH)
    assert grid.connect_to(Position(0, 1), Position(0, 0))
    assert grid.is_connected_to(Position(0, 0), TriDirection.NORTHEAST)
    assert not grid.connect_to(Position(0, 1), Position(1, 1))


def test_tri_maze_exposes_orientation():
    maze = Maze.from_grid(TriGrid(2, 2))
    assert maze.is_angle_up(Position(0, 0))
    assert not maze.is_angle_up(Position(0, 1))


@pytest.mark.parametrize("height", [3, 4, 7])
def test_single_column_taller_than_two_is_rejected(height):
    # (1, 0) points down and (2, 0) points up: no side joins them.
    with pytest.raises(DisconnectedGridError) as info:
        TriGrid(1, height)
    assert info.value.total == height
    assert info.value.reached == 2


@pytest.mark.parametrize("size", [(1, 1), (1, 2), (2, 5), (0, 4)])
def test_connected_shapes_generate_full_trees(size):
    maze = RecursiveBacktrackerGenerator().generate(TriGrid(*size), seed=1)
    assert_perfect_maze(maze)
