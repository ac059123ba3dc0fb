import random

import pytest

from mazegen.exceptions import MaskNotSupportedError, TopologyNotSupportedError
from mazegen.generators import (
    BinaryTreeGenerator,
    DiagonalDirection,
    RecursiveDivisionGenerator,
    SidewinderGenerator,
)
from mazegen.grid import HexaGrid, Mask, Position, RectDirection, RectGrid

from maze_checks import assert_all_reachable, assert_perfect_maze


def test_binary_tree_northeast_on_5x4():
    maze = BinaryTreeGenerator(DiagonalDirection.NORTHEAST).generate(RectGrid(5, 4), seed=42)
    assert_perfect_maze(maze)
    width, height = maze.size()
    assert (width, height) == (5, 4)
    for row in range(height):
        for col in range(width):
            pos = Position(row, col)
            north = maze.is_connected_to(pos, RectDirection.NORTH)
            east = maze.is_connected_to(pos, RectDirection.EAST)
            top, right = row == 0, col == width - 1
            if top and right:
                assert not north and not east
            elif top:
                assert east and not north, f"top row cell {pos} must open east"
            elif right:
                assert north and not east, f"rightmost cell {pos} must open north"
            else:
                assert north != east, f"{pos} must open exactly one of north/east"


def test_diagonal_direction_pairs():
    assert DiagonalDirection.NORTHEAST.hv_dirs() == (RectDirection.EAST, RectDirection.NORTH)
    assert DiagonalDirection.SOUTHEAST.hv_dirs() == (RectDirection.EAST, RectDirection.SOUTH)
    assert DiagonalDirection.SOUTHWEST.hv_dirs() == (RectDirection.WEST, RectDirection.SOUTH)
    assert DiagonalDirection.NORTHWEST.hv_dirs() == (RectDirection.WEST, RectDirection.NORTH)


def test_sidewinder_top_row_is_a_corridor():
    maze = SidewinderGenerator().generate(RectGrid(8, 6), seed=5)
    assert_perfect_maze(maze)
    for col in range(7):
        assert maze.is_connected_to(Position(0, col), RectDirection.EAST)
    for col in range(8):
        assert not maze.is_connected_to(Position(0, col), RectDirection.NORTH)


def test_sidewinder_each_run_has_one_exit_up():
    maze = SidewinderGenerator().generate(RectGrid(10, 5), seed=8)
    for row in range(1, 5):
        run_exits = 0
        for col in range(10):
            pos = Position(row, col)
            if maze.is_connected_to(pos, RectDirection.NORTH):
                run_exits += 1
            if not maze.is_connected_to(pos, RectDirection.EAST):
                assert run_exits == 1, f"run ending at {pos} has {run_exits} exits"
                run_exits = 0


def test_recursive_division_4x4_single_rooms():
    maze = RecursiveDivisionGenerator(1, 1).generate(RectGrid(4, 4), seed=1)
    assert_perfect_maze(maze)
    for row in range(3):
        for col in range(3):
            pos = Position(row, col)
            below, right = Position(row + 1, col), Position(row, col + 1)
            open_square = (
                maze.is_connected(pos, right)
                and maze.is_connected(pos, below)
                and maze.is_connected(right, Position(row + 1, col + 1))
                and maze.is_connected(below, Position(row + 1, col + 1))
            )
            assert not open_square, f"2x2 open room at {pos}"


def test_recursive_division_open_rooms_stay_reachable():
    maze = RecursiveDivisionGenerator(room_max_rows=3, room_max_cols=3).generate(RectGrid(3, 3), seed=4)
    # The whole grid fits in one room: every internal wall is removed.
    assert maze.connections_n() == 12
    assert_all_reachable(maze)


def test_recursive_division_rejects_bad_limits():
    with pytest.raises(ValueError):
        RecursiveDivisionGenerator(room_max_rows=0)


@pytest.mark.parametrize(
    "gen",
    [BinaryTreeGenerator(), SidewinderGenerator(), RecursiveDivisionGenerator()],
    ids=lambda g: g.name,
)
def test_rect_only_algorithms_reject_masks_and_other_topologies(gen):
    masked = RectGrid.from_mask(Mask.from_text("...\n.x.\n..."))
    with pytest.raises(MaskNotSupportedError):
        gen.generate(masked, rng=random.Random(0))
    assert masked.all_cells_pos_set() and not any(
        masked.is_connected(a, b) for a in masked.all_cells_pos_set() for b in masked.neighbors(a)
    ), "rejected grids are left untouched"
    with pytest.raises(TopologyNotSupportedError):
        gen.generate(HexaGrid(3, 3), seed=0)


def test_unknown_bias_is_rejected():
    with pytest.raises(ValueError):
        BinaryTreeGenerator("up")
