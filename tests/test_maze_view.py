from mazegen.generators import KruskalGenerator
from mazegen.grid import Mask, Position, RectGrid, RingGrid, TriGrid
from mazegen.maze import Maze, RingMaze, TriMaze


def test_from_grid_picks_view_type():
    assert type(Maze.from_grid(RectGrid(2, 2))) is Maze
    assert isinstance(Maze.from_grid(TriGrid(2, 2)), TriMaze)
    assert isinstance(Maze.from_grid(RingGrid(2)), RingMaze)


def test_view_reports_grid_shape():
    mask = Mask.from_text("..\n.x")
    maze = KruskalGenerator().generate(RectGrid.from_mask(mask), seed=0)
    assert maze.topology == "rect"
    assert maze.has_mask
    assert maze.size() == (2, 2)
    assert maze.cells_n() == 3
    assert maze.cell_positions() == [Position(0, 0), Position(0, 1), Position(1, 0)]
    assert not maze.is_cell(Position(1, 1))
    assert maze.connections_n() == 2
    assert sorted(maze.connections()) == [
        (Position(0, 0), Position(0, 1)),
        (Position(0, 0), Position(1, 0)),
    ]
    assert "topology='rect'" in repr(maze)


def test_ring_view_helpers():
    grid = RingGrid(3)
    grid.connect_to(Position(1, 0), Position(0, 0))
    grid.connect_to(Position(1, 0), Position(1, 1))
    maze = Maze.from_grid(grid)
    assert maze.rings_n() == 3
    assert maze.ring_cells_n(2) == 12
    assert maze.ring_cells_n(3) is None
    assert maze.is_connect_inward(Position(1, 0))
    assert maze.is_connect_clockwise(Position(1, 0))
    assert not maze.is_connect_inward(Position(0, 0))
