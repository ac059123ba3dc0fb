from mazegen.grid import HexaDirection, HexaGrid, Position


def test_even_column_neighbors():
    grid = HexaGrid(5, 5)
    pos = Position(2, 2)
    assert grid.neighbor_pos(pos, HexaDirection.NORTHEAST) == Position(1, 3)
    assert grid.neighbor_pos(pos, HexaDirection.SOUTHEAST) == Position(2, 3)
    assert grid.neighbor_pos(pos, HexaDirection.SOUTHWEST) == Position(2, 1)
    assert grid.neighbor_pos(pos, HexaDirection.NORTHWEST) == Position(1, 1)
    assert len(grid.neighbors(pos)) == 6


def test_odd_column_neighbors():
    grid = HexaGrid(5, 5)
    pos = Position(2, 1)
    assert grid.neighbor_pos(pos, HexaDirection.NORTHEAST) == Position(2, 2)
    assert grid.neighbor_pos(pos, HexaDirection.SOUTHEAST) == Position(3, 2)
    assert grid.neighbor_pos(pos, HexaDirection.SOUTHWEST) == Position(3, 0)
    assert grid.neighbor_pos(pos, HexaDirection.NORTHWEST) == Position(2, 0)


def test_corner_has_few_neighbors():
    grid = HexaGrid(3, 3)
    assert sorted(grid.neighbors(Position(0, 0))) == [Position(0, 1), Position(1, 0)]


def test_connection_visible_from_both_sides():
    grid = HexaGrid(4, 4)
    a, b = Position(1, 1), Position(2, 2)
    assert grid.connect_to(a, b)
    assert grid.is_connected_to(a, HexaDirection.SOUTHEAST)
    assert grid.is_connected_to(b, HexaDirection.NORTHWEST)
    assert grid.is_connected(b, a)
    assert not grid.is_connected(a, Position(1, 2))


def test_prev_in_layer_is_previous_column():
    grid = HexaGrid(4, 2)
    assert grid.prev_in_layer(Position(0, 0)) is None
    assert grid.prev_in_layer(Position(0, 1)) == Position(0, 0)
    assert grid.prev_in_layer(Position(1, 2)) == Position(1, 1)
