import random

import pytest

from mazegen.exceptions import InconsistentMaskRowError, MaskError, MaskIsolationError
from mazegen.grid import HexaGrid, Mask, Position, RectGrid, TriGrid


def test_single_region_mask_reports_cells():
    mask = Mask.from_text("....\n.xx.\n....\n")
    assert mask.size() == (4, 3)
    assert mask.cells_n() == 10
    assert not mask.is_cell(Position(1, 1))
    assert mask.is_cell(Position(1, 0))
    assert not mask.is_cell(Position(5, 5)), "out of range positions are not cells"


def test_pocket_cut_off_by_x_cells_fails():
    text = "\n".join(
        [
            "..x..",
            "..x..",
            "xxx..",
            ".x...",
        ]
    )
    # (3, 0) is surrounded by X cells and the border.
    with pytest.raises(MaskIsolationError) as info:
        Mask.from_text(text)
    assert info.value.total == 14
    assert info.value.reached < info.value.total


def test_two_regions_fail_construction():
    rows = [
        [True, True, False, True],
        [True, True, False, True],
    ]
    with pytest.raises(MaskError):
        Mask.from_rows(rows)


def test_inconsistent_row_width():
    with pytest.raises(InconsistentMaskRowError) as info:
        Mask.from_rows([[True, True], [True], [True, True]])
    assert info.value.row == 1
    assert info.value.expected_width == 2


def test_flag_count_must_match_dimensions():
    with pytest.raises(ValueError):
        Mask(3, 2, [True] * 5)


def test_empty_mask_is_valid():
    mask = Mask(2, 2, [False] * 4)
    assert mask.cells_n() == 0
    grid = RectGrid.from_mask(mask)
    assert grid.cells_n() == 0
    assert grid.random_cell_pos(random.Random(1)) is None


def test_tri_grid_rechecks_with_its_own_adjacency():
    # Rect-connected through (0, 1) -> (1, 1), but (0, 1) points down and has no south side.
    mask = Mask.from_text("x.\n..")
    assert mask.cells_n() == 3
    with pytest.raises(MaskIsolationError):
        TriGrid.from_mask(mask)
    # Rect and hexa adjacency both keep the region connected.
    assert RectGrid.from_mask(mask).cells_n() == 3
    assert HexaGrid.from_mask(mask).cells_n() == 3


def test_masked_grid_only_reports_active_cells():
    mask = Mask.from_text("...\n.x.\n...")
    grid = RectGrid.from_mask(mask)
    assert grid.has_mask
    assert not grid.has_full_layers()
    assert RectGrid(3, 3).has_full_layers()
    assert grid.cells_n() == 8
    assert Position(1, 1) not in grid.all_cells_pos_set()
    assert grid.neighbors(Position(0, 1)) == [Position(0, 2), Position(0, 0)]
    assert not grid.connect_to(Position(0, 1), Position(1, 1))
