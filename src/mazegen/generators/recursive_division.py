from __future__ import annotations

import logging
import random
from typing import List, NamedTuple

from ..grid.base import Position
from ..grid.rect import RectDirection, RectGrid
from .base import RectMazeGenerator

logger = logging.getLogger(__name__)


class Region(NamedTuple):
    row: int
    col: int
    rows: int
    cols: int


class RecursiveDivisionGenerator(RectMazeGenerator):
    """Recursive division.

    A region is cut in two by a wall with a single random gap, across its
    longer side, until it fits within ``room_max_rows`` x ``room_max_cols``;
    such a region becomes an open room. With the default 1 x 1 rooms the
    result is a perfect maze. Passages are recorded as connections, so the
    wall-with-gap becomes the one connection joining the two halves.
    """

    name = "recursive_division"

    def __init__(self, room_max_rows: int = 1, room_max_cols: int = 1) -> None:
        if room_max_rows < 1 or room_max_cols < 1:
            raise ValueError("Room limits must be at least 1 x 1")
        self.room_max_rows = room_max_rows
        self.room_max_cols = room_max_cols

    def carve(self, grid: RectGrid, rng: random.Random) -> None:
        width, height = grid.size()
        if width == 0 or height == 0:
            return
        pending: List[Region] = [Region(0, 0, height, width)]
        rooms = 0
        while pending:
            region = pending.pop()
            split_rows = region.rows > self.room_max_rows
            split_cols = region.cols > self.room_max_cols
            if split_rows and split_cols:
                if region.rows == region.cols:
                    split_cols = rng.random() < 0.5
                else:
                    split_cols = region.cols > region.rows
                split_rows = not split_cols
            if split_rows:
                pending.extend(self._split_rows(grid, rng, region))
            elif split_cols:
                pending.extend(self._split_cols(grid, rng, region))
            else:
                self._open_room(grid, region)
                rooms += 1
        logger.debug("recursive_division: %dx%d split into %d rooms", width, height, rooms)

    @staticmethod
    def _split_rows(grid: RectGrid, rng: random.Random, region: Region) -> List[Region]:
        # Wall runs between rows ``cut - 1`` and ``cut``.
        cut = rng.randint(region.row + 1, region.row + region.rows - 1)
        gap = rng.randint(region.col, region.col + region.cols - 1)
        grid.connect_along(Position(cut, gap), RectDirection.NORTH)
        top = cut - region.row
        return [
            Region(region.row, region.col, top, region.cols),
            Region(cut, region.col, region.rows - top, region.cols),
        ]

    @staticmethod
    def _split_cols(grid: RectGrid, rng: random.Random, region: Region) -> List[Region]:
        cut = rng.randint(region.col + 1, region.col + region.cols - 1)
        gap = rng.randint(region.row, region.row + region.rows - 1)
        grid.connect_along(Position(gap, cut - 1), RectDirection.EAST)
        left = cut - region.col
        return [
            Region(region.row, region.col, region.rows, left),
            Region(region.row, cut, region.rows, region.cols - left),
        ]

    @staticmethod
    def _open_room(grid: RectGrid, region: Region) -> None:
        for row in range(region.row, region.row + region.rows):
            for col in range(region.col, region.col + region.cols):
                pos = Position(row, col)
                if row > region.row:
                    grid.connect_along(pos, RectDirection.NORTH)
                if col + 1 < region.col + region.cols:
                    grid.connect_along(pos, RectDirection.EAST)
