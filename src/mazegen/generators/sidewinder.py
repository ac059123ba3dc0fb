from __future__ import annotations

import logging
import random
from typing import Union

from ..grid.base import Position
from ..grid.rect import RectDirection, RectGrid
from .base import RectMazeGenerator
from .binary_tree import DiagonalDirection

logger = logging.getLogger(__name__)


class SidewinderGenerator(RectMazeGenerator):
    """Sidewinder.

    Each row is swept along the horizontal bias direction, growing a run of
    connected cells. A coin flip (forced at the row's end) closes the run by
    opening one random cell of the run towards the vertical bias direction.
    The row on the vertical border is a single corridor.
    """

    name = "sidewinder"

    def __init__(self, bias: Union[DiagonalDirection, str] = DiagonalDirection.NORTHEAST) -> None:
        self.bias = DiagonalDirection(bias)

    def carve(self, grid: RectGrid, rng: random.Random) -> None:
        horizontal, vertical = self.bias.hv_dirs()
        reverse = horizontal is RectDirection.WEST
        width, height = grid.size()
        for row in range(height):
            run_start = width - 1 if reverse else 0
            for step in range(width):
                col = width - 1 - step if reverse else step
                pos = Position(row, col)
                at_horizontal_border = grid.is_at_border(pos, horizontal)
                at_vertical_border = grid.is_at_border(pos, vertical)
                close_out = not at_vertical_border and (at_horizontal_border or rng.random() < 0.5)
                if close_out:
                    if reverse:
                        out_col = rng.randint(col, run_start)
                        run_start = col - 1
                    else:
                        out_col = rng.randint(run_start, col)
                        run_start = col + 1
                    grid.connect_along(Position(row, out_col), vertical)
                elif not at_horizontal_border:
                    grid.connect_along(pos, horizontal)
        logger.debug("sidewinder: %dx%d with bias %s", width, height, self.bias.value)
