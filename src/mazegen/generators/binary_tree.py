from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Tuple, Union

from ..grid.base import Position
from ..grid.rect import RectDirection, RectGrid
from .base import RectMazeGenerator

logger = logging.getLogger(__name__)


class DiagonalDirection(str, Enum):
    NORTHEAST = "northeast"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    NORTHWEST = "northwest"

    def hv_dirs(self) -> Tuple[RectDirection, RectDirection]:
        """The (horizontal, vertical) pair of directions the bias allows."""
        horizontal = RectDirection.EAST if self in (DiagonalDirection.NORTHEAST, DiagonalDirection.SOUTHEAST) else RectDirection.WEST
        vertical = RectDirection.NORTH if self in (DiagonalDirection.NORTHEAST, DiagonalDirection.NORTHWEST) else RectDirection.SOUTH
        return horizontal, vertical


class BinaryTreeGenerator(RectMazeGenerator):
    """Binary tree: every cell opens towards one of two fixed directions.

    At the borders only the remaining direction is available, which leaves
    two unbroken corridors along the biased sides.
    """

    name = "binary_tree"

    def __init__(self, bias: Union[DiagonalDirection, str] = DiagonalDirection.NORTHEAST) -> None:
        self.bias = DiagonalDirection(bias)

    def carve(self, grid: RectGrid, rng: random.Random) -> None:
        horizontal, vertical = self.bias.hv_dirs()
        width, height = grid.size()
        for row in range(height):
            for col in range(width):
                pos = Position(row, col)
                at_horizontal_border = grid.is_at_border(pos, horizontal)
                at_vertical_border = grid.is_at_border(pos, vertical)
                if at_horizontal_border:
                    if not at_vertical_border:
                        grid.connect_along(pos, vertical)
                elif at_vertical_border:
                    grid.connect_along(pos, horizontal)
                else:
                    grid.connect_along(pos, rng.choice((horizontal, vertical)))
        logger.debug("binary_tree: %dx%d with bias %s", width, height, self.bias.value)
