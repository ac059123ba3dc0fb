from __future__ import annotations

import logging
import random
from typing import List

from ..grid.base import Grid, Position
from .base import MazeGenerator, require_neighbors

logger = logging.getLogger(__name__)


class AldousBroderGenerator(MazeGenerator):
    """Aldous-Broder random walk.

    Walk from a random cell to random neighbors, connecting each cell the
    first time the walk enters it. Produces a uniform spanning tree, though
    the walk can take a long time to cover the last few cells.
    """

    name = "aldous_broder"

    def carve(self, grid: Grid, rng: random.Random) -> None:
        cur = grid.random_cell_pos(rng)
        if cur is None:
            return
        visited = {cur}
        unvisited_n = grid.cells_n() - 1
        neighbors: List[Position] = []
        steps = 0
        while unvisited_n > 0:
            neighbors.clear()
            grid.append_neighbors(cur, neighbors)
            require_neighbors(grid, cur, neighbors)
            nxt = rng.choice(neighbors)
            if nxt not in visited:
                grid.connect_to(cur, nxt)
                visited.add(nxt)
                unvisited_n -= 1
            cur = nxt
            steps += 1
        logger.debug("aldous_broder: covered %d cells in %d steps", len(visited), steps)
