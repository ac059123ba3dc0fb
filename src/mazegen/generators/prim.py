from __future__ import annotations

import logging
import random
from typing import List, Tuple

from ..grid.base import Grid, Position
from .base import MazeGenerator

logger = logging.getLogger(__name__)


class PrimGenerator(MazeGenerator):
    """Randomized Prim over frontier edges.

    The frontier holds edges from the tree to cells outside it. A random
    frontier edge is taken; if its far end is still outside the tree it is
    connected and its own outgoing edges join the frontier.
    """

    name = "prim"

    def carve(self, grid: Grid, rng: random.Random) -> None:
        start = grid.random_cell_pos(rng)
        if start is None:
            return
        cells_n = grid.cells_n()
        visited = {start}
        frontier: List[Tuple[Position, Position]] = [(start, n) for n in grid.neighbors(start)]
        while frontier and len(visited) < cells_n:
            ind = rng.randrange(len(frontier))
            frontier[ind], frontier[-1] = frontier[-1], frontier[ind]
            near, far = frontier.pop()
            if far in visited:
                continue
            grid.connect_to(near, far)
            visited.add(far)
            frontier.extend((far, n) for n in grid.neighbors(far) if n not in visited)
        logger.debug("prim: %d cells joined, %d frontier edges left", len(visited), len(frontier))
