from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Union

from ..grid.base import Grid, Position
from .base import MazeGenerator

logger = logging.getLogger(__name__)


class SelectionStrategy(str, Enum):
    RANDOM = "random"
    NEWEST = "newest"
    OLDEST = "oldest"


class GrowingTreeGenerator(MazeGenerator):
    """Growing tree.

    Keep a list of active cells seeded with one random cell. Pick an active
    cell (at random by default), connect it to a random unvisited neighbor and
    activate that neighbor, or retire the cell when it has none left.
    ``newest`` selection reproduces the recursive backtracker, ``oldest``
    grows the maze breadth-first.
    """

    name = "growing_tree"

    def __init__(self, strategy: Union[SelectionStrategy, str] = SelectionStrategy.RANDOM) -> None:
        self.strategy = SelectionStrategy(strategy)

    def carve(self, grid: Grid, rng: random.Random) -> None:
        start = grid.random_cell_pos(rng)
        if start is None:
            return
        cells_n = grid.cells_n()
        visited = {start}
        active: List[Position] = [start]
        while active and len(visited) < cells_n:
            ind = self._select(active, rng)
            cur = active[ind]
            candidates = [n for n in grid.neighbors(cur) if n not in visited]
            if candidates:
                nxt = rng.choice(candidates)
                grid.connect_to(cur, nxt)
                visited.add(nxt)
                active.append(nxt)
            else:
                del active[ind]
        logger.debug("growing_tree(%s): %d cells joined", self.strategy.value, len(visited))

    def _select(self, active: List[Position], rng: random.Random) -> int:
        if self.strategy is SelectionStrategy.NEWEST:
            return len(active) - 1
        if self.strategy is SelectionStrategy.OLDEST:
            return 0
        return rng.randrange(len(active))
