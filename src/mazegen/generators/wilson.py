from __future__ import annotations

import logging
import random
from typing import Dict, List

from ..grid.base import Grid, Position
from .base import MazeGenerator, require_neighbors

logger = logging.getLogger(__name__)


class WilsonGenerator(MazeGenerator):
    """Wilson's algorithm: loop-erased random walks.

    One random cell seeds the tree. From each cell still outside it, walk at
    random until the tree is hit; whenever the walk crosses its own path the
    loop is cut off. The remaining path is then added to the tree. The result
    is a uniform spanning tree.
    """

    name = "wilson"

    def carve(self, grid: Grid, rng: random.Random) -> None:
        unvisited = grid.all_cells_pos_set()
        first = grid.random_cell_pos(rng)
        if first is None:
            return
        unvisited.discard(first)

        # Walk starts in a shuffled order; the start choice does not bias the tree.
        starts = sorted(unvisited)
        rng.shuffle(starts)
        neighbors: List[Position] = []
        walks = 0
        for start in starts:
            if start not in unvisited:
                continue
            path = [start]
            on_path: Dict[Position, int] = {start: 0}
            cur = start
            while cur in unvisited:
                neighbors.clear()
                grid.append_neighbors(cur, neighbors)
                require_neighbors(grid, cur, neighbors)
                nxt = rng.choice(neighbors)
                loop_at = on_path.get(nxt)
                if loop_at is not None:
                    for erased in path[loop_at + 1:]:
                        del on_path[erased]
                    del path[loop_at + 1:]
                else:
                    on_path[nxt] = len(path)
                    path.append(nxt)
                cur = nxt
            self._commit_path(grid, path)
            unvisited.difference_update(path)
            walks += 1
        logger.debug("wilson: committed %d walks", walks)

    def _commit_path(self, grid: Grid, path: List[Position]) -> None:
        for a, b in zip(path, path[1:]):
            grid.connect_to(a, b)
