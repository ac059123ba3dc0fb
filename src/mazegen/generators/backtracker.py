from __future__ import annotations

import logging
import random

from ..grid.base import Grid
from .base import MazeGenerator

logger = logging.getLogger(__name__)


class RecursiveBacktrackerGenerator(MazeGenerator):
    """Depth-first search with an explicit stack."""

    name = "recursive_backtracker"

    def carve(self, grid: Grid, rng: random.Random) -> None:
        start = grid.random_cell_pos(rng)
        if start is None:
            return
        visited = {start}
        stack = [start]
        max_depth = 1
        while stack:
            cur = stack[-1]
            candidates = [n for n in grid.neighbors(cur) if n not in visited]
            if not candidates:
                stack.pop()
                continue
            nxt = rng.choice(candidates)
            grid.connect_to(cur, nxt)
            visited.add(nxt)
            stack.append(nxt)
            max_depth = max(max_depth, len(stack))
        logger.debug("recursive_backtracker: visited %d cells, max depth %d", len(visited), max_depth)
