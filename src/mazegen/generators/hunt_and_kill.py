from __future__ import annotations

import logging
import random
from typing import List, Optional

from ..exceptions import GridContractError
from ..grid.base import Grid, Position
from .base import MazeGenerator

logger = logging.getLogger(__name__)


class HuntAndKillGenerator(MazeGenerator):
    """Hunt-and-kill.

    Kill: random walk through unvisited neighbors until stuck.
    Hunt: scan cells in position order for the first unvisited cell next to
    the visited region, connect it to a random visited neighbor and resume
    the walk from there.
    """

    name = "hunt_and_kill"

    def carve(self, grid: Grid, rng: random.Random) -> None:
        cur: Optional[Position] = grid.random_cell_pos(rng)
        if cur is None:
            return
        unvisited = grid.all_cells_pos_set()
        unvisited.discard(cur)
        scan_order = sorted(unvisited)
        scan_from = 0
        hunts = 0
        while cur is not None:
            self._kill(grid, rng, cur, unvisited)
            # Cells only ever leave the unvisited set, so the scan start moves forward.
            while scan_from < len(scan_order) and scan_order[scan_from] not in unvisited:
                scan_from += 1
            if scan_from == len(scan_order):
                break
            cur = self._hunt(grid, rng, scan_order, scan_from, unvisited)
            hunts += 1
        logger.debug("hunt_and_kill: %d hunts", hunts)

    @staticmethod
    def _kill(grid: Grid, rng: random.Random, cur: Position, unvisited: set) -> None:
        while True:
            candidates = [n for n in grid.neighbors(cur) if n in unvisited]
            if not candidates:
                return
            nxt = rng.choice(candidates)
            grid.connect_to(cur, nxt)
            unvisited.discard(nxt)
            cur = nxt

    @staticmethod
    def _hunt(
        grid: Grid,
        rng: random.Random,
        scan_order: List[Position],
        scan_from: int,
        unvisited: set,
    ) -> Position:
        for pos in scan_order[scan_from:]:
            if pos not in unvisited:
                continue
            visited_neighbors = [n for n in grid.neighbors(pos) if n not in unvisited]
            if visited_neighbors:
                grid.connect_to(pos, rng.choice(visited_neighbors))
                unvisited.discard(pos)
                return pos
        raise GridContractError(f"{len(unvisited)} cells of the {grid.name} grid are unreachable")
