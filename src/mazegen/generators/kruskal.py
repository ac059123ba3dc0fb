from __future__ import annotations

import logging
import random
from typing import List, Tuple

from ..disjoint_set import DisjointSet
from ..exceptions import GridContractError
from ..grid.base import Grid, Position
from .base import MazeGenerator

logger = logging.getLogger(__name__)

Edge = Tuple[Position, Position]


def collect_edges(grid: Grid) -> List[Edge]:
    """Every adjacency of ``grid`` exactly once, as ``(low, high)`` pairs."""
    edges: List[Edge] = []
    for pos in sorted(grid.all_cells_pos_set()):
        for neighbor in grid.neighbors(pos):
            if pos < neighbor:
                edges.append((pos, neighbor))
    return edges


def connect_forest(grid: Grid, rng: random.Random) -> DisjointSet[Position]:
    """Join random edges across different sets until a single set remains."""
    sets: DisjointSet[Position] = DisjointSet()
    for pos in grid.all_cells_pos_set():
        sets.add(pos)
    edges = collect_edges(grid)
    rng.shuffle(edges)
    for a, b in edges:
        if sets.sets_n() <= 1:
            break
        if sets.merge(a, b):
            grid.connect_to(a, b)
    if sets.sets_n() > 1:
        raise GridContractError(f"{sets.sets_n()} disconnected regions left in the {grid.name} grid")
    logger.debug("kruskal: %d candidate edges for %d cells", len(edges), len(sets))
    return sets


class KruskalGenerator(MazeGenerator):
    """Randomized Kruskal: shuffle all edges and keep those joining two sets."""

    name = "kruskal"

    def carve(self, grid: Grid, rng: random.Random) -> None:
        if grid.cells_n() == 0:
            return
        connect_forest(grid, rng)
