from __future__ import annotations

import logging
import random
from typing import Dict, List

from ..disjoint_set import DisjointSet
from ..grid.base import LayerGrid, Position
from .base import LayerMazeGenerator, require_neighbors

logger = logging.getLogger(__name__)

DEFAULT_JOIN_PROBABILITY = 1 / 2
DEFAULT_CARRY_PROBABILITY = 1 / 3


class EllerGenerator(LayerMazeGenerator):
    """Eller's algorithm, one layer (row or ring) at a time.

    Within a layer, adjacent cells of different sets are joined at random
    (always on the last layer). Every set then carries at least one member
    down into the next layer, extra members following with a lower
    probability; lower cells that received nothing start sets of their own.
    """

    name = "eller"

    def __init__(
        self,
        join_probability: float = DEFAULT_JOIN_PROBABILITY,
        carry_probability: float = DEFAULT_CARRY_PROBABILITY,
    ) -> None:
        if not 0.0 <= join_probability <= 1.0 or not 0.0 <= carry_probability <= 1.0:
            raise ValueError("Eller probabilities must lie in [0, 1]")
        self.join_probability = join_probability
        self.carry_probability = carry_probability

    def carve(self, grid: LayerGrid, rng: random.Random) -> None:
        sets: DisjointSet[Position] = DisjointSet()
        layers_n = grid.layers_n()
        for layer in range(layers_n):
            row = [grid.layer_cell_pos(layer, i) for i in range(grid.cells_n_at(layer))]
            for pos in row:
                sets.add(pos)
            is_last = layer == layers_n - 1
            self._join_layer(grid, rng, sets, row, is_last)
            if not is_last:
                self._carry_down(grid, rng, sets, row)
        logger.debug("eller: %d layers, %d sets left", layers_n, sets.sets_n())

    def _join_layer(
        self,
        grid: LayerGrid,
        rng: random.Random,
        sets: DisjointSet[Position],
        row: List[Position],
        force: bool,
    ) -> None:
        for pos in row:
            prev = grid.prev_in_layer(pos)
            if prev is None or sets.is_same(prev, pos):
                continue
            if force or rng.random() < self.join_probability:
                grid.connect_to(prev, pos)
                sets.merge(prev, pos)

    def _carry_down(
        self,
        grid: LayerGrid,
        rng: random.Random,
        sets: DisjointSet[Position],
        row: List[Position],
    ) -> None:
        groups: Dict[int, List[Position]] = {}
        for pos in row:
            groups.setdefault(sets.root(pos), []).append(pos)
        lower: List[Position] = []
        for members in groups.values():
            rng.shuffle(members)
            for ind, pos in enumerate(members):
                if ind > 0 and rng.random() >= self.carry_probability:
                    continue
                lower.clear()
                grid.append_neighbors_lower_layer(pos, lower)
                require_neighbors(grid, pos, lower)
                below = rng.choice(lower)
                grid.connect_to(pos, below)
                sets.add(below)
                sets.merge(pos, below)

