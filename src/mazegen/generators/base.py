from __future__ import annotations

import logging
import random
import time
from abc import ABC, abstractmethod
from typing import List, Optional

from ..exceptions import GridContractError, MaskNotSupportedError, TopologyNotSupportedError
from ..grid.base import Grid, LayerGrid, Position
from ..grid.rect import RectGrid
from ..maze import Maze

logger = logging.getLogger(__name__)


class MazeGenerator(ABC):
    """Abstract base for maze generators.

    A generator turns a freshly built grid into a perfect maze in place.
    ``check_grid`` runs before any mutation so that unsupported
    configurations are rejected up front.
    """

    name: str = "generator"
    supports_mask: bool = True

    def generate(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> Maze:
        """Carve ``grid`` and return its read-only view.

        A new ``random.Random(seed)`` is created when no ``rng`` is given.
        """
        self.check_grid(grid)
        if rng is None:
            rng = random.Random(seed)
        started = time.perf_counter()
        logger.debug("%s: generating over %s grid with %d cells", self.name, grid.name, grid.cells_n())
        self.carve(grid, rng)
        logger.debug("%s: done in %.2f ms", self.name, (time.perf_counter() - started) * 1000.0)
        return Maze.from_grid(grid)

    def check_grid(self, grid: Grid) -> None:
        if grid.has_mask and not self.supports_mask:
            logger.warning("%s rejected a masked %s grid", self.name, grid.name)
            raise MaskNotSupportedError(self.name)

    @abstractmethod
    def carve(self, grid: Grid, rng: random.Random) -> None:
        """Connect cells of ``grid`` until it forms a spanning tree."""
        raise NotImplementedError


class LayerMazeGenerator(MazeGenerator):
    """Base for generators that sweep a grid one layer at a time."""

    supports_mask = False

    def check_grid(self, grid: Grid) -> None:
        if not isinstance(grid, LayerGrid):
            logger.warning("%s rejected a non-layered %s grid", self.name, grid.name)
            raise TopologyNotSupportedError(self.name, grid.name)
        if not grid.has_full_layers():
            logger.warning("%s rejected a %s grid with incomplete layers", self.name, grid.name)
            raise MaskNotSupportedError(self.name)
        super().check_grid(grid)


class RectMazeGenerator(MazeGenerator):
    """Base for generators that only make sense on a complete rectangle."""

    supports_mask = False

    def check_grid(self, grid: Grid) -> None:
        if not isinstance(grid, RectGrid):
            logger.warning("%s rejected a %s grid", self.name, grid.name)
            raise TopologyNotSupportedError(self.name, grid.name)
        super().check_grid(grid)


def require_neighbors(grid: Grid, pos: Position, neighbors: List[Position]) -> None:
    if not neighbors:
        raise GridContractError(f"{grid.name} grid reported no neighbors for {pos}; the grid is not connected")
