from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple, Union

from .grid.base import Grid, Position
from .grid.hexa import HexaDirection
from .grid.rect import RectDirection
from .grid.ring import RingDirection, RingGrid
from .grid.tri import TriDirection, TriGrid, is_angle_up

logger = logging.getLogger(__name__)

Direction = Union[RectDirection, HexaDirection, TriDirection, RingDirection]
Edge = Tuple[Position, Position]


class Maze:
    """Read-only view of a generated grid for renderers and serializers.

    Exposes connectivity queries only; the wrapped grid is never mutated
    through this object.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    @staticmethod
    def from_grid(grid: Grid) -> "Maze":
        logger.debug("Wrapping %s grid with %d cells", grid.name, grid.cells_n())
        if isinstance(grid, TriGrid):
            return TriMaze(grid)
        if isinstance(grid, RingGrid):
            return RingMaze(grid)
        return Maze(grid)

    @property
    def topology(self) -> str:
        return self._grid.name

    @property
    def has_mask(self) -> bool:
        return self._grid.has_mask

    def size(self) -> Tuple[int, int]:
        return self._grid.size()

    def cells_n(self) -> int:
        return self._grid.cells_n()

    def is_cell(self, pos: Position) -> bool:
        return self._grid.is_cell(pos)

    def cell_positions(self) -> List[Position]:
        return sorted(self._grid.all_cells_pos_set())

    def neighbors(self, pos: Position) -> List[Position]:
        return self._grid.neighbors(pos)

    def is_connected_to(self, pos: Position, direction: Direction) -> bool:
        """Whether ``pos`` has a passage in ``direction``, whichever side stores it."""
        return self._grid.is_connected_to(pos, direction)

    def is_connected(self, a: Position, b: Position) -> bool:
        return self._grid.is_connected(a, b)

    def connections(self) -> Iterator[Edge]:
        """Each passage once, as an ordered ``(low, high)`` pair."""
        for pos in self.cell_positions():
            for neighbor in self._grid.neighbors(pos):
                if pos < neighbor and self._grid.is_connected(pos, neighbor):
                    yield pos, neighbor

    def connections_n(self) -> int:
        return sum(1 for _ in self.connections())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(topology={self.topology!r}, size={self.size()}, cells={self.cells_n()})"


class TriMaze(Maze):
    def is_angle_up(self, pos: Position) -> bool:
        return is_angle_up(pos)


class RingMaze(Maze):
    _grid: RingGrid

    def rings_n(self) -> int:
        return self._grid.rings_n()

    def ring_cells_n(self, ring: int) -> Optional[int]:
        return self._grid.ring_cells_n(ring)

    def is_connect_inward(self, pos: Position) -> bool:
        return self._grid.is_connected_to(pos, RingDirection.INWARD)

    def is_connect_clockwise(self, pos: Position) -> bool:
        return self._grid.is_connected_to(pos, RingDirection.CLOCKWISE)
