from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple

from .base import LayerGrid, Position
from .general import GeneralRectGrid
from .mask import Mask

logger = logging.getLogger(__name__)


class RectDirection(Enum):
    NORTH = "north"
    EAST = "east"
    WEST = "west"
    SOUTH = "south"

    @property
    def reverse(self) -> "RectDirection":
        return _RECT_REVERSE[self]

    def step(self, pos: Position) -> Optional[Position]:
        """Geometric neighbor, ignoring grid bounds on the growing sides."""
        if self is RectDirection.NORTH:
            return Position(pos.row - 1, pos.col) if pos.row > 0 else None
        if self is RectDirection.SOUTH:
            return Position(pos.row + 1, pos.col)
        if self is RectDirection.EAST:
            return Position(pos.row, pos.col + 1)
        return Position(pos.row, pos.col - 1) if pos.col > 0 else None


_RECT_REVERSE = {
    RectDirection.NORTH: RectDirection.SOUTH,
    RectDirection.SOUTH: RectDirection.NORTH,
    RectDirection.EAST: RectDirection.WEST,
    RectDirection.WEST: RectDirection.EAST,
}

# Enumeration order for neighbor listings.
RECT_DIRECTIONS: Tuple[RectDirection, ...] = (
    RectDirection.NORTH,
    RectDirection.EAST,
    RectDirection.WEST,
    RectDirection.SOUTH,
)


@dataclass
class RectCell:
    # Only north/east are stored; south/west are read from the neighbor.
    north: bool = False
    east: bool = False


class RectGrid(LayerGrid):
    """Rectangular grid, optionally restricted by a mask.

    Rows are the layers used by Eller's algorithm when no mask is applied.
    Masks already passed the 4-neighbor isolation check when they were built.
    """

    name = "rect"

    def __init__(self, width: int, height: int, mask: Optional[Mask] = None) -> None:
        self._grid: GeneralRectGrid[RectCell] = GeneralRectGrid(width, height, lambda _pos: RectCell(), mask)
        logger.debug("RectGrid created: %dx%d (mask=%s)", width, height, mask is not None)

    @classmethod
    def from_mask(cls, mask: Mask) -> "RectGrid":
        return cls(mask.width, mask.height, mask)

    # ---- Grid contract ---------------------------------------------------
    def size(self) -> Tuple[int, int]:
        return self._grid.size()

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def has_mask(self) -> bool:
        return self._grid.mask is not None

    def cells_n(self) -> int:
        return self._grid.cells_n()

    def is_cell(self, pos: Position) -> bool:
        return self._grid.is_cell(pos)

    def random_cell_pos(self, rng: random.Random) -> Optional[Position]:
        return self._grid.random_cell_pos(rng)

    def all_cells_pos_set(self) -> Set[Position]:
        return self._grid.all_cells_pos_set()

    def append_neighbors(self, pos: Position, neighbors: List[Position]) -> None:
        if not self.is_cell(pos):
            return
        for direction in RECT_DIRECTIONS:
            neighbor = direction.step(pos)
            if neighbor is not None and self.is_cell(neighbor):
                neighbors.append(neighbor)

    def connect_to(self, from_pos: Position, to_pos: Position) -> bool:
        direction = self.direction_to(from_pos, to_pos)
        return direction is not None and self.connect_along(from_pos, direction)

    def is_connected(self, a: Position, b: Position) -> bool:
        direction = self.direction_to(a, b)
        return direction is not None and self.is_connected_to(a, direction)

    # ---- Layer contract --------------------------------------------------
    def layers_n(self) -> int:
        return self.height

    def cells_n_at(self, layer: int) -> int:
        return self.width if 0 <= layer < self.height else 0

    def layer_cell_pos(self, layer: int, index: int) -> Position:
        return Position(layer, index)

    def prev_in_layer(self, pos: Position) -> Optional[Position]:
        return self.neighbor_pos(pos, RectDirection.WEST)

    def append_neighbors_upper_layer(self, pos: Position, neighbors: List[Position]) -> None:
        neighbor = self.neighbor_pos(pos, RectDirection.NORTH)
        if neighbor is not None:
            neighbors.append(neighbor)

    def append_neighbors_lower_layer(self, pos: Position, neighbors: List[Position]) -> None:
        neighbor = self.neighbor_pos(pos, RectDirection.SOUTH)
        if neighbor is not None:
            neighbors.append(neighbor)

    # ---- Direction helpers ------------------------------------------------
    def neighbor_pos(self, pos: Position, direction: RectDirection) -> Optional[Position]:
        if not self.is_cell(pos):
            return None
        neighbor = direction.step(pos)
        if neighbor is None or not self.is_cell(neighbor):
            return None
        return neighbor

    def direction_to(self, from_pos: Position, to_pos: Position) -> Optional[RectDirection]:
        for direction in RECT_DIRECTIONS:
            if self.neighbor_pos(from_pos, direction) == to_pos:
                return direction
        return None

    def is_at_border(self, pos: Position, direction: RectDirection) -> bool:
        return self.is_cell(pos) and self.neighbor_pos(pos, direction) is None

    def connect_along(self, pos: Position, direction: RectDirection) -> bool:
        neighbor = self.neighbor_pos(pos, direction)
        if neighbor is None:
            return False
        if direction is RectDirection.NORTH:
            self._grid.cell(pos).north = True
        elif direction is RectDirection.EAST:
            self._grid.cell(pos).east = True
        else:
            return self.connect_along(neighbor, direction.reverse)
        return True

    def is_connected_to(self, pos: Position, direction: RectDirection) -> bool:
        neighbor = self.neighbor_pos(pos, direction)
        if neighbor is None:
            return False
        if direction is RectDirection.NORTH:
            return self._grid.cell(pos).north
        if direction is RectDirection.EAST:
            return self._grid.cell(pos).east
        return self.is_connected_to(neighbor, direction.reverse)
