from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Set, Tuple

from .base import LayerGrid, Position
from .general import GeneralRectGrid
from .mask import Mask

logger = logging.getLogger(__name__)


class HexaDirection(Enum):
    NORTH = "north"
    NORTHEAST = "northeast"
    SOUTHEAST = "southeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    NORTHWEST = "northwest"

    @property
    def reverse(self) -> "HexaDirection":
        return _HEXA_REVERSE[self]

    def step(self, pos: Position) -> Optional[Position]:
        """Neighbor in flat-topped columns where odd columns sit half a cell lower."""
        row, col = pos
        odd = col % 2 == 1
        if self is HexaDirection.NORTH:
            return Position(row - 1, col) if row > 0 else None
        if self is HexaDirection.SOUTH:
            return Position(row + 1, col)
        if self is HexaDirection.NORTHEAST:
            if odd:
                return Position(row, col + 1)
            return Position(row - 1, col + 1) if row > 0 else None
        if self is HexaDirection.SOUTHEAST:
            return Position(row + 1, col + 1) if odd else Position(row, col + 1)
        if col == 0:
            return None
        if self is HexaDirection.SOUTHWEST:
            return Position(row + 1, col - 1) if odd else Position(row, col - 1)
        # NORTHWEST
        if odd:
            return Position(row, col - 1)
        return Position(row - 1, col - 1) if row > 0 else None


_HEXA_REVERSE = {
    HexaDirection.NORTH: HexaDirection.SOUTH,
    HexaDirection.SOUTH: HexaDirection.NORTH,
    HexaDirection.NORTHEAST: HexaDirection.SOUTHWEST,
    HexaDirection.SOUTHWEST: HexaDirection.NORTHEAST,
    HexaDirection.SOUTHEAST: HexaDirection.NORTHWEST,
    HexaDirection.NORTHWEST: HexaDirection.SOUTHEAST,
}

HEXA_DIRECTIONS: Tuple[HexaDirection, ...] = (
    HexaDirection.NORTH,
    HexaDirection.NORTHEAST,
    HexaDirection.SOUTHEAST,
    HexaDirection.NORTHWEST,
    HexaDirection.SOUTHWEST,
    HexaDirection.SOUTH,
)

# Directions whose bit lives on the cell itself; the other three live on the neighbor.
_STORED = (HexaDirection.NORTH, HexaDirection.NORTHWEST, HexaDirection.SOUTHWEST)


@dataclass
class HexaCell:
    north: bool = False
    northwest: bool = False
    southwest: bool = False


class HexaGrid(LayerGrid):
    """Hexagonal grid laid out in columns, optionally restricted by a mask."""

    name = "hexa"

    def __init__(self, width: int, height: int, mask: Optional[Mask] = None) -> None:
        if mask is not None:
            mask.check_isolation(hexa_adjacency)
        self._grid: GeneralRectGrid[HexaCell] = GeneralRectGrid(width, height, lambda _pos: HexaCell(), mask)
        logger.debug("HexaGrid created: %dx%d (mask=%s)", width, height, mask is not None)

    @classmethod
    def from_mask(cls, mask: Mask) -> "HexaGrid":
        return cls(mask.width, mask.height, mask)

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
        for direction in HEXA_DIRECTIONS:
            neighbor = self.neighbor_pos(pos, direction)
            if neighbor is not None:
                neighbors.append(neighbor)

    def connect_to(self, from_pos: Position, to_pos: Position) -> bool:
        direction = self.direction_to(from_pos, to_pos)
        if direction is None:
            return False
        if direction in _STORED:
            self._set_bit(from_pos, direction)
        else:
            self._set_bit(to_pos, direction.reverse)
        return True

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
        # (row, col - 1) is the southwest neighbor of an even column, northwest of an odd one.
        direction = HexaDirection.NORTHWEST if pos.col % 2 == 1 else HexaDirection.SOUTHWEST
        return self.neighbor_pos(pos, direction)

    def append_neighbors_upper_layer(self, pos: Position, neighbors: List[Position]) -> None:
        neighbor = self.neighbor_pos(pos, HexaDirection.NORTH)
        if neighbor is not None:
            neighbors.append(neighbor)

    def append_neighbors_lower_layer(self, pos: Position, neighbors: List[Position]) -> None:
        neighbor = self.neighbor_pos(pos, HexaDirection.SOUTH)
        if neighbor is not None:
            neighbors.append(neighbor)

    # ---- Direction helpers ------------------------------------------------
    def neighbor_pos(self, pos: Position, direction: HexaDirection) -> Optional[Position]:
        if not self.is_cell(pos):
            return None
        neighbor = direction.step(pos)
        if neighbor is None or not self.is_cell(neighbor):
            return None
        return neighbor

    def direction_to(self, from_pos: Position, to_pos: Position) -> Optional[HexaDirection]:
        for direction in HEXA_DIRECTIONS:
            if self.neighbor_pos(from_pos, direction) == to_pos:
                return direction
        return None

    def is_connected_to(self, pos: Position, direction: HexaDirection) -> bool:
        neighbor = self.neighbor_pos(pos, direction)
        if neighbor is None:
            return False
        if direction in _STORED:
            return getattr(self._grid.cell(pos), direction.value)
        return getattr(self._grid.cell(neighbor), direction.reverse.value)

    def _set_bit(self, pos: Position, direction: HexaDirection) -> None:
        setattr(self._grid.cell(pos), direction.value, True)


def hexa_adjacency(pos: Position) -> Iterator[Position]:
    for direction in HEXA_DIRECTIONS:
        neighbor = direction.step(pos)
        if neighbor is not None:
            yield neighbor
