from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Set, Tuple, Union

from ..exceptions import DisconnectedGridError
from .base import Grid, Position
from .general import GeneralRectGrid
from .mask import Mask, flood_fill

logger = logging.getLogger(__name__)


class TriDirection(Enum):
    NORTHWEST = "northwest"
    NORTHEAST = "northeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    NORTH = "north"
    SOUTHEAST = "southeast"

    @property
    def reverse(self) -> "TriDirection":
        return _TRI_REVERSE[self]

    def step(self, pos: Position) -> Optional[Position]:
        row, col = pos
        if self in (TriDirection.NORTHWEST, TriDirection.SOUTHWEST):
            return Position(row, col - 1) if col > 0 else None
        if self in (TriDirection.NORTHEAST, TriDirection.SOUTHEAST):
            return Position(row, col + 1)
        if self is TriDirection.SOUTH:
            return Position(row + 1, col)
        return Position(row - 1, col) if row > 0 else None


_TRI_REVERSE = {
    TriDirection.NORTHWEST: TriDirection.SOUTHEAST,
    TriDirection.SOUTHEAST: TriDirection.NORTHWEST,
    TriDirection.NORTHEAST: TriDirection.SOUTHWEST,
    TriDirection.SOUTHWEST: TriDirection.NORTHEAST,
    TriDirection.SOUTH: TriDirection.NORTH,
    TriDirection.NORTH: TriDirection.SOUTH,
}

ANGLE_UP_DIRECTIONS: Tuple[TriDirection, ...] = (
    TriDirection.NORTHWEST,
    TriDirection.NORTHEAST,
    TriDirection.SOUTH,
)
ANGLE_DOWN_DIRECTIONS: Tuple[TriDirection, ...] = (
    TriDirection.SOUTHWEST,
    TriDirection.NORTH,
    TriDirection.SOUTHEAST,
)


def is_angle_up(pos: Position) -> bool:
    return (pos.row + pos.col) % 2 == 0


def tri_directions(pos: Position) -> Tuple[TriDirection, ...]:
    return ANGLE_UP_DIRECTIONS if is_angle_up(pos) else ANGLE_DOWN_DIRECTIONS


@dataclass
class AngleUpCell:
    northwest: bool = False
    south: bool = False


@dataclass
class AngleDownCell:
    southwest: bool = False


TriCell = Union[AngleUpCell, AngleDownCell]

# Bits kept by the cell itself; every other direction is stored by the neighbor.
_STORED = (TriDirection.NORTHWEST, TriDirection.SOUTH, TriDirection.SOUTHWEST)


def _make_cell(pos: Position) -> TriCell:
    return AngleUpCell() if is_angle_up(pos) else AngleDownCell()


class TriGrid(Grid):
    """Grid of alternating up/down triangles; ``(row + col)`` even points up."""

    name = "tri"

    def __init__(self, width: int, height: int, mask: Optional[Mask] = None) -> None:
        if mask is not None:
            # Vertical adjacency is sparser than the 4-neighbor rule the mask was checked with.
            mask.check_isolation(tri_adjacency)
        self._grid: GeneralRectGrid[TriCell] = GeneralRectGrid(width, height, _make_cell, mask)
        if mask is None:
            self._check_connected()
        logger.debug("TriGrid created: %dx%d (mask=%s)", width, height, mask is not None)

    @classmethod
    def from_mask(cls, mask: Mask) -> "TriGrid":
        return cls(mask.width, mask.height, mask)

    def _check_connected(self) -> None:
        # A single column of triangles breaks apart below its second row.
        if not self.cells_n():
            return
        reached = len(flood_fill(Position(0, 0), self.is_cell, tri_adjacency))
        if reached != self.cells_n():
            logger.error("TriGrid %s is disconnected: reached %d of %d cells", self.size(), reached, self.cells_n())
            raise DisconnectedGridError(self.name, reached, self.cells_n())

    def size(self) -> Tuple[int, int]:
        return self._grid.size()

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
        for direction in tri_directions(pos):
            neighbor = self.neighbor_pos(pos, direction)
            if neighbor is not None:
                neighbors.append(neighbor)

    def connect_to(self, from_pos: Position, to_pos: Position) -> bool:
        direction = self.direction_to(from_pos, to_pos)
        if direction is None:
            return False
        if direction in _STORED:
            setattr(self._grid.cell(from_pos), direction.value, True)
        else:
            setattr(self._grid.cell(to_pos), direction.reverse.value, True)
        return True

    def is_connected(self, a: Position, b: Position) -> bool:
        direction = self.direction_to(a, b)
        return direction is not None and self.is_connected_to(a, direction)

    def neighbor_pos(self, pos: Position, direction: TriDirection) -> Optional[Position]:
        """Neighbor along ``direction``; None when the triangle has no such side."""
        if not self.is_cell(pos) or direction not in tri_directions(pos):
            return None
        neighbor = direction.step(pos)
        if neighbor is None or not self.is_cell(neighbor):
            return None
        return neighbor

    def direction_to(self, from_pos: Position, to_pos: Position) -> Optional[TriDirection]:
        for direction in tri_directions(from_pos):
            if self.neighbor_pos(from_pos, direction) == to_pos:
                return direction
        return None

    def is_connected_to(self, pos: Position, direction: TriDirection) -> bool:
        neighbor = self.neighbor_pos(pos, direction)
        if neighbor is None:
            return False
        if direction in _STORED:
            return getattr(self._grid.cell(pos), direction.value)
        return getattr(self._grid.cell(neighbor), direction.reverse.value)


def tri_adjacency(pos: Position) -> Iterator[Position]:
    for direction in tri_directions(pos):
        neighbor = direction.step(pos)
        if neighbor is not None:
            yield neighbor
