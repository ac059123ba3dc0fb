from __future__ import annotations

import bisect
import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple

from .base import LayerGrid, Position

logger = logging.getLogger(__name__)


class RingDirection(Enum):
    INWARD = "inward"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
    OUTWARD = "outward"


RING_DIRECTIONS: Tuple[RingDirection, ...] = (
    RingDirection.INWARD,
    RingDirection.CLOCKWISE,
    RingDirection.COUNTERCLOCKWISE,
    RingDirection.OUTWARD,
)


@dataclass
class RingCell:
    inward: bool = False
    clockwise: bool = False


def make_ring_ends(rings_n: int) -> List[int]:
    """Cumulative cell counts: ``ends[i]`` is the number of cells in rings ``0..i``.

    Ring 0 is the single center cell. Each further ring holds an integer
    multiple of the previous ring's cells, chosen so that a cell's arc length
    stays close to the ring spacing.
    """
    counts = [1] * rings_n
    for ring in range(1, rings_n):
        prev = counts[ring - 1]
        ratio = math.floor(2 * math.pi * ring / prev + 0.5)
        counts[ring] = prev * max(1, ratio)
    ends: List[int] = []
    total = 0
    for count in counts:
        total += count
        ends.append(total)
    return ends


class RingGrid(LayerGrid):
    """Concentric-ring (circular) grid; every ring is a layer.

    Positions are ``(ring, cell)``. Clockwise/counterclockwise neighbors wrap
    around the ring, but the layer order used by Eller's algorithm does not.
    """

    name = "ring"

    def __init__(self, rings_n: int) -> None:
        if rings_n < 0:
            raise ValueError("Ring count must be >= 0")
        self._rings_n = rings_n
        self._ring_ends = make_ring_ends(rings_n)
        self._cells: List[RingCell] = [RingCell() for _ in range(self.cells_n())]
        logger.debug("RingGrid created: %d rings, %d cells", rings_n, self.cells_n())

    # ---- Geometry ----------------------------------------------------------
    def rings_n(self) -> int:
        return self._rings_n

    def ring_ends(self) -> List[int]:
        return list(self._ring_ends)

    def ring_cells_n(self, ring: int) -> Optional[int]:
        if not 0 <= ring < self._rings_n:
            return None
        start = self._ring_ends[ring - 1] if ring > 0 else 0
        return self._ring_ends[ring] - start

    def pos_to_ind(self, pos: Position) -> Optional[int]:
        if not 0 <= pos.row < self._rings_n or pos.col < 0:
            return None
        start = self._ring_ends[pos.row - 1] if pos.row > 0 else 0
        ind = start + pos.col
        return ind if ind < self._ring_ends[pos.row] else None

    def ind_to_pos(self, ind: int) -> Optional[Position]:
        if not 0 <= ind < self.cells_n():
            return None
        ring = bisect.bisect_right(self._ring_ends, ind)
        start = self._ring_ends[ring - 1] if ring > 0 else 0
        return Position(ring, ind - start)

    def neighbors_along(self, pos: Position, direction: RingDirection) -> List[Position]:
        """Neighbors in one direction: at most one, except outward which yields a range."""
        if self.pos_to_ind(pos) is None:
            return []
        ring, cell = pos
        ring_n = self.ring_cells_n(ring)
        if direction is RingDirection.OUTWARD:
            outer_n = self.ring_cells_n(ring + 1)
            if outer_n is None:
                return []
            ratio = outer_n // ring_n
            return [Position(ring + 1, c) for c in range(cell * ratio, (cell + 1) * ratio)]
        if ring == 0:
            return []
        if direction is RingDirection.INWARD:
            inner_n = self.ring_cells_n(ring - 1)
            return [Position(ring - 1, cell // (ring_n // inner_n))]
        if direction is RingDirection.CLOCKWISE:
            return [Position(ring, (cell + 1) % ring_n)]
        return [Position(ring, (cell + ring_n - 1) % ring_n)]

    def direction_to(self, from_pos: Position, to_pos: Position) -> Optional[RingDirection]:
        for direction in RING_DIRECTIONS:
            if to_pos in self.neighbors_along(from_pos, direction):
                return direction
        return None

    def is_connected_to(self, pos: Position, direction: RingDirection) -> bool:
        """For OUTWARD, True when any of the outer neighbors is connected."""
        ind = self.pos_to_ind(pos)
        if ind is None:
            return False
        if direction is RingDirection.INWARD:
            return pos.row > 0 and self._cells[ind].inward
        if direction is RingDirection.CLOCKWISE:
            return pos.row > 0 and self._cells[ind].clockwise
        neighbors = self.neighbors_along(pos, direction)
        if direction is RingDirection.COUNTERCLOCKWISE:
            return any(self._cell(n).clockwise for n in neighbors)
        return any(self._cell(n).inward for n in neighbors)

    def _cell(self, pos: Position) -> RingCell:
        return self._cells[self.pos_to_ind(pos)]

    # ---- Grid contract ---------------------------------------------------
    def size(self) -> Tuple[int, int]:
        widest = self.ring_cells_n(self._rings_n - 1) if self._rings_n else 0
        return widest, self._rings_n

    def cells_n(self) -> int:
        return self._ring_ends[-1] if self._ring_ends else 0

    def is_cell(self, pos: Position) -> bool:
        return self.pos_to_ind(pos) is not None

    def random_cell_pos(self, rng: random.Random) -> Optional[Position]:
        if not self.cells_n():
            return None
        return self.ind_to_pos(rng.randrange(self.cells_n()))

    def all_cells_pos_set(self) -> Set[Position]:
        return {self.ind_to_pos(ind) for ind in range(self.cells_n())}

    def append_neighbors(self, pos: Position, neighbors: List[Position]) -> None:
        for direction in RING_DIRECTIONS:
            neighbors.extend(self.neighbors_along(pos, direction))

    def connect_to(self, from_pos: Position, to_pos: Position) -> bool:
        direction = self.direction_to(from_pos, to_pos)
        if direction is None:
            return False
        if direction is RingDirection.INWARD:
            self._cell(from_pos).inward = True
        elif direction is RingDirection.CLOCKWISE:
            self._cell(from_pos).clockwise = True
        elif direction is RingDirection.COUNTERCLOCKWISE:
            self._cell(to_pos).clockwise = True
        else:
            self._cell(to_pos).inward = True
        return True

    def is_connected(self, a: Position, b: Position) -> bool:
        direction = self.direction_to(a, b)
        if direction is None:
            return False
        if direction is RingDirection.OUTWARD:
            return self._cell(b).inward
        return self.is_connected_to(a, direction)

    # ---- Layer contract --------------------------------------------------
    def layers_n(self) -> int:
        return self._rings_n

    def cells_n_at(self, layer: int) -> int:
        return self.ring_cells_n(layer) or 0

    def layer_cell_pos(self, layer: int, index: int) -> Position:
        return Position(layer, index)

    def prev_in_layer(self, pos: Position) -> Optional[Position]:
        if not self.is_cell(pos) or pos.col == 0:
            return None
        return Position(pos.row, pos.col - 1)

    def append_neighbors_upper_layer(self, pos: Position, neighbors: List[Position]) -> None:
        neighbors.extend(self.neighbors_along(pos, RingDirection.INWARD))

    def append_neighbors_lower_layer(self, pos: Position, neighbors: List[Position]) -> None:
        neighbors.extend(self.neighbors_along(pos, RingDirection.OUTWARD))
