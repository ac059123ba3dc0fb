from __future__ import annotations

import random
from typing import Callable, Generic, List, Optional, Set, Tuple, TypeVar

from .base import Position
from .mask import Mask

C = TypeVar("C")


class GeneralRectGrid(Generic[C]):
    """Row-major cell storage shared by the rectangular, hexagonal and triangular grids.

    Inactive (masked out) positions hold ``None``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        make_cell: Callable[[Position], C],
        mask: Optional[Mask] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("Grid width/height must be >= 0")
        if mask is not None and mask.size() != (width, height):
            raise ValueError(f"Mask size {mask.size()} does not match grid size {(width, height)}")
        self.width = width
        self.height = height
        self.mask = mask
        self._cells: List[Optional[C]] = []
        self._cell_positions: List[Position] = []
        for row in range(height):
            for col in range(width):
                pos = Position(row, col)
                if mask is None or mask.is_cell(pos):
                    self._cells.append(make_cell(pos))
                    self._cell_positions.append(pos)
                else:
                    self._cells.append(None)

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def cell(self, pos: Position) -> Optional[C]:
        if not self.in_bounds(pos):
            return None
        return self._cells[pos.row * self.width + pos.col]

    def is_cell(self, pos: Position) -> bool:
        return self.cell(pos) is not None

    def cells_n(self) -> int:
        return len(self._cell_positions)

    def cell_positions(self) -> List[Position]:
        return list(self._cell_positions)

    def random_cell_pos(self, rng: random.Random) -> Optional[Position]:
        if not self._cell_positions:
            return None
        return rng.choice(self._cell_positions)

    def all_cells_pos_set(self) -> Set[Position]:
        return set(self._cell_positions)
