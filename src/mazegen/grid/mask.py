from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from ..exceptions import InconsistentMaskRowError, MaskIsolationError
from .base import Position

logger = logging.getLogger(__name__)

# Returns the adjacent positions of a position, ignoring activity.
Adjacency = Callable[[Position], Iterable[Position]]

NOT_CELL_CHARS = ("x", "X")


def rect_adjacency(pos: Position) -> Iterator[Position]:
    """4-neighbor adjacency; out-of-range results are filtered by the caller."""
    row, col = pos
    if row > 0:
        yield Position(row - 1, col)
    yield Position(row, col + 1)
    if col > 0:
        yield Position(row, col - 1)
    yield Position(row + 1, col)


def flood_fill(start: Position, is_cell: Callable[[Position], bool], adjacency: Adjacency) -> Set[Position]:
    """Positions reachable from ``start`` through active cells."""
    visited = {start}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nxt in adjacency(cur):
            if nxt not in visited and is_cell(nxt):
                visited.add(nxt)
                queue.append(nxt)
    return visited


class Mask:
    """Boolean activity grid marking which positions belong to the maze.

    The active cells must form a single connected region; this is checked
    with a flood fill at construction time because a disconnected region can
    never be turned into a single spanning tree.
    """

    def __init__(self, width: int, height: int, flags: Sequence[bool]) -> None:
        if width < 0 or height < 0:
            raise ValueError("Mask width/height must be >= 0")
        if len(flags) != width * height:
            raise ValueError(f"Mask expects {width * height} flags, got {len(flags)}")
        self._width = width
        self._height = height
        self._flags: Tuple[bool, ...] = tuple(bool(f) for f in flags)
        self.check_isolation()
        logger.debug("Mask created: %dx%d with %d cells", width, height, self.cells_n())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Mask":
        """Build a mask from row-major rows, which must all share one width."""
        width: Optional[int] = None
        flags: List[bool] = []
        for row_ind, row in enumerate(rows):
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise InconsistentMaskRowError(row_ind, len(row), width)
            flags.extend(bool(f) for f in row)
        return cls(width or 0, len(rows), flags)

    @classmethod
    def from_text(cls, text: str) -> "Mask":
        """Decode the text convention: ``x``/``X`` is not a cell, anything else is."""
        lines = text.splitlines()
        return cls.from_rows([[ch not in NOT_CELL_CHARS for ch in line] for line in lines])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self._height and 0 <= pos.col < self._width

    def is_cell(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self._flags[pos.row * self._width + pos.col]

    def cells_n(self) -> int:
        return sum(1 for f in self._flags if f)

    def cell_positions(self) -> Iterator[Position]:
        """Active positions in row-major order."""
        for ind, flag in enumerate(self._flags):
            if flag:
                yield Position(ind // self._width, ind % self._width)

    def check_isolation(self, adjacency: Adjacency = rect_adjacency) -> None:
        """Flood fill from the first active cell; every active cell must be reached."""
        start = next(self.cell_positions(), None)
        if start is None:
            return
        visited = flood_fill(start, self.is_cell, adjacency)
        total = self.cells_n()
        if len(visited) != total:
            logger.error("Mask isolation check failed: reached %d of %d cells", len(visited), total)
            raise MaskIsolationError(len(visited), total)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mask):
            return NotImplemented
        return self.size() == other.size() and self._flags == other._flags

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._flags))

    def __repr__(self) -> str:
        return f"Mask(width={self._width}, height={self._height}, cells={self.cells_n()})"
