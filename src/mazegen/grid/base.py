from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple


@dataclass(frozen=True, order=True)
class Position:
    """A cell position.

    ``row``/``col`` for rectangular, hexagonal and triangular grids; ring index
    and cell index within the ring for the ring grid.
    """

    row: int
    col: int

    def __iter__(self):
        yield self.row
        yield self.col


class Grid(ABC):
    """Topology-agnostic view used by every generation algorithm.

    Generators only rely on these operations, never on a concrete topology.
    """

    name: str = "abstract"

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        raise NotImplementedError

    @abstractmethod
    def cells_n(self) -> int:
        """Number of active cells."""
        raise NotImplementedError

    @abstractmethod
    def is_cell(self, pos: Position) -> bool:
        raise NotImplementedError

    @abstractmethod
    def random_cell_pos(self, rng: random.Random) -> Optional[Position]:
        """Uniformly pick an active cell; None only when the grid is empty."""
        raise NotImplementedError

    @abstractmethod
    def all_cells_pos_set(self) -> Set[Position]:
        raise NotImplementedError

    @abstractmethod
    def append_neighbors(self, pos: Position, neighbors: List[Position]) -> None:
        """Append every active topology neighbor of ``pos`` to ``neighbors``."""
        raise NotImplementedError

    @abstractmethod
    def connect_to(self, from_pos: Position, to_pos: Position) -> bool:
        """Record a passage between two adjacent active cells.

        Returns False, with no effect, when the positions are not active
        neighbors. Connecting an already connected pair returns True again and
        leaves the single stored bit as is.
        """
        raise NotImplementedError

    @abstractmethod
    def is_connected(self, a: Position, b: Position) -> bool:
        raise NotImplementedError

    @property
    def has_mask(self) -> bool:
        return False

    def neighbors(self, pos: Position) -> List[Position]:
        out: List[Position] = []
        self.append_neighbors(pos, out)
        return out


class LayerGrid(Grid):
    """A grid that can be walked one linear layer (row or ring) at a time."""

    @abstractmethod
    def layers_n(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def cells_n_at(self, layer: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def layer_cell_pos(self, layer: int, index: int) -> Position:
        raise NotImplementedError

    @abstractmethod
    def prev_in_layer(self, pos: Position) -> Optional[Position]:
        """The cell before ``pos`` in its layer; layers do not wrap around."""
        raise NotImplementedError

    @abstractmethod
    def append_neighbors_upper_layer(self, pos: Position, neighbors: List[Position]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_neighbors_lower_layer(self, pos: Position, neighbors: List[Position]) -> None:
        raise NotImplementedError

    def has_full_layers(self) -> bool:
        """False when a mask leaves holes in the layers."""
        return not self.has_mask
