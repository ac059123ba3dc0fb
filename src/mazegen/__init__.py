from importlib.metadata import version, PackageNotFoundError

from .config import GenerationSettings
from .disjoint_set import DisjointSet
from .exceptions import (
    ConfigurationError,
    DisconnectedGridError,
    GridContractError,
    InconsistentMaskRowError,
    MaskError,
    MaskIsolationError,
    MaskNotSupportedError,
    MazeError,
    TopologyNotSupportedError,
)
from .factory import MazeFactory
from .grid import HexaGrid, Mask, Position, RectGrid, RingGrid, TriGrid
from .maze import Maze, RingMaze, TriMaze

__all__ = [
    "__version__",
    "GenerationSettings",
    "MazeFactory",
    "DisjointSet",
    "Position",
    "Mask",
    "RectGrid",
    "HexaGrid",
    "TriGrid",
    "RingGrid",
    "Maze",
    "TriMaze",
    "RingMaze",
    "MazeError",
    "MaskError",
    "InconsistentMaskRowError",
    "MaskIsolationError",
    "ConfigurationError",
    "DisconnectedGridError",
    "MaskNotSupportedError",
    "TopologyNotSupportedError",
    "GridContractError",
]

try:
    __version__ = version("mazegen")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
