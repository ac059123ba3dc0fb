from .base import Grid, LayerGrid, Position
from .hexa import HexaDirection, HexaGrid
from .mask import Mask
from .rect import RectDirection, RectGrid
from .ring import RingDirection, RingGrid
from .tri import TriDirection, TriGrid

__all__ = [
    "Grid",
    "LayerGrid",
    "Position",
    "Mask",
    "RectGrid",
    "RectDirection",
    "HexaGrid",
    "HexaDirection",
    "TriGrid",
    "TriDirection",
    "RingGrid",
    "RingDirection",
]
