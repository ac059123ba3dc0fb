from .aldous_broder import AldousBroderGenerator
from .backtracker import RecursiveBacktrackerGenerator
from .base import LayerMazeGenerator, MazeGenerator, RectMazeGenerator
from .binary_tree import BinaryTreeGenerator, DiagonalDirection
from .eller import EllerGenerator
from .growing_tree import GrowingTreeGenerator, SelectionStrategy
from .hunt_and_kill import HuntAndKillGenerator
from .kruskal import KruskalGenerator
from .prim import PrimGenerator
from .recursive_division import RecursiveDivisionGenerator
from .sidewinder import SidewinderGenerator
from .wilson import WilsonGenerator

__all__ = [
    "MazeGenerator",
    "LayerMazeGenerator",
    "RectMazeGenerator",
    "AldousBroderGenerator",
    "WilsonGenerator",
    "HuntAndKillGenerator",
    "RecursiveBacktrackerGenerator",
    "KruskalGenerator",
    "PrimGenerator",
    "GrowingTreeGenerator",
    "SelectionStrategy",
    "EllerGenerator",
    "BinaryTreeGenerator",
    "SidewinderGenerator",
    "DiagonalDirection",
    "RecursiveDivisionGenerator",
]
