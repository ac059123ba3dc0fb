from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .config import GenerationSettings
from .exceptions import ConfigurationError
from .generators import (
    AldousBroderGenerator,
    BinaryTreeGenerator,
    EllerGenerator,
    GrowingTreeGenerator,
    HuntAndKillGenerator,
    KruskalGenerator,
    MazeGenerator,
    PrimGenerator,
    RecursiveBacktrackerGenerator,
    RecursiveDivisionGenerator,
    SidewinderGenerator,
    WilsonGenerator,
)
from .grid import Grid, HexaGrid, Mask, RectGrid, RingGrid, TriGrid
from .maze import Maze
from .rng import RNGManager

logger = logging.getLogger(__name__)

ALGORITHM_ALIASES: Dict[str, str] = {
    "aldous_broder": "aldous_broder",
    "aldousbroder": "aldous_broder",
    "wilson": "wilson",
    "hunt_and_kill": "hunt_and_kill",
    "hunt_kill": "hunt_and_kill",
    "huntandkill": "hunt_and_kill",
    "recursive_backtracker": "recursive_backtracker",
    "backtracker": "recursive_backtracker",
    "dfs": "recursive_backtracker",
    "kruskal": "kruskal",
    "prim": "prim",
    "growing_tree": "growing_tree",
    "eller": "eller",
    "binary_tree": "binary_tree",
    "binary": "binary_tree",
    "sidewinder": "sidewinder",
    "recursive_division": "recursive_division",
    "division": "recursive_division",
}

TOPOLOGY_ALIASES: Dict[str, str] = {
    "rect": "rect",
    "square": "rect",
    "hexa": "hexa",
    "hex": "hexa",
    "tri": "tri",
    "triangle": "tri",
    "ring": "ring",
    "circle": "ring",
    "polar": "ring",
}

_BUILDERS: Dict[str, Callable[[GenerationSettings], MazeGenerator]] = {
    "aldous_broder": lambda s: AldousBroderGenerator(),
    "wilson": lambda s: WilsonGenerator(),
    "hunt_and_kill": lambda s: HuntAndKillGenerator(),
    "recursive_backtracker": lambda s: RecursiveBacktrackerGenerator(),
    "kruskal": lambda s: KruskalGenerator(),
    "prim": lambda s: PrimGenerator(),
    "growing_tree": lambda s: GrowingTreeGenerator(strategy=s.growing_strategy),
    "eller": lambda s: EllerGenerator(
        join_probability=s.join_probability,
        carry_probability=s.carry_probability,
    ),
    "binary_tree": lambda s: BinaryTreeGenerator(bias=s.bias),
    "sidewinder": lambda s: SidewinderGenerator(bias=s.bias),
    "recursive_division": lambda s: RecursiveDivisionGenerator(
        room_max_rows=s.room_max_rows,
        room_max_cols=s.room_max_cols,
    ),
}


def _normalize(name: Optional[str]) -> str:
    return (name or "").strip().lower().replace("-", "_").replace(" ", "_")


def resolve_algorithm(name: Optional[str]) -> str:
    algo = _normalize(name) or "recursive_backtracker"
    if algo not in ALGORITHM_ALIASES:
        logger.warning("Unknown maze algorithm '%s'", name)
        raise ConfigurationError(f"Unknown maze algorithm: {name!r}")
    return ALGORITHM_ALIASES[algo]


def resolve_topology(name: Optional[str]) -> str:
    topology = _normalize(name) or "rect"
    if topology not in TOPOLOGY_ALIASES:
        logger.warning("Unknown grid topology '%s'", name)
        raise ConfigurationError(f"Unknown grid topology: {name!r}")
    return TOPOLOGY_ALIASES[topology]


class MazeFactory:
    """Builds grids and generators from settings and runs the generation.

    Usage:
      settings = GenerationSettings.from_env()
      maze = MazeFactory.generate(settings)
    """

    @staticmethod
    def build_generator(settings: GenerationSettings) -> MazeGenerator:
        algo = resolve_algorithm(settings.algorithm)
        try:
            gen = _BUILDERS[algo](settings)
        except ValueError as e:
            raise ConfigurationError(f"Invalid parameters for {algo}: {e}") from e
        logger.info("MazeFactory: using %s (algorithm=%s)", type(gen).__name__, settings.algorithm)
        return gen

    @staticmethod
    def build_grid(settings: GenerationSettings, mask: Optional[Mask] = None) -> Grid:
        """Fresh, fully disconnected grid. A mask overrides ``width``/``height``."""
        topology = resolve_topology(settings.topology)
        if topology == "ring":
            if mask is not None:
                logger.warning("MazeFactory: ring grids do not accept a mask")
                raise ConfigurationError("The ring topology does not support masks")
            if settings.rings < 0:
                raise ConfigurationError("Ring count must be >= 0")
            grid: Grid = RingGrid(settings.rings)
        else:
            grid_cls = {"rect": RectGrid, "hexa": HexaGrid, "tri": TriGrid}[topology]
            if mask is not None:
                grid = grid_cls.from_mask(mask)
            else:
                if settings.width < 0 or settings.height < 0:
                    raise ConfigurationError("Grid dimensions must be >= 0")
                grid = grid_cls(settings.width, settings.height)
        logger.info("MazeFactory: built %s grid %s with %d cells", topology, grid.size(), grid.cells_n())
        return grid

    @staticmethod
    def generate(
        settings: GenerationSettings,
        mask: Optional[Mask] = None,
        seed: Optional[int] = None,
    ) -> Maze:
        master_seed = seed if seed is not None else settings.seed
        if master_seed is not None and master_seed < 0:
            raise ConfigurationError(f"Seed must be non-negative, got {master_seed}")
        gen = MazeFactory.build_generator(settings)
        grid = MazeFactory.build_grid(settings, mask)
        rng = RNGManager(master_seed).context_rng("maze", grid.name, gen.name)
        return gen.generate(grid, rng=rng)
