class MazeError(Exception):
    """Base exception for the mazegen project."""


class MaskError(MazeError):
    """Raised when a cell mask cannot be used to build a grid."""


class InconsistentMaskRowError(MaskError):
    """Raised when the rows of a mask definition differ in width."""

    def __init__(self, row: int, width: int, expected_width: int) -> None:
        super().__init__(
            f"Inconsistent row width in mask at row {row}: expected {expected_width} columns, got {width}"
        )
        self.row = row
        self.width = width
        self.expected_width = expected_width


class MaskIsolationError(MaskError):
    """Raised when the active cells of a mask do not form a single connected region."""

    def __init__(self, reached: int, total: int) -> None:
        super().__init__(
            f"Found isolated area in mask: only {reached} of {total} cells are reachable"
        )
        self.reached = reached
        self.total = total


class DisconnectedGridError(MazeError):
    """Raised when a grid shape leaves some cells unreachable from the others."""

    def __init__(self, grid_name: str, reached: int, total: int) -> None:
        super().__init__(f"{grid_name} grid is not connected: only {reached} of {total} cells are reachable")
        self.grid_name = grid_name
        self.reached = reached
        self.total = total


class ConfigurationError(MazeError):
    """Raised for invalid generation settings (unknown names, bad values, bad files)."""


class MaskNotSupportedError(ConfigurationError):
    """Raised when an algorithm that needs complete rows is given a masked grid."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"{algorithm} does not support masked grids")
        self.algorithm = algorithm


class TopologyNotSupportedError(ConfigurationError):
    """Raised when an algorithm is given a grid lacking a capability it relies on."""

    def __init__(self, algorithm: str, grid_name: str) -> None:
        super().__init__(f"{algorithm} cannot run on a {grid_name} grid")
        self.algorithm = algorithm
        self.grid_name = grid_name


class GridContractError(MazeError):
    """Raised when a grid breaks an invariant a generator relies on (programmer error)."""
