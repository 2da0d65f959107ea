"""Exception hierarchy.

Sensing outside the maze is never an error (it reads as a wall), so the only
failures the core reports are bad configuration and a traversal that runs out
of its iteration budget.
"""

from maze_walker.geometry import Direction, Position


class MazeWalkerError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(MazeWalkerError, ValueError):
    """Malformed or out-of-range option value."""


class StuckError(MazeWalkerError, RuntimeError):
    """The step-decision loop exceeded its iteration bound.

    Attributes:
        iterations: Number of loop iterations performed.
        position: Walker position when the bound was hit.
        direction: Walker heading when the bound was hit.
    """

    def __init__(self, iterations: int, position: Position, direction: Direction):
        super().__init__(
            f"No path found after {iterations} iterations "
            f"(stopped at ({position.x}, {position.y}))"
        )
        self.iterations = iterations
        self.position = position
        self.direction = direction
