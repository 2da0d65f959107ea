"""Common type aliases.

``WallFn`` is the central extension point of the sensing layer: anything that
answers *"is there a wall at (x, y)?"* for every integer pair can drive a
:class:`maze_walker.walker.GridWalker`.
"""

from typing import Callable, NamedTuple

Coord = tuple[int, int]

# (x, y) -> True if the cell is a wall or lies outside the maze.
WallFn = Callable[[int, int], bool]

# Normalized (r, g, b) channel intensities in [0, 1].
RGB = tuple[float, float, float]


class Sight(NamedTuple):
    """Wall readings relative to the current heading (True = wall)."""

    left: bool
    front: bool
    right: bool
