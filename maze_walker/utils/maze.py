"""In-memory maze grids.

A :data:`MazeGrid` maps every in-bounds cell to ``True`` (open floor) or
``False`` (wall). Cells absent from the mapping are outside the maze. These
grids feed :class:`maze_walker.walls.MazeGridWallDetector` directly, or can be
rendered to an image with :func:`maze_to_image` to exercise the image path.
"""

import random
from typing import Iterable

from PIL import Image

# Type aliases for clarity
Coord = tuple[int, int]
MazeGrid = dict[Coord, bool]  # True = open/floor; False = wall

DIRECTIONS: list[tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]

WALL_CHAR = "#"

WALL_RGB = (255, 255, 255)
FLOOR_RGB = (0, 0, 0)


def generate_perfect_maze(width: int, height: int, rng: random.Random) -> MazeGrid:
    """Generates a perfect maze using recursive backtracking.

    Passages are carved between even coordinates, so odd ``width`` and
    ``height`` give a maze whose outermost ring of cells is reachable. The
    open cells form a tree (no loops), which is exactly the kind of maze a
    wall follower is guaranteed to fully traverse.
    """
    maze: MazeGrid = {(x, y): False for x in range(width) for y in range(height)}

    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < width and 0 <= y < height

    # Explicit stack: recursion depth would grow with maze area.
    maze[(0, 0)] = True
    stack: list[Coord] = [(0, 0)]
    while stack:
        x, y = stack[-1]
        candidates = [
            (dx, dy)
            for dx, dy in DIRECTIONS
            if in_bounds(x + dx * 2, y + dy * 2) and not maze[(x + dx * 2, y + dy * 2)]
        ]
        if not candidates:
            stack.pop()
            continue
        dx, dy = rng.choice(candidates)
        maze[(x + dx, y + dy)] = True
        maze[(x + dx * 2, y + dy * 2)] = True
        stack.append((x + dx * 2, y + dy * 2))

    return maze


def parse_ascii_maze(rows: Iterable[str]) -> MazeGrid:
    """Build a grid from text rows; ``#`` is a wall, anything else is floor.

    Rows shorter than the longest row are padded with walls.
    """
    lines = list(rows)
    width = max((len(line) for line in lines), default=0)
    maze: MazeGrid = {}
    for y, line in enumerate(lines):
        for x in range(width):
            maze[(x, y)] = x < len(line) and line[x] != WALL_CHAR
    return maze


def grid_size(maze: MazeGrid) -> tuple[int, int]:
    """Return ``(width, height)`` of the bounding rectangle of ``maze``."""
    if not maze:
        return 0, 0
    return (
        max(x for x, _ in maze) + 1,
        max(y for _, y in maze) + 1,
    )


def maze_to_image(
    maze: MazeGrid,
    wall_rgb: tuple[int, int, int] = WALL_RGB,
    floor_rgb: tuple[int, int, int] = FLOOR_RGB,
) -> Image.Image:
    """Render one pixel per cell (bright walls on a dark floor by default)."""
    width, height = grid_size(maze)
    image = Image.new("RGB", (width, height), wall_rgb)
    for (x, y), is_open in maze.items():
        if is_open:
            image.putpixel((x, y), floor_rgb)
    return image
