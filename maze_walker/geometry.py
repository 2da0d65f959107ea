"""Grid geometry: positions and cardinal headings.

The frame follows raster convention: ``+x`` points right and ``+y`` points
*down*. Every :class:`Direction` in use is one of the four cardinal unit
vectors and :meth:`Direction.rotate_left` is closed over that set, so four
rotations always return the original heading.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Direction:
    """Unit heading.

    Attributes:
        dx: Column delta (1 is rightward).
        dy: Row delta (1 is downward).
    """

    dx: int
    dy: int

    def rotate_left(self) -> "Direction":
        """Rotate 90 degrees counter-clockwise as seen on screen.

        The usual rotation ``[[0, -1], [1, 0]]`` is conjugated by the y-flip
        ``diag(1, -1)`` because rows grow downward, which collapses to a swap
        and a negation.
        """
        return Direction(self.dy, -self.dx)


RIGHT = Direction(1, 0)
UP = Direction(0, -1)
LEFT = Direction(-1, 0)
DOWN = Direction(0, 1)

# Counter-clockwise order starting at the initial heading.
CARDINALS: tuple[Direction, ...] = (RIGHT, UP, LEFT, DOWN)


@dataclass(frozen=True)
class Position:
    """Grid (pixel) coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Return the neighbouring cell one step along ``direction``."""
        return Position(self.x + direction.dx, self.y + direction.dy)


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


@dataclass(frozen=True)
class Box:
    """Half-open pixel rectangle ``[left, right) x [top, bottom)``."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return max(0, self.right - self.left)

    @property
    def height(self) -> int:
        return max(0, self.bottom - self.top)

    def contains(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies inside the rectangle."""
        return self.left <= x < self.right and self.top <= y < self.bottom
