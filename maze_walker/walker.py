"""Walker capability interface and the grid-backed walker.

A walker couples a mutable ``(position, direction)`` pair to a wall predicate.
The traversal engine only ever talks to the :class:`Walker` protocol, so any
object implementing it (including the instrumentation proxies in
:mod:`maze_walker.instrumentation`) can be solved.

Contract:

* ``look()`` and ``wall_ahead()`` never mutate state.
* ``turn_left()`` always succeeds and never moves.
* ``step()`` re-senses the current heading and moves one cell only if it is
  open; bumping into a wall is a silent no-op, not an error.
* ``done()`` is exact position equality with the goal.
"""

from typing import Protocol

from maze_walker.geometry import RIGHT, Direction, Position
from maze_walker.types import Sight, WallFn


class Walker(Protocol):
    @property
    def position(self) -> Position: ...

    @property
    def direction(self) -> Direction: ...

    def step(self) -> None: ...

    def turn_left(self) -> None: ...

    def wall_ahead(self) -> bool: ...

    def look(self) -> Sight: ...

    def done(self) -> bool: ...


class GridWalker:
    """Walker over a rectangular grid described by a wall predicate.

    The walker does no bounds checking of its own; the predicate reports
    out-of-range cells as walls, so the walker can never leave the domain.

    Args:
        is_wall (WallFn): Total ``(x, y) -> bool`` predicate.
        start (Position): Initial cell.
        goal (Position): Target cell.
        direction (Direction): Initial heading, facing right by default.
    """

    def __init__(
        self,
        is_wall: WallFn,
        start: Position,
        goal: Position,
        direction: Direction = RIGHT,
    ) -> None:
        self._is_wall = is_wall
        self._position = start
        self._direction = direction
        self._goal = goal

    @property
    def position(self) -> Position:
        return self._position

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def goal(self) -> Position:
        return self._goal

    def _wall_at(self, pos: Position) -> bool:
        return self._is_wall(pos.x, pos.y)

    def wall_ahead(self) -> bool:
        return self._wall_at(self._position.moved(self._direction))

    def look(self) -> Sight:
        """Sense left, ahead and right of the current heading."""
        left = self._direction.rotate_left()
        right = left.rotate_left().rotate_left()
        return Sight(
            left=self._wall_at(self._position.moved(left)),
            front=self.wall_ahead(),
            right=self._wall_at(self._position.moved(right)),
        )

    def turn_left(self) -> None:
        self._direction = self._direction.rotate_left()

    def step(self) -> None:
        # Re-sense: the heading may have changed since the last look().
        if not self.wall_ahead():
            self._position = self._position.moved(self._direction)

    def done(self) -> bool:
        return self._position == self._goal

    def __repr__(self) -> str:
        return (
            f"GridWalker(position={self._position}, direction={self._direction}, "
            f"goal={self._goal})"
        )
