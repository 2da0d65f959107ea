"""Traversal engine: left-hand wall following.

:func:`solve` repeatedly reads the walker's three wall sensors, applies zero
or more left turns chosen by :func:`decide_turns`, then asks the walker to
step. The engine knows nothing about images or grids; it only uses the
:class:`maze_walker.walker.Walker` protocol.

Decision priority (first match wins, ``True`` = wall):

1. left open -> turn left (1)
2. front blocked, right open -> turn right (3)
3. boxed in on all three sides -> turn around (2)
4. otherwise (left blocked, front open) -> straight (0)

The step is issued unconditionally after turning. If the new heading still
faces a wall the step is a no-op and the next iteration decides again.

Termination is only guaranteed for simply-connected mazes. A walker is fully
determined by its ``(position, direction)`` pair, so a run longer than four
iterations per cell must be repeating itself; callers pass ``max_steps`` to
turn that into a :class:`maze_walker.errors.StuckError`.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from maze_walker.errors import StuckError
from maze_walker.geometry import Box, Position
from maze_walker.types import Sight
from maze_walker.walker import Walker

logger = logging.getLogger(__name__)

# Distinct (position, direction) states per cell.
STATES_PER_CELL = 4


@dataclass(frozen=True)
class SolveResult:
    """Summary of a finished traversal.

    Attributes:
        iterations: Number of decide/turn/step rounds performed.
        position: Final walker position (the goal).
        turns: Left-turn count chosen on each iteration, in order.
    """

    iterations: int
    position: Position
    turns: PVector[int] = field(default_factory=pvector)

    @property
    def turn_events(self) -> int:
        """Iterations that changed heading (a right turn counts once)."""
        return sum(1 for k in self.turns if k)


def decide_turns(sight: Sight) -> int:
    """Return how many 90 degree left turns to make before stepping."""
    left, front, right = sight
    if not left:
        return 1
    if front and not right:
        return 3
    if left and front and right:
        return 2
    return 0


def default_max_steps(bounds: Box) -> int:
    """Iteration bound past which a walker over ``bounds`` must be looping."""
    return STATES_PER_CELL * bounds.width * bounds.height


def solve(walker: Walker, max_steps: Optional[int] = None) -> SolveResult:
    """Drive ``walker`` until it reports ``done()``.

    Args:
        walker (Walker): Walker to move; mutated in place.
        max_steps (int | None): Maximum iterations before giving up. ``None``
            runs unbounded.

    Returns:
        SolveResult: Iteration count, final position and per-iteration turns.

    Raises:
        StuckError: If ``max_steps`` iterations elapse without reaching the goal.
    """
    logger.debug(
        "solving from (%d, %d), max_steps=%s",
        walker.position.x,
        walker.position.y,
        max_steps,
    )
    turns: list[int] = []
    while not walker.done():
        if max_steps is not None and len(turns) >= max_steps:
            logger.warning("giving up after %d iterations", len(turns))
            raise StuckError(len(turns), walker.position, walker.direction)
        k = decide_turns(walker.look())
        for _ in range(k):
            walker.turn_left()
        walker.step()
        turns.append(k)

    result = SolveResult(
        iterations=len(turns), position=walker.position, turns=pvector(turns)
    )
    logger.info(
        "reached (%d, %d) after %d iterations",
        result.position.x,
        result.position.y,
        result.iterations,
    )
    return result
