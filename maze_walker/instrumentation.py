"""Instrumentation proxies for walkers.

Each proxy holds an inner :class:`maze_walker.walker.Walker` and implements the
same protocol. Every call is forwarded to the inner walker exactly once and
its return value is passed back unchanged; proxies only *observe* transitions.
Proxies nest freely, e.g.::

    walker = StepLogWalker(PathDrawingWalker(GridWalker(...), canvas))
"""

import logging
from typing import Tuple

from PIL import Image
from pyrsistent import pvector
from pyrsistent.typing import PVector

from maze_walker.geometry import Direction, Position
from maze_walker.types import Sight
from maze_walker.utils.image import draw_path
from maze_walker.walker import Walker

logger = logging.getLogger(__name__)

PATH_RGB = (255, 0, 0)


class WalkerProxy:
    """Forward every call to ``inner``; subclasses add observation."""

    def __init__(self, inner: Walker) -> None:
        self.inner = inner

    @property
    def position(self) -> Position:
        return self.inner.position

    @property
    def direction(self) -> Direction:
        return self.inner.direction

    def step(self) -> None:
        self.inner.step()

    def turn_left(self) -> None:
        self.inner.turn_left()

    def wall_ahead(self) -> bool:
        return self.inner.wall_ahead()

    def look(self) -> Sight:
        return self.inner.look()

    def done(self) -> bool:
        return self.inner.done()


class StepLogWalker(WalkerProxy):
    """Log a compact movement transcript.

    Consecutive step calls are batched into a single ``walk N step(s)`` line
    that is flushed whenever the walker turns or reaches its goal. Step calls
    are counted whether or not they actually moved the walker.
    """

    def __init__(self, inner: Walker) -> None:
        super().__init__(inner)
        self.step_count = 0

    def step(self) -> None:
        self.step_count += 1
        self.inner.step()

    def turn_left(self) -> None:
        if self.step_count > 0:
            logger.info("walk %d step(s)", self.step_count)
        logger.info("turn left")
        self.step_count = 0
        self.inner.turn_left()

    def done(self) -> bool:
        done = self.inner.done()
        if done:
            logger.info("walk %d step(s), done", self.step_count)
        return done


class PathRecordingWalker(WalkerProxy):
    """Record every distinct cell the walker occupies, starting cell included.

    Attributes:
        path (PVector[Position]): Visited cells in order. A cell appears again
            each time the walker comes back to it.
    """

    def __init__(self, inner: Walker) -> None:
        super().__init__(inner)
        self.path: PVector[Position] = pvector([inner.position])

    def step(self) -> None:
        self.inner.step()
        position = self.inner.position
        if position != self.path[-1]:
            self.path = self.path.append(position)


class PathDrawingWalker(WalkerProxy):
    """Paint each occupied cell onto ``canvas``.

    The canvas is usually a copy of the uncropped source image; walker
    coordinates are pixel coordinates of that image.
    """

    def __init__(
        self,
        inner: Walker,
        canvas: Image.Image,
        color: Tuple[int, int, int] = PATH_RGB,
    ) -> None:
        super().__init__(inner)
        self.canvas = canvas
        self.color = color
        self._paint(inner.position)

    def _paint(self, pos: Position) -> None:
        draw_path(self.canvas, [pos], self.color)

    def step(self) -> None:
        self.inner.step()
        self._paint(self.inner.position)
