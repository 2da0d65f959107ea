"""Wall predicates.

A wall predicate answers *"is (x, y) blocked?"* for every integer pair.
Implementations must be total and must report cells outside their sampled
domain as walls; the walker relies on that to stay inside the maze without
doing its own bounds checks.

Two detectors are provided:

* :class:`BrightnessWallDetector` samples a color :class:`Surface` (usually a
  decoded image) and thresholds its perceptual brightness.
* :class:`MazeGridWallDetector` reads an in-memory
  :data:`maze_walker.utils.maze.MazeGrid`, which keeps tests and generated
  mazes free of any image decoding.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Protocol

import numpy as np
import numpy.typing as npt
from PIL import Image

from maze_walker.geometry import Box
from maze_walker.types import RGB
from maze_walker.utils.maze import MazeGrid

FloatArray = npt.NDArray[np.float64]
UInt8Array = npt.NDArray[np.uint8]

_MAX_NORM = math.sqrt(3.0)


class Surface(Protocol):
    """Read-only color source over an integer rectangle."""

    @property
    def bounds(self) -> Box: ...

    def rgb_at(self, x: int, y: int) -> RGB: ...


@dataclass(frozen=True, eq=False)
class ImageSurface:
    """Pillow image adapted to the :class:`Surface` protocol.

    ``bounds`` may be narrower than the image (a crop). Coordinates are never
    re-based: pixel ``(x, y)`` of the surface is pixel ``(x, y)`` of the source
    image, and everything outside ``bounds`` is outside the surface.
    """

    pixels: UInt8Array
    bounds: Box

    @classmethod
    def from_image(cls, image: Image.Image, box: Optional[Box] = None) -> "ImageSurface":
        if image.mode != "RGB":
            image = image.convert("RGB")
        pixels = np.array(image, dtype=np.uint8)
        pixels.setflags(write=False)
        full = Box(0, 0, image.width, image.height)
        return cls(pixels=pixels, bounds=box if box is not None else full)

    def rgb_at(self, x: int, y: int) -> RGB:
        r, g, b = self.pixels[y, x]
        return float(r) / 255.0, float(g) / 255.0, float(b) / 255.0

    def brightness_map(self) -> FloatArray:
        """Vectorized :func:`brightness` over the surface bounds (rows, cols)."""
        b = self.bounds
        region = self.pixels[b.top : b.bottom, b.left : b.right].astype(np.float64) / 255.0
        return np.sqrt(np.sum(region * region, axis=-1)) / _MAX_NORM


def brightness(rgb: RGB) -> float:
    """Euclidean norm of the channels relative to the norm of pure white."""
    r, g, b = rgb
    return math.sqrt(r * r + g * g + b * b) / _MAX_NORM


@dataclass(frozen=True, eq=False)
class BrightnessWallDetector:
    """Classify pixels brighter than ``threshold`` as walls.

    Attributes:
        surface: Sampled color source.
        threshold: Brightness cut-off in ``[0, 1]``.
        invert: If True, pixels *darker* than the threshold are walls instead
            (for mazes drawn with dark walls on a light background).
    """

    surface: Surface
    threshold: float = 0.5
    invert: bool = False

    def __call__(self, x: int, y: int) -> bool:
        if not self.surface.bounds.contains(x, y):
            return True
        value = brightness(self.surface.rgb_at(x, y))
        if self.invert:
            return value < self.threshold
        return value > self.threshold


@dataclass(frozen=True, eq=False)
class MazeGridWallDetector:
    """Walls from an in-memory grid (``True`` = open floor).

    Cells missing from the grid are outside the maze and therefore walls.
    """

    maze: MazeGrid = field(repr=False)

    def __call__(self, x: int, y: int) -> bool:
        return not self.maze.get((x, y), False)
