"""Image helpers around Pillow.

Decoding, copying, painting and encoding live here so the traversal core
only ever sees a :class:`maze_walker.walls.Surface`. Errors raised by Pillow
(``OSError`` / ``PIL.UnidentifiedImageError``) are deliberately left to
propagate to the caller.
"""

from typing import IO, Iterable, Tuple, Union

import numpy as np
import numpy.typing as npt
from PIL import Image

from maze_walker.geometry import Box, Position
from maze_walker.walls import ImageSurface

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
ImageSource = Union[str, IO[bytes]]

WALL_PREVIEW_RGB = (255, 255, 255)
FLOOR_PREVIEW_RGB = (0, 0, 0)
OUTSIDE_PREVIEW_RGB = (96, 96, 96)


def load_image(source: ImageSource) -> Image.Image:
    """Decode ``source`` (path or binary file object) into an RGB image."""
    with Image.open(source) as image:
        return image.convert("RGB")


def copy_image(image: Image.Image) -> Image.Image:
    """Return an independent RGB copy suitable for drawing on."""
    return image.convert("RGB") if image.mode != "RGB" else image.copy()


def draw_path(
    image: Image.Image,
    path: Iterable[Position],
    color: Tuple[int, int, int],
) -> Image.Image:
    """Paint each in-bounds position of ``path`` onto ``image`` in place."""
    for pos in path:
        if 0 <= pos.x < image.width and 0 <= pos.y < image.height:
            image.putpixel((pos.x, pos.y), color)
    return image


def save_png(image: Image.Image, target: ImageSource) -> None:
    image.save(target, format="PNG")


def wall_preview(surface: ImageSurface, threshold: float, invert: bool) -> Image.Image:
    """Render the wall classification of ``surface`` as a black/white image.

    Pixels outside the surface bounds (cropped away) are shown in grey.
    """
    height, width = surface.pixels.shape[:2]
    out: UInt8Array = np.empty((height, width, 3), dtype=np.uint8)
    out[...] = OUTSIDE_PREVIEW_RGB

    values = surface.brightness_map()
    walls = values < threshold if invert else values > threshold
    region = np.where(walls[..., None], WALL_PREVIEW_RGB, FLOOR_PREVIEW_RGB)

    b: Box = surface.bounds
    out[b.top : b.bottom, b.left : b.right] = region.astype(np.uint8)
    return Image.fromarray(out)
