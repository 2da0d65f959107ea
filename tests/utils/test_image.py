import io
from pathlib import Path

import pytest
from PIL import Image, UnidentifiedImageError

from maze_walker.geometry import Box, Position
from maze_walker.utils.image import (
    FLOOR_PREVIEW_RGB,
    OUTSIDE_PREVIEW_RGB,
    WALL_PREVIEW_RGB,
    copy_image,
    draw_path,
    load_image,
    save_png,
    wall_preview,
)
from maze_walker.walls import ImageSurface
from tests.test_utils import make_solid_image


def test_load_image_converts_to_rgb(tmp_path: Path) -> None:
    path = tmp_path / "maze.png"
    Image.new("RGBA", (3, 2), (10, 20, 30, 255)).save(path)
    image = load_image(str(path))
    assert image.mode == "RGB"
    assert image.size == (3, 2)
    assert image.getpixel((0, 0)) == (10, 20, 30)


def test_load_image_from_file_object() -> None:
    buffer = io.BytesIO()
    make_solid_image(2, 2, (255, 255, 255)).save(buffer, format="PNG")
    buffer.seek(0)
    assert load_image(buffer).getpixel((1, 1)) == (255, 255, 255)


def test_load_image_propagates_decode_errors() -> None:
    with pytest.raises(UnidentifiedImageError):
        load_image(io.BytesIO(b"not an image"))


def test_copy_image_is_independent() -> None:
    image = make_solid_image(2, 2)
    copy = copy_image(image)
    copy.putpixel((0, 0), (1, 2, 3))
    assert image.getpixel((0, 0)) == (0, 0, 0)


def test_draw_path_skips_out_of_bounds() -> None:
    image = make_solid_image(3, 3)
    draw_path(image, [Position(0, 0), Position(-1, 0), Position(2, 2), Position(3, 3)], (9, 9, 9))
    assert image.getpixel((0, 0)) == (9, 9, 9)
    assert image.getpixel((2, 2)) == (9, 9, 9)
    assert image.getpixel((1, 1)) == (0, 0, 0)


def test_save_png_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "out.png"
    save_png(make_solid_image(4, 1, (1, 2, 3)), str(target))
    with Image.open(target) as saved:
        assert saved.format == "PNG"


def test_wall_preview() -> None:
    image = make_solid_image(4, 4)
    image.putpixel((1, 1), (255, 255, 255))
    surface = ImageSurface.from_image(image, Box(1, 1, 3, 3))
    preview = wall_preview(surface, 0.5, invert=False)
    assert preview.size == (4, 4)
    assert preview.getpixel((1, 1)) == WALL_PREVIEW_RGB
    assert preview.getpixel((2, 2)) == FLOOR_PREVIEW_RGB
    assert preview.getpixel((0, 0)) == OUTSIDE_PREVIEW_RGB

    inverted = wall_preview(surface, 0.5, invert=True)
    assert inverted.getpixel((1, 1)) == FLOOR_PREVIEW_RGB
    assert inverted.getpixel((2, 2)) == WALL_PREVIEW_RGB
