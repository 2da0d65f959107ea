"""Command line entry point.

Reads a maze image, walks it from ``--start`` to ``--end`` with the left-hand
rule and writes a PNG copy of the (uncropped) input with the path painted in
red::

    maze-walker -f maze.png -o solved.png --start "[0, 0]" --end "[40, 40]"

Exit codes: 0 on success, 1 if the image can't be read or written, 2 for
invalid options (argparse convention), 3 if the walker gave up before
reaching the goal. The partially drawn path is still written in that case.
"""

import argparse
import logging
from typing import Optional, Sequence

from maze_walker.config import (
    DEFAULT_THRESHOLD,
    Crop,
    SolverConfig,
    parse_crop,
    parse_position,
)
from maze_walker.errors import ConfigurationError, StuckError
from maze_walker.instrumentation import PathDrawingWalker, StepLogWalker
from maze_walker.solver import default_max_steps, solve
from maze_walker.utils.image import copy_image, load_image, save_png
from maze_walker.walker import GridWalker, Walker
from maze_walker.walls import BrightnessWallDetector, ImageSurface

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_STUCK = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-walker",
        description="Solve a maze image by following the left-hand wall.",
    )
    parser.add_argument("-f", "--file", required=True, help="Image file to read")
    parser.add_argument("-o", "--output", required=True, help="PNG file to write to")
    parser.add_argument(
        "-c",
        "--crop",
        default="[0, 0, 0, 0]",
        help="Crop [left, top, right, bottom] in pixels",
    )
    parser.add_argument(
        "--start", required=True, help="Start coordinates in pixels (pre-crop)"
    )
    parser.add_argument("--end", required=True, help="End coordinates in pixels (pre-crop)")
    parser.add_argument(
        "-b",
        "--brightness-threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help="Values above brightness threshold are walls",
    )
    parser.add_argument(
        "--invert",
        action="store_true",
        help="Values below brightness threshold are walls (dark walls)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Give up after this many iterations (default: 4 per pixel)",
    )
    parser.add_argument(
        "--dump", action="store_true", help="Log every walk/turn instruction"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings only")
    return parser


def config_from_args(args: argparse.Namespace) -> SolverConfig:
    """Turn parsed arguments into a validated :class:`SolverConfig`.

    Raises:
        ConfigurationError: On any malformed or out-of-range value.
    """
    crop: Crop = parse_crop(args.crop)
    return SolverConfig(
        start=parse_position(args.start),
        end=parse_position(args.end),
        threshold=args.brightness_threshold,
        invert=args.invert,
        crop=crop,
        max_steps=args.max_steps,
    )


def _setup_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args)

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        image = load_image(args.file)
    except OSError as e:
        logger.error("Could not decode image: %s", e)
        return EXIT_IO_ERROR

    try:
        box = config.crop.box(image.width, image.height)
    except ConfigurationError as e:
        parser.error(str(e))

    surface = ImageSurface.from_image(image, box)
    is_wall = BrightnessWallDetector(surface, config.threshold, config.invert)
    for name, pos in (("start", config.start), ("end", config.end)):
        if is_wall(pos.x, pos.y):
            logger.warning("%s (%d, %d) is on a wall or outside the crop", name, pos.x, pos.y)

    canvas = copy_image(image)
    walker: Walker = PathDrawingWalker(
        GridWalker(is_wall, config.start, config.end), canvas
    )
    if args.dump:
        walker = StepLogWalker(walker)

    max_steps = config.max_steps if config.max_steps is not None else default_max_steps(box)
    exit_code = EXIT_OK
    try:
        solve(walker, max_steps=max_steps)
    except StuckError as e:
        logger.error("%s", e)
        exit_code = EXIT_STUCK

    try:
        save_png(canvas, args.output)
    except OSError as e:
        logger.error("Could not save image: %s", e)
        return EXIT_IO_ERROR
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
