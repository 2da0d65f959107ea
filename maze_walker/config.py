"""Solver configuration.

:class:`SolverConfig` gathers everything needed to build a walker: start and
end pixels, the brightness threshold and polarity, an optional crop and an
optional iteration bound. All validation happens in ``__post_init__`` so an
invalid configuration can never reach walker construction.

Coordinates and crops use the JSON array syntax of the command line
(``"[12, 40]"``, ``"[0, 0, 5, 5]"``); see :func:`parse_position` and
:func:`parse_crop`.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from maze_walker.errors import ConfigurationError
from maze_walker.geometry import Box, Position

DEFAULT_THRESHOLD = 0.5


@dataclass(frozen=True)
class Crop:
    """Pixels trimmed from each edge of the source image."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def __post_init__(self) -> None:
        for name in ("left", "top", "right", "bottom"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ConfigurationError(
                    f"Crop {name} must be a non-negative integer, got {value!r}"
                )

    def box(self, width: int, height: int) -> Box:
        """Return the region of a ``width x height`` image kept by this crop.

        Raises:
            ConfigurationError: If the crop removes the whole image.
        """
        box = Box(self.left, self.top, width - self.right, height - self.bottom)
        if box.width == 0 or box.height == 0:
            raise ConfigurationError(
                f"Crop {self} leaves nothing of a {width}x{height} image"
            )
        return box


@dataclass(frozen=True)
class SolverConfig:
    """Validated solver options.

    Attributes:
        start: Start pixel (uncropped image coordinates).
        end: Goal pixel (uncropped image coordinates).
        threshold: Brightness above which a pixel is a wall, in ``[0, 1]``.
        invert: Treat pixels darker than ``threshold`` as walls instead.
        crop: Edges to trim before solving.
        max_steps: Iteration bound; ``None`` lets the caller pick a default.
    """

    start: Position
    end: Position
    threshold: float = DEFAULT_THRESHOLD
    invert: bool = False
    crop: Crop = field(default_factory=Crop)
    max_steps: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.threshold, bool) or not isinstance(
            self.threshold, (int, float)
        ):
            raise ConfigurationError(
                f"Threshold must be a number, got {self.threshold!r}"
            )
        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigurationError(
                f"Threshold must be within [0, 1], got {self.threshold}"
            )
        if self.max_steps is not None and (
            not _is_int(self.max_steps) or self.max_steps <= 0
        ):
            raise ConfigurationError(
                f"max_steps must be a positive integer, got {self.max_steps!r}"
            )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_int_array(text: str, length: int, what: str) -> list[int]:
    try:
        values = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid {what} {text!r}: {e.msg}") from e
    except RecursionError as e:
        raise ConfigurationError(f"Invalid {what}: nested too deeply") from e
    if not isinstance(values, list):
        raise ConfigurationError(f"Invalid {what} {text!r}: expected a JSON array")
    if len(values) != length:
        raise ConfigurationError(
            f"Expected array of length {length}, got {len(values)}"
        )
    if not all(_is_int(v) for v in values):
        raise ConfigurationError(f"Invalid {what} {text!r}: expected integers")
    return values


def parse_position(text: str) -> Position:
    """Parse ``"[x, y]"`` into a :class:`Position`."""
    x, y = _parse_int_array(text, 2, "coordinate")
    return Position(x, y)


def parse_crop(text: str) -> Crop:
    """Parse ``"[left, top, right, bottom]"`` into a :class:`Crop`."""
    return Crop(*_parse_int_array(text, 4, "crop"))
