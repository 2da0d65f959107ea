from dataclasses import dataclass
import random
from typing import Optional

import streamlit as st
from PIL import Image

from maze_walker.config import Crop, SolverConfig
from maze_walker.errors import ConfigurationError, StuckError
from maze_walker.geometry import Position
from maze_walker.instrumentation import PathDrawingWalker, PathRecordingWalker
from maze_walker.solver import SolveResult, default_max_steps, solve
from maze_walker.utils.image import copy_image, load_image, wall_preview
from maze_walker.utils.maze import generate_perfect_maze, maze_to_image
from maze_walker.walker import GridWalker
from maze_walker.walls import BrightnessWallDetector, ImageSurface

PREVIEW_WIDTH = 480

st.set_page_config(layout="wide", page_title="Maze Walker")


@dataclass(frozen=True)
class GeneratedMazeConfig:
    width: int
    height: int
    seed: int


def upscale(image: Image.Image) -> Image.Image:
    """Nearest-neighbour enlarge so single-pixel paths stay visible."""
    factor = max(1, PREVIEW_WIDTH // max(1, image.width))
    return image.resize((image.width * factor, image.height * factor), Image.Resampling.NEAREST)


def get_source_image() -> Optional[Image.Image]:
    source = st.radio("Maze source", ["Generate", "Upload"], horizontal=True)
    if source == "Upload":
        uploaded = st.file_uploader("Maze image", type=["png", "jpg", "jpeg", "gif"])
        if uploaded is None:
            return None
        return load_image(uploaded)

    cols = st.columns([1, 1, 1])
    with cols[0]:
        width: int = st.slider("Maze width", 5, 61, 21, step=2, key="gen_width")
    with cols[1]:
        height: int = st.slider("Maze height", 5, 61, 21, step=2, key="gen_height")
    with cols[2]:
        seed: int = st.number_input("Seed", min_value=0, value=0, key="gen_seed")
    gen = GeneratedMazeConfig(width=width, height=height, seed=seed)
    return maze_to_image(generate_perfect_maze(gen.width, gen.height, random.Random(gen.seed)))


def get_config_from_widgets(image: Image.Image) -> SolverConfig:
    st.subheader("Start & End")
    cols = st.columns([1, 1, 1, 1])
    with cols[0]:
        sx: int = st.number_input("Start x", 0, image.width - 1, 0, key="start_x")
    with cols[1]:
        sy: int = st.number_input("Start y", 0, image.height - 1, 0, key="start_y")
    with cols[2]:
        ex: int = st.number_input("End x", 0, image.width - 1, image.width - 1, key="end_x")
    with cols[3]:
        ey: int = st.number_input("End y", 0, image.height - 1, image.height - 1, key="end_y")

    st.subheader("Walls")
    threshold: float = st.slider("Brightness threshold", 0.0, 1.0, 0.5, step=0.01)
    invert: bool = st.checkbox("Dark walls (invert)", value=False)

    st.subheader("Crop")
    cols = st.columns([1, 1, 1, 1])
    crop_values = [
        col.number_input(label, min_value=0, value=0, key=f"crop_{label}")
        for col, label in zip(cols, ["Left", "Top", "Right", "Bottom"])
    ]
    return SolverConfig(
        start=Position(sx, sy),
        end=Position(ex, ey),
        threshold=threshold,
        invert=invert,
        crop=Crop(*crop_values),
    )


# --------- Main App ---------

left_col, right_col = st.columns([0.4, 0.6])

with left_col:
    image = get_source_image()
    config: Optional[SolverConfig] = None
    if image is not None:
        try:
            config = get_config_from_widgets(image)
        except ConfigurationError as e:
            st.error(str(e))

with right_col:
    if image is not None and config is not None:
        try:
            box = config.crop.box(image.width, image.height)
        except ConfigurationError as e:
            st.error(str(e))
            st.stop()

        surface = ImageSurface.from_image(image, box)
        tab_solution, tab_walls = st.tabs(["Solution", "Walls"])

        with tab_walls:
            st.image(upscale(wall_preview(surface, config.threshold, config.invert)))

        with tab_solution:
            canvas = copy_image(image)
            recorder = PathRecordingWalker(
                PathDrawingWalker(
                    GridWalker(
                        BrightnessWallDetector(surface, config.threshold, config.invert),
                        config.start,
                        config.end,
                    ),
                    canvas,
                )
            )
            result: Optional[SolveResult] = None
            try:
                result = solve(recorder, max_steps=default_max_steps(box))
            except StuckError as e:
                st.warning(str(e))
            if result is not None:
                st.success(
                    f"Reached the end in {result.iterations} iterations, "
                    f"{len(recorder.path) - 1} moves, {result.turn_events} turns"
                )
            st.image(upscale(canvas))
