#
# PROJECT: termesh
# MODULE: termesh/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import os

from .canvas import Canvas
from .config import RenderConfig
from .scene import Scene

LOGGER = logging.getLogger(__name__)

# Dots per character cell
CELL_W = 2
CELL_H = 4


def autoscale(scene: Scene, width: int, height: int, margin: float = 0.9) -> float:
    """
    Scale factor that keeps the scene inside ``width`` x ``height`` character
    cells at any rotation about the origin.
    """
    radius = max((v.magnitude() for v in scene.vertices()), default=0.0)
    if radius == 0.0 or width <= 0 or height <= 0:
        return 1.0
    budget = min(width * CELL_W, height * CELL_H) * margin
    return budget / (2.0 * radius)


class Renderer:
    """
    Turns a scene plus rotation angles into canvas content.

    draw() works on a clone of the scene: vertices are rotated around X, then
    Y, then Z, scaled, optionally Y-flipped for screen space, and replayed
    into a freshly cleared canvas. The canvas is reused between frames.
    """

    def __init__(self, config: RenderConfig):
        self.config = config
        self.canvas = Canvas()

    def draw(self, scene: Scene, angles=(0.0, 0.0, 0.0), scale: float = 1.0) -> Canvas:
        config = self.config
        canvas = self.canvas
        canvas.clear(reset_zrange=config.reset_zrange)

        frame_scene = scene.clone()
        ax, ay, az = angles
        for v in frame_scene.vertices_mut():
            v.rotate_x(ax)
            v.rotate_y(ay)
            v.rotate_z(az)
            v.scale(scale)
            if config.flip_y:
                v.y = -v.y

        frame_scene.render(canvas, wireframe_only=not config.use_fill)
        return canvas

    def window(self, width: int, height: int):
        """(min_row, max_row, min_col, max_col) of a width x height window
        anchored at the top-left of the occupied area, or None when empty."""
        bounds = self.canvas.dimensions()
        if bounds is None:
            return None
        return (bounds.min_row, bounds.min_row + height - 1,
                bounds.min_col, bounds.min_col + width - 1)

    def frame(self, width: int, height: int, with_color=None):
        """Text lines of a width x height frame of the last drawn scene."""
        window = self.window(width, height)
        if window is None:
            return []
        if with_color is None:
            with_color = self.config.use_color
        return self.canvas.frame(with_color, *window)

    def frame_cells(self, width: int, height: int):
        window = self.window(width, height)
        if window is None:
            return []
        return self.canvas.frame_cells(*window)


def next_save_path(save_dir: str, prefix: str = "termesh") -> str:
    """First ``<prefix>-<n>.txt`` in ``save_dir`` that does not exist yet."""
    n = 0
    while True:
        path = os.path.join(save_dir, f"{prefix}-{n}.txt")
        if not os.path.exists(path):
            return path
        n += 1


def save_frame(lines, path: str):
    """Write frame lines to ``path``, one per line, UTF-8."""
    with open(path, 'w', encoding='utf-8') as f:
        for line in lines:
            f.write(line)
            f.write('\n')
    LOGGER.info("saved frame to %s", path)
