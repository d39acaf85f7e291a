#
# PROJECT: termesh
# MODULE: termesh/viewer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import math

from .color import GRAY_BASE, GRAY_LEVELS, gray_step
from .config import RenderConfig
from .renderer import Renderer, autoscale, next_save_path, save_frame
from .scene import Scene

LOGGER = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


def init_colors(config):
    """
    Initialize one curses color pair per usable grayscale step.

    Color mode cascade:
      1. xterm-256 - pairs on the grayscale ramp
      2. 8-color   - white, bold for the nearer half
      3. Mono      - no attributes
    Returns a list of GRAY_LEVELS curses attributes indexed by gray_step().
    """
    mono = [curses.A_NORMAL] * GRAY_LEVELS
    if not config.use_color:
        return mono

    try:
        if not curses.has_colors():
            return mono
        curses.start_color()

        default_bg = curses.COLOR_BLACK
        try:
            curses.use_default_colors()
            default_bg = -1
        except curses.error:
            LOGGER.debug("terminal has no default colors, using black background")

        if curses.COLORS >= 256:
            attrs = []
            for step in range(GRAY_LEVELS):
                pair_id = step + 1
                curses.init_pair(pair_id, GRAY_BASE + step, default_bg)
                attrs.append(curses.color_pair(pair_id))
            return attrs

        curses.init_pair(1, curses.COLOR_WHITE, default_bg)
        half = GRAY_LEVELS // 2
        return ([curses.color_pair(1)] * half +
                [curses.color_pair(1) | curses.A_BOLD] * (GRAY_LEVELS - half))
    except curses.error as e:
        LOGGER.warning("color initialization failed, falling back to mono: %s", e)
        return mono


class ViewerApp:
    """
    Interactive curses viewer: rotates the scene around its axes on key
    presses and redraws the frame.

    Keys: x/y/z rotate, w toggles wireframe, c toggles color, r resets the
    rotation, s saves the current frame, q quits.
    """

    def __init__(self, stdscr, scene: Scene, config: RenderConfig):
        self.stdscr = stdscr
        self.scene = scene
        self.config = config
        self.running = True
        self.angles = [0.0, 0.0, 0.0]
        self.status = ""

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.keypad(True)

        self.color_attrs = init_colors(config)
        self.renderer = Renderer(config)

        th, tw = stdscr.getmaxyx()
        if config.scale is None:
            self.scale = autoscale(scene, tw - 1, th - 2)
            LOGGER.debug("auto scale %.3f for %dx%d terminal", self.scale, tw, th)
        else:
            self.scale = config.scale

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_key(self, key):
        step = self.config.rotation_step
        config = self.config

        if key == ord('q'):
            self.running = False
        elif key in (ord('x'), ord('y'), ord('z')):
            axis = key - ord('x')
            self.angles[axis] = (self.angles[axis] + step) % TWO_PI
        elif key == ord('r'):
            self.angles = [0.0, 0.0, 0.0]
        elif key == ord('w'):
            config.use_fill = not config.use_fill
        elif key == ord('c'):
            config.use_color = not config.use_color
            self.color_attrs = init_colors(config)
        elif key == ord('s'):
            self.save()

    def save(self):
        th, tw = self.stdscr.getmaxyx()
        path = next_save_path(self.config.save_dir)
        try:
            save_frame(self.renderer.frame(tw - 1, th - 2, with_color=False), path)
            self.status = f"saved {path}"
        except OSError as e:
            LOGGER.error("could not save frame to %s: %s", path, e)
            self.status = f"save failed: {e.strerror}"

    # ────────────────────────────────────────────────────────────────────
    # Drawing
    # ────────────────────────────────────────────────────────────────────
    def draw(self):
        stdscr = self.stdscr
        th, tw = stdscr.getmaxyx()
        width, height = tw - 1, th - 2

        self.renderer.draw(self.scene, self.angles, self.scale)

        stdscr.erase()
        if width > 0 and height > 0:
            attrs = self.color_attrs
            for y, cells in enumerate(self.renderer.frame_cells(width, height)):
                for x, (glyph, depth) in enumerate(cells):
                    if depth is None:
                        continue
                    try:
                        stdscr.addstr(y + 1, x, glyph, attrs[gray_step(depth)])
                    except curses.error:
                        # writing the bottom-right cell moves the cursor off screen
                        pass

        degrees = " ".join(f"{a:.0f}" for a in map(math.degrees, self.angles))
        mode = "FILL" if self.config.use_fill else "WIRE"
        hdr = f" {self.scene.name} | rot {degrees} | {mode} | {self.status} "
        try:
            stdscr.addstr(0, 0, hdr.center(max(tw - 1, 0), '=')[:max(tw - 1, 0)],
                          curses.A_BOLD)
        except curses.error:
            pass

        stdscr.refresh()

    def run(self):
        while self.running:
            self.draw()
            self.handle_key(self.stdscr.getch())


def main(stdscr, scene: Scene, config: RenderConfig):
    """Entry point called from curses.wrapper."""
    app = ViewerApp(stdscr, scene, config)
    app.run()
