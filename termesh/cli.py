#
# PROJECT: termesh
# MODULE: termesh/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import shutil
import sys

from . import viewer
from .config import RenderConfig
from .dsl import ParseError, TypeCheckError
from .renderer import Renderer, autoscale
from .scene import load_scene
from .stl import StlError

LOGGER = logging.getLogger(__name__)


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s teapot.stl                      Interactive viewer
  %(prog)s teapot.stl --wireframe          Edges only
  %(prog)s shape.mesh --once               Print one frame and exit
  %(prog)s teapot.stl --once --no-color --width 80 --height 40

viewer keys: x/y/z rotate, w wireframe, c color, r reset, s save frame, q quit
"""
    parser = argparse.ArgumentParser(
        prog="termesh",
        description="Render 3D meshes in the terminal with Braille characters",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("path", help="Binary/ASCII .stl file or scene source")
    parser.add_argument("--wireframe", action="store_true",
                        help="Draw triangle edges only")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable depth shading")
    parser.add_argument("--scale", type=float, default=None,
                        help="Model to dot scale factor (default: fit to terminal)")
    parser.add_argument("--once", action="store_true",
                        help="Print a single frame to stdout instead of the viewer")
    parser.add_argument("--width", type=int, default=None,
                        help="Frame width in characters for --once (default: terminal)")
    parser.add_argument("--height", type=int, default=None,
                        help="Frame height in lines for --once (default: terminal)")
    parser.add_argument("--save-dir", default=".",
                        help="Directory for frames saved with 's' (default: .)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file instead of stderr")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    config = RenderConfig.detect_terminal()
    if args.no_color:
        config.use_color = False
    if args.wireframe:
        config.use_fill = False
    config.scale = args.scale
    config.save_dir = args.save_dir
    return config


def print_frame(scene, config: RenderConfig, width: int, height: int, out=None):
    """Render the unrotated scene once and write it to ``out``."""
    out = out or sys.stdout
    scale = config.scale if config.scale is not None else autoscale(scene, width, height)
    renderer = Renderer(config)
    renderer.draw(scene, scale=scale)
    for line in renderer.frame(width, height):
        out.write(line)
        out.write('\n')


def run(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        filename=args.log_file,
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = build_config(args)
    if not config.braille_ok:
        LOGGER.warning("locale does not look like UTF-8; Braille glyphs may not display")

    try:
        scene = load_scene(args.path)
    except (StlError, ParseError, TypeCheckError, OSError) as e:
        LOGGER.error("could not load %s: %s", args.path, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.once:
        columns, lines = shutil.get_terminal_size((80, 24))
        print_frame(scene, config, args.width or columns - 1, args.height or lines - 1)
        return 0

    try:
        curses.wrapper(lambda s: viewer.main(s, scene, config))
    except KeyboardInterrupt:
        pass
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
