#
# PROJECT: termesh
# MODULE: termesh/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import round_half_away

# Grayscale ramp occupies xterm indices 232-255 (24 shades).
# Values: 8, 18, 28, ..., 238
GRAY_BASE = 232
GRAY_STEPS = 24
# The brightest steps read as "too close" and are never used.
GRAY_RESERVED = 4
GRAY_LEVELS = GRAY_STEPS - GRAY_RESERVED

ANSI_RESET = "\x1b[0m"


def gray_step(depth: float) -> int:
    """
    Map a normalized depth in [0, 1] (0 = nearest) to a step of the usable
    grayscale ramp: GRAY_LEVELS - 1 for the nearest, 0 for the farthest.
    """
    depth = min(1.0, max(0.0, depth))
    return int(round_half_away((1.0 - depth) * (GRAY_LEVELS - 1)))


def gray_index(depth: float) -> int:
    """xterm-256 color index for a normalized depth."""
    return GRAY_BASE + gray_step(depth)


def ansi_fg(index: int) -> str:
    """Foreground SGR escape selecting xterm-256 color ``index``."""
    return f"\x1b[38;5;{index}m"
