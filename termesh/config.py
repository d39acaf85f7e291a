#
# PROJECT: termesh
# MODULE: termesh/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    use_color: bool = True
    use_fill: bool = True
    scale: Optional[float] = None       # None = fit the scene to the frame
    rotation_step: float = math.pi / 4
    flip_y: bool = True                 # model Y points up, terminal rows grow down
    reset_zrange: bool = False          # start each frame with a fresh depth range
    save_dir: str = "."
    braille_ok: bool = True             # locale/font can show U+2800 block

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM, LANG and NO_COLOR environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Note: accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown', '')
        no_color = bool(os.environ.get('NO_COLOR'))
        # Linux console font often lacks braille
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not (is_dumb or no_color),
            braille_ok=supports_utf8 and not is_linux_console,
        )
