#
# PROJECT: termesh
# MODULE: termesh/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3
from .line import Line
from .canvas import Bounds, Canvas, Pixel
from .config import RenderConfig
from .stl import Facet, Stl, StlError
from .scene import DslScene, MeshScene, Scene, load_scene
from .renderer import Renderer, autoscale, save_frame
