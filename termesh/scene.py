#
# PROJECT: termesh
# MODULE: termesh/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import copy
import logging
import os
from abc import ABC, abstractmethod

from .dsl import LineExpr, TriangleExpr, VertexExpr, parse_module, type_check
from .stl import Stl

LOGGER = logging.getLogger(__name__)


class Scene(ABC):
    """
    Something that can be drawn on a Canvas.

    ``vertices()`` is used for bounding/scaling, ``vertices_mut()`` yields the
    same Vec3 objects for in-place rotate/scale, and ``render()`` replays the
    geometry into a canvas. Transform a ``clone()`` so the original stays
    untouched between frames.
    """

    name = ""

    @abstractmethod
    def vertices(self):
        """Iterate over the scene's points."""

    @abstractmethod
    def vertices_mut(self):
        """Iterate over the scene's points for in-place transformation."""

    @abstractmethod
    def render(self, canvas, wireframe_only: bool = False):
        """Draw the scene's edges and triangles into ``canvas``."""

    def clone(self) -> 'Scene':
        return copy.deepcopy(self)


class MeshScene(Scene):
    """Triangles of a decoded STL mesh."""

    def __init__(self, stl: Stl, name: str = ""):
        self.stl = stl
        self.name = name

    def vertices(self):
        return self.stl.vertices()

    def vertices_mut(self):
        return self.stl.vertices_mut()

    def render(self, canvas, wireframe_only: bool = False):
        draw = canvas.triangle if wireframe_only else canvas.fill_triangle
        for facet in self.stl.facets:
            a, b, c = facet.vertices
            draw(a.as_tuple(), b.as_tuple(), c.as_tuple())


class DslScene(Scene):
    """
    Lines and triangles of a scene source module.

    Each ``vertex`` statement owns its own point; ``line``/``triangle``
    statements bind to the declaration in effect at that point of the
    source, so redeclaring a name only affects later statements.
    """

    def __init__(self, module, name: str = ""):
        type_check(module)
        self.name = name
        self.points = []        # Vec3, one per vertex statement
        self.primitives = []    # tuples of 2 (line) or 3 (triangle) Vec3

        env = {}
        for stmt in module.statements:
            expr = stmt.expr
            if isinstance(expr, VertexExpr):
                point = expr.point.copy()
                env[expr.name] = point
                self.points.append(point)
            elif isinstance(expr, LineExpr):
                self.primitives.append((env[expr.a], env[expr.b]))
            elif isinstance(expr, TriangleExpr):
                self.primitives.append((env[expr.a], env[expr.b], env[expr.c]))

    def vertices(self):
        return iter(self.points)

    def vertices_mut(self):
        return iter(self.points)

    def render(self, canvas, wireframe_only: bool = False):
        for prim in self.primitives:
            pts = [p.as_tuple() for p in prim]
            if len(pts) == 2:
                canvas.line(pts[0], pts[1])
            elif wireframe_only:
                canvas.triangle(*pts)
            else:
                canvas.fill_triangle(*pts)


def load_scene(path) -> Scene:
    """
    Load a scene from disk: ``.stl`` files are decoded as meshes, anything
    else is parsed and type-checked as a scene source.
    """
    name = os.path.basename(str(path))
    if str(path).lower().endswith('.stl'):
        scene = MeshScene(Stl.load(path), name=name)
        LOGGER.info("loaded mesh %s with %d facets", name, len(scene.stl.facets))
        return scene

    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    scene = DslScene(parse_module(source), name=name)
    LOGGER.info("loaded scene %s with %d vertices and %d primitives",
                name, len(scene.points), len(scene.primitives))
    return scene
