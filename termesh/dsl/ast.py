#
# PROJECT: termesh
# MODULE: termesh/dsl/ast.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass, field
from typing import List, Union

from ..math_utils import Vec3


@dataclass
class VertexExpr:
    name: str
    point: Vec3


@dataclass
class LineExpr:
    a: str
    b: str


@dataclass
class TriangleExpr:
    a: str
    b: str
    c: str


Expr = Union[VertexExpr, LineExpr, TriangleExpr]


@dataclass
class Statement:
    line: str       # raw source line, kept for diagnostics
    line_no: int    # 0-based
    expr: Expr


@dataclass
class Module:
    source: str
    statements: List[Statement] = field(default_factory=list)
