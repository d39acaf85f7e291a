#
# PROJECT: termesh
# MODULE: termesh/dsl/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .ast import LineExpr, Module, Statement, TriangleExpr, VertexExpr
from .parser import ParseError, parse_module
from .typecheck import TypeCheckError, type_check
