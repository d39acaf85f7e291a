#
# PROJECT: termesh
# MODULE: termesh/dsl/typecheck.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .ast import LineExpr, Module, TriangleExpr, VertexExpr


class TypeCheckError(ValueError):
    def __init__(self, line: str, line_no: int, message: str):
        super().__init__(f"{message}\n  --> line {line_no}: {line.strip()}")
        self.line = line
        self.line_no = line_no
        self.message = message


class UndeclaredVariable(TypeCheckError):
    def __init__(self, line, line_no, name: str):
        super().__init__(line, line_no, f"cannot find variable `{name}` in this scope")
        self.name = name


def type_check(module: Module):
    """Every vertex must be declared before a line or triangle uses it."""
    declared = set()

    for stmt in module.statements:
        expr = stmt.expr
        if isinstance(expr, VertexExpr):
            declared.add(expr.name)
            continue

        if isinstance(expr, LineExpr):
            refs = (expr.a, expr.b)
        elif isinstance(expr, TriangleExpr):
            refs = (expr.a, expr.b, expr.c)
        else:
            raise TypeError(f"unknown expression {expr!r}")

        for name in refs:
            if name not in declared:
                raise UndeclaredVariable(stmt.line, stmt.line_no, name)
