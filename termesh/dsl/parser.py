#
# PROJECT: termesh
# MODULE: termesh/dsl/parser.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Line-oriented parser for scene sources::

    # a comment
    vertex v1 = 0 0 0
    vertex v2 = 1 0 0
    vertex v3 = 0 1 0
    line v1 v2
    triangle v1 v2 v3

Tokens are whitespace separated; blank lines and lines whose first token
starts with ``#`` are skipped.
"""

import logging
import math

from ..math_utils import Vec3
from .ast import LineExpr, Module, Statement, TriangleExpr, VertexExpr

LOGGER = logging.getLogger(__name__)

_STATEMENT_START = "vertex | line | triangle"


class ParseError(ValueError):
    """Base for parse failures; carries the offending source line."""

    def __init__(self, line: str, line_no: int, message: str):
        super().__init__(f"{message}\n  --> line {line_no}: {line.strip()}")
        self.line = line
        self.line_no = line_no
        self.message = message


class UnexpectedToken(ParseError):
    def __init__(self, line, line_no, got: str, expected: str):
        super().__init__(line, line_no, f"unexpected `{got}`, expected {expected}")
        self.got = got
        self.expected = expected


class UnexpectedEol(ParseError):
    def __init__(self, line, line_no, expected: str):
        super().__init__(line, line_no, f"unexpected end of line, expected {expected}")
        self.expected = expected


class BadNumber(ParseError):
    def __init__(self, line, line_no, text: str):
        super().__init__(line, line_no, f"`{text}` is not a valid number")
        self.text = text


class BadIdentifier(ParseError):
    def __init__(self, line, line_no, text: str):
        super().__init__(line, line_no, f"`{text}` is not a valid identifier")
        self.text = text


def parse_module(source: str) -> Module:
    """Parse a whole source text; raises the first ParseError found."""
    statements = []
    for line_no, raw_line in enumerate(source.splitlines()):
        stmt = _LineParser(raw_line, line_no).parse()
        if stmt is not None:
            statements.append(stmt)

    LOGGER.debug("parsed %d statements", len(statements))
    return Module(source=source, statements=statements)


class _LineParser:
    __slots__ = ('raw_line', 'line_no', 'tokens', 'pos')

    def __init__(self, raw_line: str, line_no: int):
        self.raw_line = raw_line
        self.line_no = line_no
        self.tokens = raw_line.split()
        self.pos = 0

    def next(self, expected: str) -> str:
        if self.pos >= len(self.tokens):
            raise UnexpectedEol(self.raw_line, self.line_no, expected)
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def parse(self):
        if not self.tokens or self.tokens[0].startswith('#'):
            return None

        kind = self.next(_STATEMENT_START)
        if kind == 'vertex':
            expr = self.parse_vertex()
        elif kind == 'line':
            expr = LineExpr(self.parse_id(), self.parse_id())
        elif kind == 'triangle':
            expr = TriangleExpr(self.parse_id(), self.parse_id(), self.parse_id())
        else:
            raise UnexpectedToken(self.raw_line, self.line_no, kind, _STATEMENT_START)

        if self.pos < len(self.tokens):
            raise UnexpectedToken(self.raw_line, self.line_no, self.tokens[self.pos], "<eol>")

        return Statement(line=self.raw_line, line_no=self.line_no, expr=expr)

    def parse_vertex(self) -> VertexExpr:
        name = self.parse_id()
        self.eat("=")
        x = self.parse_number()
        y = self.parse_number()
        z = self.parse_number()
        return VertexExpr(name, Vec3(x, y, z))

    def parse_id(self) -> str:
        ident = self.next("identifier")
        if ident[0].isalpha() and all(c.isalnum() for c in ident[1:]):
            return ident
        raise BadIdentifier(self.raw_line, self.line_no, ident)

    def parse_number(self) -> float:
        text = self.next("number")
        try:
            value = float(text)
        except ValueError:
            raise BadNumber(self.raw_line, self.line_no, text) from None
        # nan/inf cannot be placed on the canvas
        if not math.isfinite(value):
            raise BadNumber(self.raw_line, self.line_no, text)
        return value

    def eat(self, what: str):
        token = self.next(what)
        if token != what:
            raise UnexpectedToken(self.raw_line, self.line_no, token, what)
