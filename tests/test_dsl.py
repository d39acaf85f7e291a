import pytest

from termesh.dsl import (LineExpr, Module, Statement, TriangleExpr, VertexExpr,
                         parse_module, type_check)
from termesh.dsl.parser import (BadIdentifier, BadNumber, ParseError, UnexpectedEol,
                                UnexpectedToken)
from termesh.dsl.typecheck import TypeCheckError, UndeclaredVariable
from termesh.math_utils import Vec3


def test_parse_simple():
    source = """
        vertex v1 = 3 2 1
        vertex v2 = 1 2 3
        vertex v3 = 0 0 0
        vertex v4 = 9 9 9

        line v1 v2
        triangle v2 v3 v4
        """

    tree = parse_module(source)
    assert tree == Module(
        source=source,
        statements=[
            Statement("        vertex v1 = 3 2 1", 1, VertexExpr("v1", Vec3(3, 2, 1))),
            Statement("        vertex v2 = 1 2 3", 2, VertexExpr("v2", Vec3(1, 2, 3))),
            Statement("        vertex v3 = 0 0 0", 3, VertexExpr("v3", Vec3(0, 0, 0))),
            Statement("        vertex v4 = 9 9 9", 4, VertexExpr("v4", Vec3(9, 9, 9))),
            Statement("        line v1 v2", 6, LineExpr("v1", "v2")),
            Statement("        triangle v2 v3 v4", 7, TriangleExpr("v2", "v3", "v4")),
        ],
    )
    type_check(tree)


def test_comments_and_numbers():
    tree = parse_module("# header\nvertex a1 = -1.5 2e1 .25\n   # indented comment\n")
    assert len(tree.statements) == 1
    assert tree.statements[0].line_no == 1
    assert tree.statements[0].expr.point == (-1.5, 20.0, 0.25)


@pytest.mark.parametrize("source, error, attrs", [
    ("cube v1", UnexpectedToken, {"got": "cube"}),
    ("vertex v1 - 1 2 3", UnexpectedToken, {"got": "-", "expected": "="}),
    ("line v1 v2 v3", UnexpectedToken, {"got": "v3", "expected": "<eol>"}),
    ("vertex v1 = 1 2", UnexpectedEol, {"expected": "number"}),
    ("triangle a b", UnexpectedEol, {"expected": "identifier"}),
    ("vertex v1 = 1 two 3", BadNumber, {"text": "two"}),
    ("vertex v1 = 1 nan 3", BadNumber, {"text": "nan"}),
    ("vertex 1v = 1 2 3", BadIdentifier, {"text": "1v"}),
    ("line a b_c", BadIdentifier, {"text": "b_c"}),
])
def test_parse_errors(source, error, attrs):
    text = "vertex ok = 0 0 0\n\n" + source
    with pytest.raises(error) as info:
        parse_module(text)

    err = info.value
    assert isinstance(err, ParseError)
    assert err.line == source
    assert err.line_no == 2
    for name, value in attrs.items():
        assert getattr(err, name) == value
    assert source in str(err)


def test_undeclared_variable():
    tree = parse_module("vertex a = 0 0 0\nvertex b = 1 1 1\ntriangle a b c\n")
    with pytest.raises(UndeclaredVariable) as info:
        type_check(tree)

    err = info.value
    assert isinstance(err, TypeCheckError)
    assert err.name == "c"
    assert err.line == "triangle a b c"
    assert err.line_no == 2
    assert "cannot find variable `c` in this scope" in str(err)


def test_use_before_declaration():
    tree = parse_module("line a b\nvertex a = 0 0 0\nvertex b = 1 1 1\n")
    with pytest.raises(UndeclaredVariable) as info:
        type_check(tree)
    assert info.value.name == "a"
    assert info.value.line_no == 0
