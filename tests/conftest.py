import struct

import pytest

CUBE_HEADER = b"Exported from Blender-2.79 (sub 0)".ljust(80, b"\0")

CUBE_FACETS = [
    ((-1.0, 0.0, 0.0), [(-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0)]),
    ((-1.0, 0.0, 0.0), [(-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0)]),
    ((0.0, 1.0, 0.0), [(-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0)]),
    ((0.0, 1.0, 0.0), [(1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0)]),
    ((1.0, 0.0, 0.0), [(1.0, 1.0, -1.0), (1.0, 1.0, 1.0), (1.0, -1.0, 1.0)]),
    ((1.0, 0.0, 0.0), [(1.0, -1.0, 1.0), (1.0, -1.0, -1.0), (1.0, 1.0, -1.0)]),
    ((0.0, -1.0, 0.0), [(-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0)]),
    ((0.0, -1.0, 0.0), [(1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (-1.0, -1.0, 1.0)]),
    ((0.0, 0.0, -1.0), [(1.0, -1.0, -1.0), (-1.0, -1.0, -1.0), (-1.0, 1.0, -1.0)]),
    ((0.0, 0.0, -1.0), [(-1.0, 1.0, -1.0), (1.0, 1.0, -1.0), (1.0, -1.0, -1.0)]),
    ((0.0, 0.0, 1.0), [(1.0, 1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, -1.0, 1.0)]),
    ((0.0, 0.0, 1.0), [(-1.0, -1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0)]),
]


def build_binary_stl(facets, header=CUBE_HEADER, attributes=b""):
    data = bytearray(header)
    data += struct.pack('<I', len(facets))
    for normal, vertices in facets:
        data += struct.pack('<3f', *normal)
        for v in vertices:
            data += struct.pack('<3f', *v)
        data += struct.pack('<H', len(attributes))
        data += attributes
    return bytes(data)


@pytest.fixture
def cube_bytes():
    return build_binary_stl(CUBE_FACETS)


@pytest.fixture
def cube_file(tmp_path, cube_bytes):
    path = tmp_path / "cube.stl"
    path.write_bytes(cube_bytes)
    return path


SIMPLE_SOURCE = """
vertex v1 = 3 2 1
vertex v2 = 1 2 3
vertex v3 = 0 0 0
vertex v4 = 9 9 9

line v1 v2
triangle v2 v3 v4
"""


@pytest.fixture
def simple_source_file(tmp_path):
    path = tmp_path / "simple.mesh"
    path.write_text(SIMPLE_SOURCE, encoding="utf-8")
    return path
