#
# PROJECT: termesh
# MODULE: termesh/stl.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
STL mesh decoding.

Binary layout: an 80-byte header, a little-endian u32 facet count, then per
facet a normal and three vertices (3 x f32 each) followed by a u16 attribute
byte count; the attribute bytes are skipped.
"""

import copy
import io
import logging
import struct
from dataclasses import dataclass, field
from typing import List

from .math_utils import Vec3

LOGGER = logging.getLogger(__name__)

HEADER_SIZE = 80
_COUNT = struct.Struct('<I')
_FACET = struct.Struct('<12f')
_ATTR_COUNT = struct.Struct('<H')


class StlError(ValueError):
    """Malformed or truncated STL data."""


@dataclass
class Facet:
    normal: Vec3
    vertices: List[Vec3]


@dataclass
class Stl:
    header: bytes = bytes(HEADER_SIZE)
    facets: List[Facet] = field(default_factory=list)

    def vertices(self):
        for f in self.facets:
            yield from f.vertices

    # Vec3 mutates in place, so the same iterator serves as the mutable view.
    vertices_mut = vertices

    def clone(self) -> 'Stl':
        return copy.deepcopy(self)

    @classmethod
    def parse_binary(cls, stream) -> 'Stl':
        header = _read_exact(stream, HEADER_SIZE, "header")
        (ntriangles,) = _COUNT.unpack(_read_exact(stream, _COUNT.size, "facet count"))

        facets = []
        for i in range(ntriangles):
            v = _FACET.unpack(_read_exact(stream, _FACET.size, f"facet {i}"))
            (attr_count,) = _ATTR_COUNT.unpack(
                _read_exact(stream, _ATTR_COUNT.size, f"facet {i} attribute count"))
            if attr_count:
                _read_exact(stream, attr_count, f"facet {i} attributes")

            facets.append(Facet(
                normal=Vec3(v[0], v[1], v[2]),
                vertices=[Vec3(v[3], v[4], v[5]),
                          Vec3(v[6], v[7], v[8]),
                          Vec3(v[9], v[10], v[11])],
            ))

        LOGGER.debug("decoded %d binary STL facets", len(facets))
        return cls(header=header, facets=facets)

    @classmethod
    def parse_ascii(cls, text: str) -> 'Stl':
        facets = []
        normal = None
        current = []

        for raw_line in text.splitlines():
            parts = raw_line.split()
            if not parts:
                continue
            try:
                if parts[0] == 'facet' and len(parts) >= 5 and parts[1] == 'normal':
                    normal = Vec3(float(parts[2]), float(parts[3]), float(parts[4]))
                elif parts[0] == 'vertex' and len(parts) >= 4:
                    current.append(Vec3(float(parts[1]), float(parts[2]), float(parts[3])))
            except ValueError as e:
                raise StlError(f"bad number in line {raw_line.strip()!r}") from e
            if parts[0] == 'endfacet':
                if len(current) != 3:
                    raise StlError(f"facet with {len(current)} vertices")
                facets.append(Facet(normal=normal or Vec3(0, 0, 0), vertices=current))
                normal = None
                current = []

        LOGGER.debug("decoded %d ASCII STL facets", len(facets))
        return cls(header=text[:HEADER_SIZE].encode('ascii', 'replace'), facets=facets)

    @classmethod
    def load(cls, path) -> 'Stl':
        """Read an STL file, ASCII if it looks like one, binary otherwise."""
        with open(path, 'rb') as f:
            data = f.read()

        if data[:5].lower() == b"solid":
            try:
                stl = cls.parse_ascii(data.decode('utf-8'))
                if stl.facets:
                    return stl
            except (UnicodeDecodeError, StlError):
                # binary files are allowed to start with "solid" too
                LOGGER.debug("%s is not ASCII STL, trying binary", path)

        return cls.parse_binary(io.BytesIO(data))


def _read_exact(stream, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise StlError(f"truncated STL: expected {size} bytes of {what}, got {len(data)}")
    return data
