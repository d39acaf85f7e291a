#
# PROJECT: termesh
# MODULE: termesh/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Sparse Braille dot canvas with per-cell depth.

Each output character is a 2x4 block of dots. Unicode lays the Braille block
out so that OR-ing the dot bits of a cell gives the code point offset of the
composed glyph from U+2800, so a cell is stored as an 8-bit mask plus the
smallest z of any dot drawn into it.
"""

from bisect import bisect_left, insort
from collections import namedtuple

from .color import ANSI_RESET, ansi_fg, gray_index
from .line import Line
from .math_utils import round_half_away

BRAILLE_PATTERN_BLANK = 0x2800

# Braille dot mapping for a 2x4 cell, indexed [y % 4][x % 2]
#  1 4
#  2 5
#  3 6
#  7 8
BRAILLE_OFFSET_MAP = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

Bounds = namedtuple('Bounds', ['min_row', 'max_row', 'min_col', 'max_col'])


def cell_pos(x: float, y: float):
    """Quantize screen coordinates to (row, col, dot_bit)."""
    rx = int(round_half_away(x))
    ry = int(round_half_away(y))
    return ry // 4, rx // 2, BRAILLE_OFFSET_MAP[ry % 4][rx % 2]


def _z_of(p) -> float:
    return float(p[2]) if len(p) > 2 else 0.0


class Pixel:
    """One occupied cell: composed dot mask and nearest depth."""
    __slots__ = ('mask', 'z')

    def __init__(self, mask: int, z: float):
        self.mask = mask
        self.z = z

    def __repr__(self):
        return f"Pixel(mask=0x{self.mask:02x}, z={self.z:.3f})"

    @property
    def glyph(self) -> str:
        return chr(BRAILLE_PATTERN_BLANK + self.mask)


class _SortedMap:
    """dict with its keys also kept in a sorted list for ordered walks and O(1) min/max."""
    __slots__ = ('_data', '_keys')

    def __init__(self):
        self._data = {}
        self._keys = []

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data

    def __iter__(self):
        return iter(self._keys)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def insert(self, key, value):
        if key not in self._data:
            insort(self._keys, key)
        self._data[key] = value

    def pop(self, key):
        value = self._data.pop(key)
        del self._keys[bisect_left(self._keys, key)]
        return value

    def first(self):
        return self._keys[0]

    def last(self):
        return self._keys[-1]

    def clear(self):
        self._data.clear()
        self._keys.clear()


class Canvas:
    """
    Depth-aware sparse dot grid.

    Storage is row index -> column index -> Pixel, both levels ordered. A
    second ordered map counts how many rows hold each column so the column
    extent of the whole canvas is available without scanning rows.

    ``zmin``/``zmax`` track the depth range of every dot ever set and are
    used to normalize cell depth for shading. ``clear()`` keeps that range
    unless asked to reset it, so shading stays stable while a model rotates.
    """
    __slots__ = ('_rows', '_cols', 'zmin', 'zmax')

    def __init__(self):
        self._rows = _SortedMap()   # row -> _SortedMap(col -> Pixel)
        self._cols = _SortedMap()   # col -> number of rows holding that column
        self.zmin = None
        self.zmax = None

    def clear(self, reset_zrange: bool = False):
        self._rows.clear()
        self._cols.clear()
        if reset_zrange:
            self.zmin = None
            self.zmax = None

    # ── Dots ──────────────────────────────────────────────────────────────

    def set(self, x: float, y: float, z: float = 0.0):
        row, col, bit = cell_pos(x, y)

        cols = self._rows.get(row)
        if cols is None:
            cols = _SortedMap()
            self._rows.insert(row, cols)

        pixel = cols.get(col)
        if pixel is None:
            cols.insert(col, Pixel(bit, z))
            self._cols.insert(col, self._cols.get(col, 0) + 1)
        else:
            pixel.mask |= bit
            if z < pixel.z:
                pixel.z = z

        if self.zmin is None or z < self.zmin:
            self.zmin = z
        if self.zmax is None or z > self.zmax:
            self.zmax = z

    def unset(self, x: float, y: float):
        """Clear one dot. The cell's z is left alone."""
        row, col, bit = cell_pos(x, y)

        cols = self._rows.get(row)
        if cols is None:
            return
        pixel = cols.get(col)
        if pixel is not None:
            pixel.mask &= ~bit
            if pixel.mask == 0:
                cols.pop(col)
                self._release_col(col)
        if not cols:
            self._rows.pop(row)

    def is_set(self, x: float, y: float) -> bool:
        row, col, bit = cell_pos(x, y)
        cols = self._rows.get(row)
        if cols is None:
            return False
        pixel = cols.get(col)
        return pixel is not None and bool(pixel.mask & bit)

    def _release_col(self, col):
        refs = self._cols.get(col) - 1
        if refs:
            self._cols.insert(col, refs)
        else:
            self._cols.pop(col)

    def cell(self, row: int, col: int):
        """Stored Pixel at a cell index, or None."""
        cols = self._rows.get(row)
        return cols.get(col) if cols is not None else None

    @property
    def row_indices(self):
        return list(self._rows)

    # ── Primitives ────────────────────────────────────────────────────────

    def line(self, p0, p1):
        """Draw from p0 to p1; points are (x, y) or (x, y, z)."""
        p0, p1 = tuple(p0), tuple(p1)
        start = (round_half_away(p0[0]), round_half_away(p0[1])) + tuple(p0[2:3])
        end = (round_half_away(p1[0]), round_half_away(p1[1])) + tuple(p1[2:3])
        for p in Line(start, end):
            self.set(p[0], p[1], _z_of(p))

    def triangle(self, p0, p1, p2):
        """Wireframe triangle, every edge at the mean vertex depth."""
        midz = (_z_of(p0) + _z_of(p1) + _z_of(p2)) / 3.0
        a = (p0[0], p0[1], midz)
        b = (p1[0], p1[1], midz)
        c = (p2[0], p2[1], midz)
        self.line(a, b)
        self.line(b, c)
        self.line(c, a)

    def fill_triangle(self, p0, p1, p2):
        """
        Approximate flat-shaded fill.

        The two edges leaving the top vertex are walked in lock-step and each
        pair of points is joined, then the same from the bottom vertex. This
        follows edge parameter, not scanlines, so thin or lopsided triangles
        can be left partly open; the wireframe drawn last keeps the outline
        closed.
        """
        if p0[1] < p1[1]: p0, p1 = p1, p0
        if p0[1] < p2[1]: p0, p2 = p2, p0
        if p1[1] < p2[1]: p1, p2 = p2, p1

        midz = (_z_of(p0) + _z_of(p1) + _z_of(p2)) / 3.0
        top = (p0[0], p0[1])
        mid = (p1[0], p1[1])
        bottom = (p2[0], p2[1])

        for a, b in zip(Line(top, mid), Line(top, bottom)):
            self.line((a[0], a[1], midz), (b[0], b[1], midz))

        for a, b in zip(Line(bottom, top), Line(bottom, mid)):
            self.line((a[0], a[1], midz), (b[0], b[1], midz))

        self.triangle(p0, p1, p2)

    # ── Queries & serialization ───────────────────────────────────────────

    def dimensions(self):
        """Bounds of all stored cells, or None on an empty canvas."""
        if not self._rows:
            return None
        return Bounds(self._rows.first(), self._rows.last(),
                      self._cols.first(), self._cols.last())

    def depth(self, z: float) -> float:
        """Normalize z into [0, 1] against the running depth range (0 = nearest)."""
        if self.zmin is None or self.zmax == self.zmin:
            return 0.0
        return (z - self.zmin) / (self.zmax - self.zmin)

    def _cells(self, cols, start: int, stop: int):
        blank = chr(BRAILLE_PATTERN_BLANK)
        out = []
        for c in range(start, stop + 1):
            pixel = cols.get(c) if cols is not None else None
            if pixel is None:
                out.append((blank, None))
            else:
                out.append((pixel.glyph, self.depth(pixel.z)))
        return out

    def rows(self, with_color: bool = False):
        """
        Serialize every row of the occupied area.

        All rows start at the canvas-wide minimum column so glyphs stay
        aligned; each row stops at its own last stored column. Rows with no
        cells come out as empty strings.
        """
        bounds = self.dimensions()
        if bounds is None:
            return []

        lines = []
        for r in range(bounds.min_row, bounds.max_row + 1):
            cols = self._rows.get(r)
            if cols is None:
                lines.append("")
            else:
                lines.append(_format(self._cells(cols, bounds.min_col, cols.last()), with_color))
        return lines

    def frame_cells(self, min_row: int, max_row: int, min_col: int, max_col: int):
        """
        (glyph, depth) grid of a fixed-size window; depth is None for blanks.

        Along an axis where the window is larger than the occupied area, the
        content is centered in it and the requested start is ignored.
        """
        bounds = self.dimensions()
        height = max_row - min_row + 1
        width = max_col - min_col + 1
        if bounds is None or height <= 0 or width <= 0:
            return []

        row_start = _window_start(min_row, height, bounds.min_row, bounds.max_row)
        col_start = _window_start(min_col, width, bounds.min_col, bounds.max_col)
        return [self._cells(self._rows.get(r), col_start, col_start + width - 1)
                for r in range(row_start, row_start + height)]

    def frame(self, with_color: bool, min_row: int, max_row: int, min_col: int, max_col: int):
        """Fixed-size window serialized as text lines of equal glyph count."""
        return [_format(cells, with_color)
                for cells in self.frame_cells(min_row, max_row, min_col, max_col)]


def _window_start(start: int, size: int, occ_min: int, occ_max: int) -> int:
    occupied = occ_max - occ_min + 1
    if size > occupied:
        return occ_min - (size - occupied) // 2
    return start


def _format(cells, with_color: bool) -> str:
    if not with_color:
        return ''.join(glyph for glyph, _ in cells)

    parts = []
    colored = False
    for glyph, depth in cells:
        if depth is None:
            parts.append(glyph)
        else:
            parts.append(ansi_fg(gray_index(depth)) + glyph)
            colored = True
    if colored:
        parts.append(ANSI_RESET)
    return ''.join(parts)
