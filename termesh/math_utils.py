#
# PROJECT: termesh
# MODULE: termesh/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (Python's round() ties to even)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Vec3:
    """
    3-component point/direction.

    Rotations and scale mutate the vector in place so a scene can be
    transformed through its mutable vertex view; ``+`` and ``*`` return new
    vectors. Use ``copy()`` before mutating a shared value.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        if isinstance(other, tuple) and len(other) == 3:
            return (self.x, self.y, self.z) == other
        return NotImplemented

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def copy(self) -> 'Vec3':
        return Vec3(self.x, self.y, self.z)

    def as_tuple(self):
        return (self.x, self.y, self.z)

    def scale(self, factor: float):
        """Scale all three components by ``factor`` in place."""
        self.x *= factor
        self.y *= factor
        self.z *= factor

    def rotate_x(self, angle: float):
        """Rotate around the X axis by ``angle`` radians, in place."""
        c = math.cos(angle)
        s = math.sin(angle)
        self.y, self.z = self.y * c - self.z * s, self.y * s + self.z * c

    def rotate_y(self, angle: float):
        """Rotate around the Y axis by ``angle`` radians, in place."""
        c = math.cos(angle)
        s = math.sin(angle)
        self.z, self.x = self.z * c - self.x * s, self.z * s + self.x * c

    def rotate_z(self, angle: float):
        """Rotate around the Z axis by ``angle`` radians, in place."""
        c = math.cos(angle)
        s = math.sin(angle)
        self.x, self.y = self.x * c - self.y * s, self.x * s + self.y * c

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
