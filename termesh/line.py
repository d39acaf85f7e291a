#
# PROJECT: termesh
# MODULE: termesh/line.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import round_half_away


class Line:
    """
    DDA stepper between two points.

    Yields evenly spaced points from ``p0`` to ``p1`` inclusive. Points may be
    2-D ``(x, y)`` or 3-D ``(x, y, z)``; every yielded point is a tuple with
    the dimensionality of ``p0``. The iterator is one-shot: build a new Line
    to walk the same edge again.
    """
    __slots__ = ('_cur', '_inc', '_remaining')

    def __init__(self, p0, p1):
        start = tuple(float(c) for c in p0)
        delta = tuple(float(b) - a for a, b in zip(start, p1))

        steps = max(abs(d) for d in delta)
        self._cur = start
        if steps == 0:
            # start == end: a single point
            self._inc = delta
            self._remaining = 1
        else:
            self._inc = tuple(d / steps for d in delta)
            self._remaining = int(round_half_away(steps)) + 1

    def __iter__(self):
        return self

    def __next__(self):
        if self._remaining == 0:
            raise StopIteration
        point = self._cur
        self._cur = tuple(c + i for c, i in zip(self._cur, self._inc))
        self._remaining -= 1
        return point

    def __length_hint__(self):
        return self._remaining
