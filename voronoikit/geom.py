"""Basic plane geometry: points, rectangles, circles, segments and polygons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)


def interpolate(first: Point, second: Point, delta: float) -> Point:
    """Point at fraction ``delta`` of the way from ``first`` to ``second``."""
    return Point(
        first.x + delta * (second.x - first.x),
        first.y + delta * (second.y - first.y),
    )


def compare_by_y_then_x(a, b) -> int:
    """Order two objects with ``x`` and ``y`` attributes by y, then by x.

    Returns -1, 0 or 1.
    """
    if a.y < b.y:
        return -1
    if a.y > b.y:
        return 1
    if a.x < b.x:
        return -1
    if a.x > b.x:
        return 1
    return 0


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its origin and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center: Point
    radius: float


@dataclass(eq=False)
class LineSegment:
    """A segment between two points; either end may be missing."""

    p0: Optional[Point]
    p1: Optional[Point]

    def length(self) -> float:
        """Length of the segment."""
        if self.p0 is None or self.p1 is None:
            raise ValueError("segment has a missing end point")
        return self.p0.distance(self.p1)


def compare_lengths_max(segment0: LineSegment, segment1: LineSegment) -> int:
    """Compare so that longer segments come first: -1, 0 or 1."""
    length0 = segment0.length()
    length1 = segment1.length()
    if length0 < length1:
        return 1
    if length0 > length1:
        return -1
    return 0


def compare_lengths(segment0: LineSegment, segment1: LineSegment) -> int:
    """Compare so that shorter segments come first: -1, 0 or 1."""
    return -compare_lengths_max(segment0, segment1)


class Winding(Enum):
    """Orientation of a closed polygon."""

    NONE = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


class Polygon:
    """A closed polygon given by its vertices in order."""

    def __init__(self, vertices: Iterable[Point]) -> None:
        self.vertices = tuple(vertices)

    def signed_double_area(self) -> float:
        """Twice the signed area; positive for counter-clockwise order."""
        verts = self.vertices
        if not verts:
            return 0.0
        return sum(
            point.x * nxt.y - nxt.x * point.y
            for point, nxt in zip(verts, verts[1:] + verts[:1])
        )

    def area(self) -> float:
        """Unsigned area."""
        return abs(self.signed_double_area() * 0.5)

    def winding(self) -> Winding:
        """Orientation of the vertex order."""
        doubled = self.signed_double_area()
        if doubled < 0:
            return Winding.CLOCKWISE
        if doubled > 0:
            return Winding.COUNTERCLOCKWISE
        return Winding.NONE