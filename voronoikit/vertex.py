"""Voronoi vertices and the intersection of bisecting edges."""

from __future__ import annotations

import itertools
import math
from typing import Optional

from .geom import Point, compare_by_y_then_x
from .lr import Side

_vertex_counter = itertools.count()


class Vertex:
    """A vertex of the Voronoi diagram."""

    __slots__ = ("coord", "index")

    def __init__(self, x: float, y: float) -> None:
        self.coord = Point(x, y)
        self.index: Optional[int] = None

    @property
    def x(self) -> float:
        return self.coord.x

    @property
    def y(self) -> float:
        return self.coord.y

    def dist(self, other) -> float:
        """Distance to anything that has a ``coord`` point."""
        return other.coord.distance(self.coord)

    def set_index(self) -> None:
        """Give the vertex the next number in creation order."""
        self.index = next(_vertex_counter)

    def __repr__(self) -> str:
        return f"Vertex({self.x!r}, {self.y!r})"


VERTEX_AT_INFINITY = Vertex(math.nan, math.nan)


def create_vertex(x: float, y: float) -> Vertex:
    """Make a vertex; NaN coordinates give the vertex at infinity."""
    if math.isnan(x) or math.isnan(y):
        return VERTEX_AT_INFINITY
    return Vertex(x, y)


def intersect(halfedge0, halfedge1) -> Optional[Vertex]:
    """Intersection of the edges of two halfedges, or None if there is none."""
    edge0 = halfedge0.edge
    edge1 = halfedge1.edge
    if edge0 is None or edge1 is None:
        return None
    if edge0.right_site is edge1.right_site:
        return None

    determinant = edge0.a * edge1.b - edge0.b * edge1.a
    if -1.0e-10 < determinant < 1.0e-10:
        # the edges are parallel
        return None

    intersection_x = (edge0.c * edge1.b - edge1.c * edge0.b) / determinant
    intersection_y = (edge1.c * edge0.a - edge0.c * edge1.a) / determinant

    if compare_by_y_then_x(edge0.right_site, edge1.right_site) < 0:
        halfedge, edge = halfedge0, edge0
    else:
        halfedge, edge = halfedge1, edge1

    right_of_site = intersection_x >= edge.right_site.x
    if (right_of_site and halfedge.side is Side.LEFT) or (
        not right_of_site and halfedge.side is Side.RIGHT
    ):
        return None

    return create_vertex(intersection_x, intersection_y)