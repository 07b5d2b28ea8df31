"""Edges of the Voronoi diagram and their Delaunay duals."""

from __future__ import annotations

import itertools
from typing import Optional

from .geom import LineSegment, Point, Rectangle
from .lr import Side
from .vertex import Vertex

_edge_counter = itertools.count()


class Edge:
    """A bisector between two sites.

    The segment connecting the two sites is part of the Delaunay
    triangulation; the segment connecting the two vertices is part of the
    Voronoi diagram. The line of the edge is ``a*x + b*y = c``.
    """

    def __init__(self) -> None:
        self.index = next(_edge_counter)
        self.a = 0.0
        self.b = 0.0
        self.c = 0.0
        # if one of them is None, the edge extends to infinity
        self.left_vertex: Optional[Vertex] = None
        self.right_vertex: Optional[Vertex] = None
        # ends of the visible portion, indexed by Side, once clipped
        self.clipped_ends: list[Optional[Point]] = [None, None]
        self.left_site = None
        self.right_site = None

    def delaunay_line(self) -> LineSegment:
        """Segment connecting the two sites this edge bisects."""
        return LineSegment(self.left_site.coord, self.right_site.coord)

    def voronoi_edge(self) -> LineSegment:
        """Visible part of the edge; both ends are None if it is not visible."""
        if not self.visible():
            return LineSegment(None, None)
        return LineSegment(self.clipped_ends[Side.LEFT], self.clipped_ends[Side.RIGHT])

    def vertex(self, side: Side) -> Optional[Vertex]:
        return self.left_vertex if side is Side.LEFT else self.right_vertex

    def set_vertex(self, side: Side, vertex: Optional[Vertex]) -> None:
        if side is Side.LEFT:
            self.left_vertex = vertex
        else:
            self.right_vertex = vertex

    def is_part_of_convex_hull(self) -> bool:
        return self.left_vertex is None or self.right_vertex is None

    def sites_distance(self) -> float:
        return self.left_site.coord.distance(self.right_site.coord)

    def visible(self) -> bool:
        """False unless some part of the edge lies within the clip bounds."""
        return (
            self.clipped_ends[Side.LEFT] is not None
            and self.clipped_ends[Side.RIGHT] is not None
        )

    def site(self, side: Side):
        return self.left_site if side is Side.LEFT else self.right_site

    def clip_vertices(self, bounds: Rectangle) -> None:
        """Clip the edge to ``bounds``; leaves it invisible if wholly outside."""
        xmin, ymin = bounds.x, bounds.y
        xmax, ymax = bounds.right, bounds.bottom
        a, b, c = self.a, self.b, self.c

        if a == 1.0 and b >= 0.0:
            vertex0, vertex1 = self.right_vertex, self.left_vertex
        else:
            vertex0, vertex1 = self.left_vertex, self.right_vertex

        if a == 1.0:
            y0 = ymin
            if vertex0 is not None and vertex0.y > ymin:
                y0 = vertex0.y
            if y0 > ymax:
                return
            x0 = c - b * y0

            y1 = ymax
            if vertex1 is not None and vertex1.y < ymax:
                y1 = vertex1.y
            if y1 < ymin:
                return
            x1 = c - b * y1

            if (x0 > xmax and x1 > xmax) or (x0 < xmin and x1 < xmin):
                return

            if x0 > xmax:
                x0 = xmax
                y0 = (c - x0) / b
            elif x0 < xmin:
                x0 = xmin
                y0 = (c - x0) / b

            if x1 > xmax:
                x1 = xmax
                y1 = (c - x1) / b
            elif x1 < xmin:
                x1 = xmin
                y1 = (c - x1) / b
        else:
            x0 = xmin
            if vertex0 is not None and vertex0.x > xmin:
                x0 = vertex0.x
            if x0 > xmax:
                return
            y0 = c - a * x0

            x1 = xmax
            if vertex1 is not None and vertex1.x < xmax:
                x1 = vertex1.x
            if x1 < xmin:
                return
            y1 = c - a * x1

            if (y0 > ymax and y1 > ymax) or (y0 < ymin and y1 < ymin):
                return

            if y0 > ymax:
                y0 = ymax
                x0 = (c - y0) / a
            elif y0 < ymin:
                y0 = ymin
                x0 = (c - y0) / a

            if y1 > ymax:
                y1 = ymax
                x1 = (c - y1) / a
            elif y1 < ymin:
                y1 = ymin
                x1 = (c - y1) / a

        if vertex0 is self.left_vertex:
            self.clipped_ends[Side.LEFT] = Point(x0, y0)
            self.clipped_ends[Side.RIGHT] = Point(x1, y1)
        else:
            self.clipped_ends[Side.RIGHT] = Point(x0, y0)
            self.clipped_ends[Side.LEFT] = Point(x1, y1)

    def __repr__(self) -> str:
        return f"Edge(#{self.index}: {self.a!r}x + {self.b!r}y = {self.c!r})"


DELETED = Edge()


def create_bisecting_edge(site0, site1) -> Edge:
    """Make the edge bisecting two sites and register it with both."""
    dx = site1.x - site0.x
    dy = site1.y - site0.y
    if dx == 0 and dy == 0:
        raise ValueError("cannot bisect two coincident sites")

    edge = Edge()
    edge.left_site = site0
    edge.right_site = site1
    site0.add_edge(edge)
    site1.add_edge(edge)

    c = site0.x * dx + site0.y * dy + (dx * dx + dy * dy) * 0.5
    if abs(dx) > abs(dy):
        edge.a = 1.0
        edge.b = dy / dx
        edge.c = c / dx
    else:
        edge.b = 1.0
        edge.a = dx / dy
        edge.c = c / dy
    return edge


def compare_sites_distances_max(edge0: Edge, edge1: Edge) -> int:
    """Compare so that edges between farther sites come first."""
    length0 = edge0.sites_distance()
    length1 = edge1.sites_distance()
    if length0 < length1:
        return 1
    if length0 > length1:
        return -1
    return 0


def compare_sites_distances(edge0: Edge, edge1: Edge) -> int:
    """Compare so that edges between nearer sites come first."""
    return -compare_sites_distances_max(edge0, edge1)