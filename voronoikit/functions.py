"""Selections and conversions over lists of edges."""

from __future__ import annotations

from typing import Iterable

from .edge import Edge
from .geom import LineSegment, Point
from .lr import Side


def delaunay_lines_for_edges(edges: Iterable[Edge]) -> list[LineSegment]:
    """The Delaunay segment joining the two sites of each edge."""
    return [edge.delaunay_line() for edge in edges]


def visible_line_segments(edges: Iterable[Edge]) -> list[LineSegment]:
    """The clipped Voronoi segment of each visible edge."""
    return [
        LineSegment(edge.clipped_ends[Side.LEFT], edge.clipped_ends[Side.RIGHT])
        for edge in edges
        if edge.visible()
    ]


def select_edges_for_site_point(coord: Point, edges: Iterable[Edge]) -> list[Edge]:
    """Edges with a site at ``coord``."""
    return [
        edge
        for edge in edges
        if (edge.left_site is not None and edge.left_site.coord == coord)
        or (edge.right_site is not None and edge.right_site.coord == coord)
    ]


def select_non_intersecting_edges(edges: Iterable[Edge]) -> list[Edge]:
    """Edges not blocked by a keep-out mask; with no mask, all of them."""
    return list(edges)