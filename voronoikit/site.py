"""Input sites of the diagram and the regions they own."""

from __future__ import annotations

from enum import IntFlag
from functools import cmp_to_key
from typing import Optional

from .edge import Edge, compare_sites_distances
from .edge_reorderer import Criterion, EdgeReorderer
from .geom import Point, Polygon, Rectangle, Winding
from .lr import Side

EPSILON = 0.005


class BoundsCheck(IntFlag):
    """Which borders of a rectangle a point lies on."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8


def check_bounds(point: Point, bounds: Rectangle) -> BoundsCheck:
    """Flags for each border line of ``bounds`` that ``point`` lies on."""
    value = BoundsCheck.NONE
    if point.x == bounds.left:
        value |= BoundsCheck.LEFT
    if point.x == bounds.right:
        value |= BoundsCheck.RIGHT
    if point.y == bounds.top:
        value |= BoundsCheck.TOP
    if point.y == bounds.bottom:
        value |= BoundsCheck.BOTTOM
    return value


def close_enough(p0: Point, p1: Point) -> bool:
    """Whether two points are near enough to count as one."""
    return p0.distance(p1) < EPSILON


def sort_sites(sites: list) -> None:
    """Sort sites in place on y, then x, renumbering them to match."""
    indices = sorted(site.index for site in sites)
    sites.sort(key=lambda site: (site.y, site.x))
    for site, index in zip(sites, indices):
        site.index = index


def _corners_between(right_point: Point, new_point: Point, bounds: Rectangle) -> list:
    """Corners of ``bounds`` that join two points on different borders."""
    right_check = check_bounds(right_point, bounds)
    new_check = check_bounds(new_point, bounds)
    B = BoundsCheck

    if right_check & B.RIGHT:
        px = bounds.right
        if new_check & B.BOTTOM:
            return [Point(px, bounds.bottom)]
        if new_check & B.TOP:
            return [Point(px, bounds.top)]
        if new_check & B.LEFT:
            if right_point.y - bounds.y + new_point.y - bounds.y < bounds.height:
                py = bounds.top
            else:
                py = bounds.bottom
            return [Point(px, py), Point(bounds.left, py)]
    elif right_check & B.LEFT:
        px = bounds.left
        if new_check & B.BOTTOM:
            return [Point(px, bounds.bottom)]
        if new_check & B.TOP:
            return [Point(px, bounds.top)]
        if new_check & B.RIGHT:
            if right_point.y - bounds.y + new_point.y - bounds.y < bounds.height:
                py = bounds.top
            else:
                py = bounds.bottom
            return [Point(px, py), Point(bounds.right, py)]
    elif right_check & B.TOP:
        py = bounds.top
        if new_check & B.RIGHT:
            return [Point(bounds.right, py)]
        if new_check & B.LEFT:
            return [Point(bounds.left, py)]
        if new_check & B.BOTTOM:
            if right_point.x - bounds.x + new_point.x - bounds.x < bounds.width:
                px = bounds.left
            else:
                px = bounds.right
            return [Point(px, py), Point(px, bounds.bottom)]
    elif right_check & B.BOTTOM:
        py = bounds.bottom
        if new_check & B.RIGHT:
            return [Point(bounds.right, py)]
        if new_check & B.LEFT:
            return [Point(bounds.left, py)]
        if new_check & B.TOP:
            if right_point.x - bounds.x + new_point.x - bounds.x < bounds.width:
                px = bounds.left
            else:
                px = bounds.right
            return [Point(px, py), Point(px, bounds.top)]
    return []


class Site:
    """An input point together with the edges bounding its Voronoi region."""

    def __init__(
        self, coord: Point, index: int, weight: float = 0.0, color: int = 0
    ) -> None:
        self.coord = coord
        self.index = index
        self.weight = weight
        self.color = color
        self.edges: list[Edge] = []
        # which end of each edge hooks up with the previous edge in edges
        self.edge_orientations: list[Side] = []
        self._edge_reordered = False
        self._region: list[Point] = []

    @property
    def x(self) -> float:
        return self.coord.x

    @property
    def y(self) -> float:
        return self.coord.y

    def dist(self, other) -> float:
        """Distance to anything that has a ``coord`` point."""
        return other.coord.distance(self.coord)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def nearest_edge(self) -> Edge:
        """The edge shared with the nearest neighbouring site."""
        if not self.edges:
            raise ValueError("site has no edges")
        self.edges.sort(key=cmp_to_key(compare_sites_distances))
        return self.edges[0]

    def neighbor_sites(self) -> list:
        """Sites sharing an edge with this one, in edge traversal order."""
        if not self.edges:
            return []
        if not self._edge_reordered:
            self._reorder_edges()
        return [self._neighbor_site(edge) for edge in self.edges]

    def region_prepare(self, clipping_bounds: Rectangle) -> None:
        """Compute the region clipped to ``clipping_bounds``, once."""
        if self._edge_reordered:
            return
        self._reorder_edges()
        self._region = self._clip_to_bounds(clipping_bounds)
        if Polygon(self._region).winding() is Winding.CLOCKWISE:
            self._region.reverse()

    def region(self, clipping_bounds: Rectangle) -> list[Point]:
        """Counter-clockwise corners of the region within the bounds."""
        if not self.edges:
            return []
        self.region_prepare(clipping_bounds)
        return list(self._region)

    def move(self, p: Point) -> None:
        """Move the site to ``p``, forgetting its edges and region."""
        self._clear()
        self.coord = p

    def _clear(self) -> None:
        self.edges = []
        self.edge_orientations = []
        self._region = []
        self._edge_reordered = False

    def _neighbor_site(self, edge: Edge) -> Optional[Site]:
        if self is edge.left_site:
            return edge.right_site
        if self is edge.right_site:
            return edge.left_site
        return None

    def _reorder_edges(self) -> None:
        reorderer = EdgeReorderer(self.edges, Criterion.VERTEX)
        self.edges = reorderer.edges
        self.edge_orientations = reorderer.edge_orientations
        self._edge_reordered = True

    def _clip_to_bounds(self, bounds: Rectangle) -> list[Point]:
        points: list[Point] = []
        first: Optional[int] = None
        for j, edge in enumerate(self.edges):
            if edge is None or not edge.visible():
                continue
            if first is not None:
                self._connect(points, j, bounds)
            else:
                first = j
                orientation = self.edge_orientations[j]
                points.append(edge.clipped_ends[orientation])
                points.append(edge.clipped_ends[orientation.other()])
        # close up the polygon with a corner of the bounds if needed
        if first is not None:
            self._connect(points, first, bounds, closing_up=True)
        return points

    def _connect(
        self, points: list, j: int, bounds: Rectangle, closing_up: bool = False
    ) -> None:
        right_point = points[-1]
        new_edge = self.edges[j]
        new_orientation = self.edge_orientations[j]
        new_point = new_edge.clipped_ends[new_orientation]
        if not close_enough(right_point, new_point):
            # clipped at the bounds; join the borders through corners if needed
            if right_point.x != new_point.x and right_point.y != new_point.y:
                points.extend(_corners_between(right_point, new_point, bounds))
            if closing_up:
                return
            points.append(new_point)
        new_right_point = new_edge.clipped_ends[new_orientation.other()]
        if not close_enough(points[0], new_right_point):
            points.append(new_right_point)

    def __repr__(self) -> str:
        return f"Site(#{self.index} at {self.x!r}, {self.y!r})"


class Triangle:
    """Three sites forming a Delaunay triangle."""

    __slots__ = ("sites",)

    def __init__(self, a: Site, b: Site, c: Site) -> None:
        self.sites = (a, b, c)