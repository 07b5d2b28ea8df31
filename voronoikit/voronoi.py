"""Voronoi diagram and Delaunay triangulation by Fortune's sweep."""

from __future__ import annotations

import math
import random
from typing import Iterable, Optional, Sequence

from .edge import Edge, create_bisecting_edge
from .edge_list import EdgeList
from .edge_reorderer import Criterion, EdgeReorderer
from .functions import (
    delaunay_lines_for_edges,
    select_edges_for_site_point,
    select_non_intersecting_edges,
    visible_line_segments,
)
from .geom import LineSegment, Point, Rectangle, compare_by_y_then_x
from .halfedge import Halfedge
from .kruskal import KruskalType, kruskal
from .lr import Side
from .priority_queue import HalfedgePriorityQueue
from .site import Site
from .site_list import SiteList
from .vertex import Vertex, intersect


def _left_region(halfedge: Halfedge, bottom_most: Site) -> Site:
    if halfedge.edge is None:
        return bottom_most
    return halfedge.edge.site(halfedge.side)


def _right_region(halfedge: Halfedge, bottom_most: Site) -> Site:
    if halfedge.edge is None:
        return bottom_most
    return halfedge.edge.site(halfedge.side.other())


def _schedule(
    heap: HalfedgePriorityQueue, halfedge: Halfedge, vertex: Vertex, site: Site
) -> None:
    heap.remove(halfedge)
    halfedge.vertex = vertex
    halfedge.ystar = vertex.y + site.dist(vertex)
    heap.insert(halfedge)


class Voronoi:
    """The Voronoi diagram of a set of points, clipped to ``plot_bounds``."""

    def __init__(
        self,
        points: Iterable[Point],
        colors: Optional[Sequence[int]],
        plot_bounds: Rectangle,
    ) -> None:
        self.plot_bounds = plot_bounds
        self.edges: list[Edge] = []
        self._sites = SiteList()
        self._sites_by_location: dict[Point, Site] = {}
        for index, point in enumerate(points):
            color = colors[index] if colors is not None else 0
            site = Site(point, index, random.random() * 100, color)
            self._sites.push(site)
            self._sites_by_location[point] = site
        self._fortunes_algorithm()

    def region(self, p: Point) -> list[Point]:
        """Corners of the region of the site at ``p``; empty if there is none."""
        site = self._sites_by_location.get(p)
        if site is None:
            return []
        return site.region(self.plot_bounds)

    def neighbor_sites_for_site(self, coord: Point) -> list[Point]:
        site = self._sites_by_location.get(coord)
        if site is None:
            return []
        return [neighbor.coord for neighbor in site.neighbor_sites()]

    def voronoi_boundary_for_site(self, coord: Point) -> list[LineSegment]:
        return visible_line_segments(select_edges_for_site_point(coord, self.edges))

    def delaunay_lines_for_site(self, coord: Point) -> list[LineSegment]:
        return delaunay_lines_for_edges(select_edges_for_site_point(coord, self.edges))

    def voronoi_diagram(self) -> list[LineSegment]:
        return visible_line_segments(self.edges)

    def delaunay_triangulation(self) -> list[LineSegment]:
        return delaunay_lines_for_edges(select_non_intersecting_edges(self.edges))

    def hull(self) -> list[LineSegment]:
        return delaunay_lines_for_edges(self._hull_edges())

    def hull_points_in_order(self) -> list[Point]:
        """Sites on the convex hull, in traversal order."""
        hull_edges = self._hull_edges()
        if not hull_edges:
            return []
        reorderer = EdgeReorderer(hull_edges, Criterion.SITE)
        return [
            edge.site(orientation).coord
            for edge, orientation in zip(reorderer.edges, reorderer.edge_orientations)
        ]

    def spanning_tree(self, kind: KruskalType = KruskalType.MINIMUM) -> list[LineSegment]:
        segments = delaunay_lines_for_edges(select_non_intersecting_edges(self.edges))
        return kruskal(segments, kind)

    def regions(self) -> list[list[Point]]:
        return self._sites.regions(self.plot_bounds)

    def regions_prepare(self) -> None:
        self._sites.regions_prepare(self.plot_bounds)

    def site_colors(self) -> list[int]:
        return self._sites.site_colors()

    def site_coords(self) -> list[Point]:
        return self._sites.site_coords()

    def _hull_edges(self) -> list[Edge]:
        return [edge for edge in self.edges if edge.is_part_of_convex_hull()]

    def _fortunes_algorithm(self) -> None:
        data_bounds = self._sites.sites_bounds()
        sqrt_nsites = int(math.sqrt(len(self._sites) + 4))
        heap = HalfedgePriorityQueue(data_bounds.y, data_bounds.height, sqrt_nsites)
        edge_list = EdgeList(data_bounds.x, data_bounds.width, sqrt_nsites)

        bottom_most = self._sites.next_site()
        new_site = self._sites.next_site()

        while True:
            new_int_star = None if heap.empty() else heap.min()

            if new_site is not None and (
                new_int_star is None or compare_by_y_then_x(new_site, new_int_star) < 0
            ):
                # the new site is smallest
                lbnd = edge_list.edge_list_left_neighbor(new_site.coord)
                rbnd = lbnd.edge_list_right_neighbor
                bottom_site = _right_region(lbnd, bottom_most)

                edge = create_bisecting_edge(bottom_site, new_site)
                self.edges.append(edge)

                bisector = Halfedge(edge, Side.LEFT)
                edge_list.insert(lbnd, bisector)
                vertex = intersect(lbnd, bisector)
                if vertex is not None:
                    _schedule(heap, lbnd, vertex, new_site)

                lbnd = bisector
                bisector = Halfedge(edge, Side.RIGHT)
                edge_list.insert(lbnd, bisector)
                vertex = intersect(bisector, rbnd)
                if vertex is not None:
                    _schedule(heap, bisector, vertex, new_site)

                new_site = self._sites.next_site()
            elif not heap.empty():
                # the intersection is smallest
                lbnd = heap.extract_min()
                llbnd = lbnd.edge_list_left_neighbor
                rbnd = lbnd.edge_list_right_neighbor
                rrbnd = rbnd.edge_list_right_neighbor
                bottom_site = _left_region(lbnd, bottom_most)
                top_site = _right_region(rbnd, bottom_most)

                v = lbnd.vertex
                v.set_index()
                lbnd.edge.set_vertex(lbnd.side, v)
                rbnd.edge.set_vertex(rbnd.side, v)
                edge_list.remove(lbnd)
                heap.remove(rbnd)
                edge_list.remove(rbnd)

                side = Side.LEFT
                if bottom_site.y > top_site.y:
                    bottom_site, top_site = top_site, bottom_site
                    side = Side.RIGHT
                edge = create_bisecting_edge(bottom_site, top_site)
                self.edges.append(edge)
                bisector = Halfedge(edge, side)
                edge_list.insert(llbnd, bisector)
                edge.set_vertex(side.other(), v)

                vertex = intersect(llbnd, bisector)
                if vertex is not None:
                    _schedule(heap, llbnd, vertex, bottom_site)
                vertex = intersect(bisector, rrbnd)
                if vertex is not None:
                    _schedule(heap, bisector, vertex, bottom_site)
            else:
                break

        for edge in self.edges:
            edge.clip_vertices(self.plot_bounds)