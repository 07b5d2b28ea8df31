"""Halfedges: one side of a Voronoi edge, as kept on the sweep line."""

from __future__ import annotations

from typing import Optional

from .geom import Point
from .lr import Side


class Halfedge:
    """One side of an edge, linked into the edge list and priority queue."""

    def __init__(self, edge, side: Side) -> None:
        self.edge = edge
        self.side = side
        self.edge_list_left_neighbor: Optional[Halfedge] = None
        self.edge_list_right_neighbor: Optional[Halfedge] = None
        self.next_in_priority_queue: Optional[Halfedge] = None
        self.vertex = None
        # the vertex's y-coordinate in the transformed Voronoi space
        self.ystar = 0.0

    def is_left_of(self, p: Point) -> bool:
        """Whether this halfedge lies to the left of ``p``."""
        edge = self.edge
        top_site = edge.right_site
        right_of_site = p.x > top_site.x
        if right_of_site and self.side is Side.LEFT:
            return True
        if not right_of_site and self.side is Side.RIGHT:
            return False

        if edge.a == 1.0:
            dyp = p.y - top_site.y
            dxp = p.x - top_site.x
            fast = False
            if (not right_of_site and edge.b < 0.0) or (right_of_site and edge.b >= 0.0):
                above = dyp >= edge.b * dxp
                fast = above
            else:
                above = (p.x + p.y * edge.b) > edge.c
                if edge.b < 0.0:
                    above = not above
                if not above:
                    fast = True
            if not fast:
                dxs = top_site.x - edge.left_site.x
                above = edge.b * (dxp * dxp - dyp * dyp) < (
                    dxs * dyp * (1.0 + 2.0 * dxp / dxs + edge.b * edge.b)
                )
                if edge.b < 0.0:
                    above = not above
        else:
            yl = edge.c - edge.a * p.x
            t1 = p.y - yl
            t2 = p.x - top_site.x
            t3 = yl - top_site.y
            above = t1 * t1 > t2 * t2 + t3 * t3

        return above if self.side is Side.LEFT else not above

    def __repr__(self) -> str:
        return f"Halfedge({self.edge!r}, {self.side.name})"


def create_dummy() -> Halfedge:
    """A halfedge with no edge, used as a sentinel."""
    return Halfedge(None, Side.LEFT)