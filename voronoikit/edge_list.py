"""Doubly linked list of halfedges along the sweep line, with a hash index."""

from __future__ import annotations

import itertools
import math
from typing import Optional

from .edge import DELETED
from .geom import Point
from .halfedge import Halfedge, create_dummy


def _bucket(value: float, origin: float, delta: float, size: int) -> int:
    """Hash bucket of ``value`` over ``size`` buckets spanning ``delta``."""
    try:
        scaled = (value - origin) / delta * size
    except ZeroDivisionError:
        scaled = math.nan
    index = int(scaled) if math.isfinite(scaled) else 0
    return min(max(index, 0), size - 1)


class EdgeList:
    """Halfedges ordered left to right between two sentinel ends."""

    def __init__(self, xmin: float, deltax: float, sqrt_nsites: int) -> None:
        if sqrt_nsites < 1:
            raise ValueError("sqrt_nsites must be at least 1")
        self.xmin = xmin
        self.deltax = deltax
        self.hashsize = 2 * sqrt_nsites
        self._hash: list[Optional[Halfedge]] = [None] * self.hashsize

        self.left_end = create_dummy()
        self.right_end = create_dummy()
        self.left_end.edge_list_left_neighbor = None
        self.left_end.edge_list_right_neighbor = self.right_end
        self.right_end.edge_list_left_neighbor = self.left_end
        self.right_end.edge_list_right_neighbor = None
        self._hash[0] = self.left_end
        self._hash[-1] = self.right_end

    def __iter__(self):
        """The halfedges between the two ends, left to right."""
        halfedge = self.left_end.edge_list_right_neighbor
        while halfedge is not None and halfedge is not self.right_end:
            yield halfedge
            halfedge = halfedge.edge_list_right_neighbor

    def insert(self, lb: Halfedge, new_halfedge: Halfedge) -> None:
        """Insert ``new_halfedge`` to the right of ``lb``."""
        new_halfedge.edge_list_left_neighbor = lb
        new_halfedge.edge_list_right_neighbor = lb.edge_list_right_neighbor
        lb.edge_list_right_neighbor.edge_list_left_neighbor = new_halfedge
        lb.edge_list_right_neighbor = new_halfedge

    def remove(self, halfedge: Halfedge) -> None:
        """Unlink ``halfedge`` and mark its edge deleted."""
        halfedge.edge_list_left_neighbor.edge_list_right_neighbor = (
            halfedge.edge_list_right_neighbor
        )
        halfedge.edge_list_right_neighbor.edge_list_left_neighbor = (
            halfedge.edge_list_left_neighbor
        )
        halfedge.edge = DELETED
        halfedge.edge_list_left_neighbor = None
        halfedge.edge_list_right_neighbor = None

    def edge_list_left_neighbor(self, p: Point) -> Halfedge:
        """The rightmost halfedge that is still left of ``p``."""
        bucket = _bucket(p.x, self.xmin, self.deltax, self.hashsize)
        halfedge = self.get_hash(bucket)
        if halfedge is None:
            for i in itertools.count(1):
                halfedge = self.get_hash(bucket - i)
                if halfedge is not None:
                    break
                halfedge = self.get_hash(bucket + i)
                if halfedge is not None:
                    break

        if halfedge is self.left_end or (
            halfedge is not self.right_end and halfedge.is_left_of(p)
        ):
            while True:
                halfedge = halfedge.edge_list_right_neighbor
                if halfedge is self.right_end or not halfedge.is_left_of(p):
                    break
            halfedge = halfedge.edge_list_left_neighbor
        else:
            while True:
                halfedge = halfedge.edge_list_left_neighbor
                if halfedge is self.left_end or halfedge.is_left_of(p):
                    break

        if 0 < bucket < self.hashsize - 1:
            self._hash[bucket] = halfedge
        return halfedge

    def get_hash(self, b: int) -> Optional[Halfedge]:
        """Entry of bucket ``b``, pruning it if its edge has been deleted."""
        if b < 0 or b >= self.hashsize:
            return None
        halfedge = self._hash[b]
        if halfedge is not None and halfedge.edge is DELETED:
            self._hash[b] = None
            return None
        return halfedge