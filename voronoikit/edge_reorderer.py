"""Reordering a site's edges into the order they are traversed."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable

from .lr import Side
from .vertex import VERTEX_AT_INFINITY


class Criterion(Enum):
    """What links consecutive edges: shared vertices or shared sites."""

    VERTEX = 0
    SITE = 1


class EdgeReorderer:
    """Orders edges into a chain, noting which end of each comes first.

    ``edges`` holds the chained edges and ``edge_orientations`` the side of
    each that hooks up with the previous edge.
    """

    def __init__(self, orig_edges: Iterable, criterion: Criterion) -> None:
        if not isinstance(criterion, Criterion):
            raise ValueError(f"unknown criterion: {criterion!r}")
        self.criterion = criterion
        self.edges: list = []
        self.edge_orientations: list[Side] = []
        edges = list(orig_edges)
        if edges:
            self._reorder(edges)

    def _ends(self, edge):
        if self.criterion is Criterion.VERTEX:
            return edge.left_vertex, edge.right_vertex
        return edge.left_site, edge.right_site

    def _reorder(self, orig_edges: list) -> None:
        first_edge, *pending = orig_edges
        new_edges = deque([first_edge])
        orientations = deque([Side.LEFT])

        first_point, last_point = self._ends(first_edge)
        if first_point is VERTEX_AT_INFINITY or last_point is VERTEX_AT_INFINITY:
            self.edge_orientations = list(orientations)
            return

        while pending:
            remaining = []
            for edge in pending:
                left_point, right_point = self._ends(edge)
                if left_point is VERTEX_AT_INFINITY or right_point is VERTEX_AT_INFINITY:
                    self.edge_orientations = list(orientations)
                    return
                if left_point is last_point:
                    last_point = right_point
                    orientations.append(Side.LEFT)
                    new_edges.append(edge)
                elif right_point is first_point:
                    first_point = left_point
                    orientations.appendleft(Side.LEFT)
                    new_edges.appendleft(edge)
                elif left_point is first_point:
                    first_point = right_point
                    orientations.appendleft(Side.RIGHT)
                    new_edges.appendleft(edge)
                elif right_point is last_point:
                    last_point = left_point
                    orientations.append(Side.RIGHT)
                    new_edges.append(edge)
                else:
                    remaining.append(edge)
            if len(remaining) == len(pending):
                raise ValueError("edges do not form a connected chain")
            pending = remaining

        self.edges = list(new_edges)
        self.edge_orientations = list(orientations)