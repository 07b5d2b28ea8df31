"""Kruskal's spanning tree over line segments, with union-find."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .geom import LineSegment, Point


class KruskalType(Enum):
    """Whether to build a minimum or a maximum spanning tree."""

    MINIMUM = 0
    MAXIMUM = 1


class _DisjointSets:
    def __init__(self) -> None:
        self._parent: dict[Point, Point] = {}
        self._size: dict[Point, int] = {}

    def find(self, node: Point) -> Point:
        if node not in self._parent:
            self._parent[node] = node
            self._size[node] = 1
            return node
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, root0: Point, root1: Point) -> None:
        size0 = self._size[root0]
        size1 = self._size[root1]
        if size0 >= size1:
            self._parent[root1] = root0
            self._size[root0] += size1
        else:
            self._parent[root0] = root1
            self._size[root1] += size0


def kruskal(
    line_segments: Iterable[LineSegment],
    kind: KruskalType = KruskalType.MINIMUM,
) -> list[LineSegment]:
    """Return the segments of a spanning forest of the segments' end points.

    The sites are implied by the end points of the segments.
    """
    ordered = sorted(
        line_segments,
        key=LineSegment.length,
        reverse=kind is KruskalType.MAXIMUM,
    )
    sets = _DisjointSets()
    tree: list[LineSegment] = []
    for segment in ordered:
        root0 = sets.find(segment.p0)
        root1 = sets.find(segment.p1)
        if root0 != root1:
            tree.append(segment)
            sets.union(root0, root1)
    return tree