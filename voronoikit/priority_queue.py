"""Bucketed priority queue of halfedges keyed on their vertex in V*."""

from __future__ import annotations

import math

from .geom import Point
from .halfedge import Halfedge, create_dummy


def _bucket(value: float, origin: float, delta: float, size: int) -> int:
    try:
        scaled = (value - origin) / delta * size
    except ZeroDivisionError:
        scaled = math.nan
    index = int(scaled) if math.isfinite(scaled) else 0
    return min(max(index, 0), size - 1)


class HalfedgePriorityQueue:
    """Halfedges ordered by ``ystar``, then by their vertex's x."""

    def __init__(self, ymin: float, deltay: float, sqrt_nsites: int) -> None:
        if sqrt_nsites < 1:
            raise ValueError("sqrt_nsites must be at least 1")
        self.ymin = ymin
        self.deltay = deltay
        self.hashsize = 4 * sqrt_nsites
        self._count = 0
        self._min_bucket = 0
        # a dummy halfedge heads each bucket's chain
        self._hash = [create_dummy() for _ in range(self.hashsize)]

    def __len__(self) -> int:
        return self._count

    def _bucket_of(self, halfedge: Halfedge) -> int:
        return _bucket(halfedge.ystar, self.ymin, self.deltay, self.hashsize)

    def insert(self, halfedge: Halfedge) -> None:
        """Add ``halfedge``; it must have a vertex."""
        bucket = self._bucket_of(halfedge)
        if bucket < self._min_bucket:
            self._min_bucket = bucket
        previous = self._hash[bucket]
        while True:
            nxt = previous.next_in_priority_queue
            if nxt is None:
                break
            if halfedge.ystar > nxt.ystar or (
                halfedge.ystar == nxt.ystar and halfedge.vertex.x > nxt.vertex.x
            ):
                previous = nxt
            else:
                break
        halfedge.next_in_priority_queue = previous.next_in_priority_queue
        previous.next_in_priority_queue = halfedge
        self._count += 1

    def remove(self, halfedge: Halfedge) -> None:
        """Take ``halfedge`` out of the queue; no-op if it has no vertex."""
        if halfedge.vertex is None:
            return
        previous = self._hash[self._bucket_of(halfedge)]
        while previous.next_in_priority_queue is not halfedge:
            previous = previous.next_in_priority_queue
            if previous is None:
                raise ValueError("halfedge is not in the queue")
        previous.next_in_priority_queue = halfedge.next_in_priority_queue
        self._count -= 1
        halfedge.vertex = None
        halfedge.next_in_priority_queue = None

    def empty(self) -> bool:
        return self._count == 0

    def _adjust_min_bucket(self) -> None:
        while (
            self._min_bucket < self.hashsize - 1
            and self._hash[self._min_bucket].next_in_priority_queue is None
        ):
            self._min_bucket += 1

    def min(self) -> Point:
        """Coordinates of the least halfedge's vertex in V*."""
        if self.empty():
            raise IndexError("priority queue is empty")
        self._adjust_min_bucket()
        answer = self._hash[self._min_bucket].next_in_priority_queue
        return Point(answer.vertex.x, answer.ystar)

    def extract_min(self) -> Halfedge:
        """Remove and return the least halfedge."""
        if self.empty():
            raise IndexError("priority queue is empty")
        self._adjust_min_bucket()
        head = self._hash[self._min_bucket]
        answer = head.next_in_priority_queue
        head.next_in_priority_queue = answer.next_in_priority_queue
        self._count -= 1
        answer.next_in_priority_queue = None
        return answer