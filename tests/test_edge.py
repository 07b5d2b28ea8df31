from functools import cmp_to_key

import pytest

from voronoikit.edge import (
    DELETED,
    Edge,
    compare_sites_distances,
    compare_sites_distances_max,
    create_bisecting_edge,
)
from voronoikit.geom import Point, Rectangle
from voronoikit.lr import Side
from voronoikit.vertex import Vertex


class _Site:
    def __init__(self, x, y):
        self.coord = Point(x, y)
        self.edges = []

    @property
    def x(self):
        return self.coord.x

    @property
    def y(self):
        return self.coord.y

    def add_edge(self, edge):
        self.edges.append(edge)


@pytest.mark.parametrize(
    "p0, p1",
    [((0, 0), (2, 0)), ((0, 0), (0, 3)), ((1, 2), (4, 7)), ((-3, 5), (2, -1)), ((5, 5), (1, 6))],
)
def test_bisecting_edge_is_perpendicular_bisector(p0, p1):
    s0, s1 = _Site(*p0), _Site(*p1)
    edge = create_bisecting_edge(s0, s1)
    mx, my = (s0.x + s1.x) / 2, (s0.y + s1.y) / 2
    assert edge.a * mx + edge.b * my == pytest.approx(edge.c)
    dx, dy = s1.x - s0.x, s1.y - s0.y
    assert edge.a * dy - edge.b * dx == pytest.approx(0.0, abs=1e-12)
    assert 1.0 in (edge.a, edge.b)


def test_bisecting_edge_registers_with_sites():
    s0, s1 = _Site(0, 0), _Site(1, 1)
    edge = create_bisecting_edge(s0, s1)
    assert s0.edges == [edge]
    assert s1.edges == [edge]
    assert edge.site(Side.LEFT) is s0
    assert edge.site(Side.RIGHT) is s1


def test_bisecting_coincident_sites_raises():
    with pytest.raises(ValueError):
        create_bisecting_edge(_Site(1, 1), _Site(1, 1))


def test_delaunay_line_joins_sites():
    s0, s1 = _Site(0, 0), _Site(3, 4)
    line = create_bisecting_edge(s0, s1).delaunay_line()
    assert (line.p0, line.p1) == (s0.coord, s1.coord)


def test_sites_distance():
    edge = create_bisecting_edge(_Site(0, 0), _Site(3, 4))
    assert edge.sites_distance() == pytest.approx(5.0)


def test_unclipped_edge_is_invisible():
    edge = create_bisecting_edge(_Site(0, 0), _Site(2, 0))
    segment = edge.voronoi_edge()
    assert edge.visible() is False
    assert (segment.p0, segment.p1) == (None, None)


def test_set_vertex_and_hull_membership():
    edge = Edge()
    assert edge.is_part_of_convex_hull() is True
    v0, v1 = Vertex(0, 0), Vertex(1, 1)
    edge.set_vertex(Side.LEFT, v0)
    assert edge.vertex(Side.LEFT) is v0
    assert edge.is_part_of_convex_hull() is True
    edge.set_vertex(Side.RIGHT, v1)
    assert edge.vertex(Side.RIGHT) is v1
    assert edge.is_part_of_convex_hull() is False


def test_clip_unbounded_vertical_edge():
    edge = create_bisecting_edge(_Site(0, 0), _Site(2, 0))
    edge.clip_vertices(Rectangle(0, 0, 10, 10))
    assert edge.visible() is True
    ends = edge.clipped_ends
    assert {(p.x, p.y) for p in ends} == {(1.0, 0.0), (1.0, 10.0)}
    segment = edge.voronoi_edge()
    assert {segment.p0, segment.p1} == set(ends)


def test_clip_respects_vertices():
    edge = create_bisecting_edge(_Site(0, 0), _Site(0, 2))
    edge.set_vertex(Side.LEFT, Vertex(3, 1))
    edge.clip_vertices(Rectangle(0, 0, 10, 10))
    ends = edge.clipped_ends
    assert all(p.y == pytest.approx(1.0) for p in ends)
    assert {p.x for p in ends} == {3.0, 10.0}


def test_clip_outside_bounds_stays_invisible():
    edge = create_bisecting_edge(_Site(0, 0), _Site(2, 0))
    edge.clip_vertices(Rectangle(5, 5, 1, 1))
    assert edge.visible() is False


def test_clipped_ends_inside_bounds():
    bounds = Rectangle(0, 0, 10, 10)
    edge = create_bisecting_edge(_Site(2, 3), _Site(7, 6))
    edge.clip_vertices(bounds)
    for p in edge.clipped_ends:
        assert bounds.left - 1e-9 <= p.x <= bounds.right + 1e-9
        assert bounds.top - 1e-9 <= p.y <= bounds.bottom + 1e-9
        assert edge.a * p.x + edge.b * p.y == pytest.approx(edge.c)


def test_compare_sites_distances_ordering():
    short = create_bisecting_edge(_Site(0, 0), _Site(1, 0))
    long = create_bisecting_edge(_Site(0, 0), _Site(5, 0))
    assert compare_sites_distances(short, long) == -1
    assert compare_sites_distances_max(short, long) == 1
    assert compare_sites_distances(short, short) == 0
    assert sorted([long, short], key=cmp_to_key(compare_sites_distances)) == [short, long]
    assert sorted([short, long], key=cmp_to_key(compare_sites_distances_max)) == [long, short]


def test_deleted_marker_has_no_geometry():
    assert DELETED.visible() is False
    assert DELETED.is_part_of_convex_hull() is True
    assert DELETED.vertex(Side.LEFT) is None
    assert DELETED.vertex(Side.RIGHT) is None