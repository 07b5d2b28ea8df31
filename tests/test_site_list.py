import pytest

from voronoikit.edge import create_bisecting_edge
from voronoikit.geom import Point, Rectangle
from voronoikit.lr import Side
from voronoikit.site import Site
from voronoikit.site_list import SiteList
from voronoikit.vertex import Vertex


def _make(points, colors=None):
    site_list = SiteList()
    for index, point in enumerate(points):
        color = colors[index] if colors else 0
        site_list.push(Site(point, index, 0.0, color))
    return site_list


def test_push_returns_length():
    site_list = SiteList()
    assert site_list.push(Site(Point(0, 0), 0)) == 1
    assert site_list.push(Site(Point(1, 1), 1)) == 2
    assert len(site_list) == 2


def test_empty_bounds():
    assert SiteList().sites_bounds() == Rectangle(0, 0, 0, 0)


def test_bounds_cover_sites():
    site_list = _make([Point(3, 7), Point(1, 2), Point(5, 4)])
    assert site_list.sites_bounds() == Rectangle(1, 2, 5 - 1, 7 - 2)


def test_next_site_only_after_sorting():
    site_list = _make([Point(3, 7), Point(1, 2), Point(5, 4)])
    assert site_list.next_site() is None
    site_list.sites_bounds()
    order = [site_list.next_site() for _ in range(3)]
    assert [site.coord for site in order] == [Point(1, 2), Point(5, 4), Point(3, 7)]
    assert site_list.next_site() is None


def test_sorting_renumbers_sites():
    site_list = _make([Point(3, 7), Point(1, 2), Point(5, 4)])
    site_list.sites_bounds()
    assert [site.index for site in site_list] == [0, 1, 2]


def test_push_unsorts():
    site_list = _make([Point(3, 7)])
    site_list.sites_bounds()
    site_list.push(Site(Point(0, 0), 1))
    assert site_list.next_site() is None


def test_colors_and_coords_follow_sort():
    site_list = _make([Point(0, 9), Point(0, 1)], colors=[7, 3])
    site_list.sites_bounds()
    assert site_list.site_colors() == [3, 7]
    assert site_list.site_coords() == [Point(0, 1), Point(0, 9)]


def test_circle_radius_is_half_distance_for_inner_edge():
    s0 = Site(Point(0, 0), 0)
    s1 = Site(Point(6, 8), 1)
    edge = create_bisecting_edge(s0, s1)
    edge.set_vertex(Side.LEFT, Vertex(1, 1))
    edge.set_vertex(Side.RIGHT, Vertex(2, 2))
    site_list = SiteList()
    site_list.push(s0)
    site_list.push(s1)
    circles = site_list.circles()
    assert [c.center for c in circles] == [s0.coord, s1.coord]
    assert all(c.radius == pytest.approx(5.0) for c in circles)


def test_circle_radius_zero_on_hull():
    s0 = Site(Point(0, 0), 0)
    s1 = Site(Point(6, 8), 1)
    create_bisecting_edge(s0, s1)
    site_list = SiteList()
    site_list.push(s0)
    site_list.push(s1)
    assert [c.radius for c in site_list.circles()] == [0.0, 0.0]


def test_circles_need_edges():
    site_list = _make([Point(1, 1)])
    with pytest.raises(ValueError):
        site_list.circles()


def test_regions_without_edges_are_empty():
    site_list = _make([Point(1, 1), Point(2, 2)])
    bounds = Rectangle(0, 0, 10, 10)
    site_list.regions_prepare(bounds)
    assert site_list.regions(bounds) == [[], []]