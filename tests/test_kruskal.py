from voronoikit.geom import LineSegment, Point
from voronoikit.kruskal import KruskalType, kruskal

A = Point(0.0, 0.0)
B = Point(3.0, 0.0)
C = Point(3.0, 4.0)


def _triangle():
    ab = LineSegment(A, B)
    bc = LineSegment(B, C)
    ca = LineSegment(C, A)
    return ab, bc, ca


def test_minimum_drops_longest():
    ab, bc, ca = _triangle()
    tree = kruskal([ca, ab, bc])
    assert len(tree) == 2
    assert ca not in tree
    assert ab in tree and bc in tree


def test_maximum_drops_shortest():
    ab, bc, ca = _triangle()
    tree = kruskal([ab, bc, ca], KruskalType.MAXIMUM)
    assert len(tree) == 2
    assert ab not in tree
    assert ca in tree and bc in tree


def test_minimum_tree_is_not_heavier_than_maximum():
    segments = _triangle()
    low = sum(s.length() for s in kruskal(list(segments)))
    high = sum(s.length() for s in kruskal(list(segments), KruskalType.MAXIMUM))
    assert low <= high


def test_empty_input():
    assert kruskal([]) == []


def test_disconnected_segments_all_kept():
    s1 = LineSegment(Point(0.0, 0.0), Point(1.0, 0.0))
    s2 = LineSegment(Point(10.0, 10.0), Point(11.0, 10.0))
    tree = kruskal([s1, s2])
    assert set(map(id, tree)) == {id(s1), id(s2)}


def test_duplicate_segment_kept_once():
    s1 = LineSegment(A, B)
    s2 = LineSegment(Point(0.0, 0.0), Point(3.0, 0.0))
    assert len(kruskal([s1, s2])) == 1


def test_spanning_tree_edge_count():
    points = [Point(float(i), float(i * i)) for i in range(5)]
    segments = [
        LineSegment(p, q) for i, p in enumerate(points) for q in points[i + 1:]
    ]
    tree = kruskal(segments)
    assert len(tree) == len(points) - 1