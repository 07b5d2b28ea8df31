# voronoikit

Planar Voronoi diagrams and Delaunay triangulations built with Fortune's
sweep-line algorithm, using only the standard library.

From one set of sites you get:

- the Voronoi diagram, clipped to a bounding rectangle
- the Delaunay triangulation
- the convex hull, as segments or as points in order
- minimum or maximum spanning trees over the Delaunay edges (Kruskal)
- the clipped Voronoi region of each site, and each site's neighbours

## Installation

```
pip install voronoikit
```

To run the test suite:

```
pip install "voronoikit[test]"
pytest
```

## Usage

```python
from voronoikit.geom import Point, Rectangle
from voronoikit.voronoi import Voronoi

points = [Point(10, 10), Point(50, 20), Point(30, 60), Point(80, 70)]
bounds = Rectangle(0, 0, 100, 100)

vor = Voronoi(points, None, bounds)

edges = vor.voronoi_diagram()            # visible Voronoi edges as LineSegments
triangles = vor.delaunay_triangulation() # Delaunay edges as LineSegments
hull = vor.hull_points_in_order()        # hull sites, in traversal order
cell = vor.region(points[0])             # counter-clockwise corners, clipped to bounds
neighbours = vor.neighbor_sites_for_site(points[0])
```

The diagram is computed when the `Voronoi` object is built. Its arguments are:

- `points`: the sites, as `Point` objects. Two sites at the same place
  cannot be bisected and raise `ValueError`.
- `colors`: `None`, or a sequence with one integer per point;
  `site_colors()` returns them in site order (0 for every site when `None`).
- `plot_bounds`: the `Rectangle` that edges and regions are clipped to.

Other queries on a `Voronoi`:

- `edges` — every `Edge` found by the sweep
- `hull()` — Delaunay segments along the convex hull
- `voronoi_boundary_for_site(coord)`, `delaunay_lines_for_site(coord)` —
  the segments that belong to the site at `coord`
- `regions()` — the clipped region of every site; `regions_prepare()`
  computes them ahead of time
- `site_coords()` — site coordinates, sorted on y then x
- `region(p)` and `neighbor_sites_for_site(coord)` return an empty list for
  a point that is not a site

### Spanning trees

`Voronoi.spanning_tree(kind)` runs Kruskal's algorithm over the Delaunay
edges. Pass `KruskalType.MINIMUM` (the default) or `KruskalType.MAXIMUM`
from `voronoikit.kruskal`. The same function works on any list of line
segments as `voronoikit.kruskal.kruskal(line_segments, kind)`; the nodes are
the segments' end points.

### Geometry helpers

`voronoikit.geom` provides:

- `Point(x, y)` with `distance(other)`, and `interpolate(first, second, delta)`
- `Rectangle(x, y, width, height)` with `left`, `right`, `top`, `bottom`
- `Circle(center, radius)`
- `LineSegment(p0, p1)` with `length()`, and the comparators
  `compare_lengths` and `compare_lengths_max`
- `Polygon(vertices)` with `area()`, `signed_double_area()` and `winding()`,
  which returns a `Winding` (`NONE`, `CLOCKWISE`, `COUNTERCLOCKWISE`)
- `compare_by_y_then_x(a, b)`, returning -1, 0 or 1

The building blocks of the sweep are importable too: `voronoikit.site`
(`Site`, `sort_sites`, `check_bounds`), `voronoikit.edge`,
`voronoikit.halfedge`, `voronoikit.vertex`, `voronoikit.edge_list`,
`voronoikit.priority_queue`, `voronoikit.edge_reorderer`,
`voronoikit.site_list` and `voronoikit.functions`.

### Traditional ZIP encryption

`voronoikit.zipcrypto.ZipCrypto` implements the traditional PKWARE
stream cipher:

```python
from voronoikit.zipcrypto import ZipCrypto

password = "password"
ciphertext = ZipCrypto(password).encrypt(b"hello")
assert ZipCrypto(password).decrypt(ciphertext) == b"hello"
```

`crypt_header(password, crc_for_crypting, random_bytes)` builds the 12-byte
header that precedes an encrypted entry and returns it together with the
`ZipCrypto` state, ready to encrypt the entry's data. `random_bytes` must be
ten bytes; when omitted, fresh ones are drawn from `os.urandom`.

## What it does not do

voronoikit is a library only. It has no command-line tool, does not draw or
display anything, and works in the plane only: there is no Voronoi diagram
on the sphere. It reads and writes no files; ZIP archives themselves are not
handled, only the cipher used inside them.