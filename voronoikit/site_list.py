"""An ordered collection of sites, swept bottom to top."""

from __future__ import annotations

from typing import Iterator, Optional

from .geom import Circle, Point, Rectangle
from .site import Site, sort_sites


class SiteList:
    """Sites of a diagram; sorted on y, then x, once bounds are asked for."""

    def __init__(self) -> None:
        self._sites: list[Site] = []
        self._current_index = 0
        self._sorted = False

    def push(self, site: Site) -> int:
        """Add ``site`` and return the new number of sites."""
        self._sorted = False
        self._sites.append(site)
        return len(self._sites)

    def __len__(self) -> int:
        return len(self._sites)

    def __iter__(self) -> Iterator[Site]:
        return iter(self._sites)

    def next_site(self) -> Optional[Site]:
        """The next site in sweep order, or None once sorted sites run out."""
        if self._sorted and self._current_index < len(self._sites):
            site = self._sites[self._current_index]
            self._current_index += 1
            return site
        return None

    def sites_bounds(self) -> Rectangle:
        """Bounding rectangle of the sites; sorts them first if needed."""
        if not self._sorted:
            sort_sites(self._sites)
            self._current_index = 0
            self._sorted = True

        if not self._sites:
            return Rectangle(0, 0, 0, 0)
        xmin = min(site.x for site in self._sites)
        xmax = max(site.x for site in self._sites)
        # the sites are sorted on y
        ymin = self._sites[0].y
        ymax = self._sites[-1].y
        return Rectangle(xmin, ymin, xmax - xmin, ymax - ymin)

    def site_colors(self) -> list[int]:
        return [site.color for site in self._sites]

    def site_coords(self) -> list[Point]:
        return [site.coord for site in self._sites]

    def circles(self) -> list[Circle]:
        """The largest circle centred on each site that fits its region.

        A site whose nearest edge is on the convex hull gets radius 0.
        """
        result = []
        for site in self._sites:
            nearest = site.nearest_edge()
            radius = 0.0
            if not nearest.is_part_of_convex_hull():
                radius = nearest.sites_distance() * 0.5
            result.append(Circle(Point(site.x, site.y), radius))
        return result

    def regions(self, plot_bounds: Rectangle) -> list[list[Point]]:
        return [site.region(plot_bounds) for site in self._sites]

    def regions_prepare(self, plot_bounds: Rectangle) -> None:
        for site in self._sites:
            site.region_prepare(plot_bounds)