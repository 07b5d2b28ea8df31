"""Planar Voronoi diagrams, Delaunay triangulations, hulls and spanning trees."""

__version__ = "0.1.0"