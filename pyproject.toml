[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voronoikit"
version = "0.1.0"
description = "Planar Voronoi diagrams, Delaunay triangulations, convex hulls and spanning trees by Fortune's sweep-line algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "voronoi",
    "delaunay",
    "triangulation",
    "fortune",
    "computational-geometry",
    "convex-hull",
    "spanning-tree",
    "kruskal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voronoikit"]

[tool.hatch.build.targets.sdist]
include = ["voronoikit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
