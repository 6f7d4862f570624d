[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algotasks"
version = "0.1.0"
description = "Classic algorithms: percolation with union-find, sorting, shortest paths, A* search and Aho-Corasick matching"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "union-find",
    "percolation",
    "sorting",
    "dijkstra",
    "a-star",
    "aho-corasick",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algotasks-percolation = "algotasks.percolation:main"
algotasks-sort = "algotasks.sorting:main"
algotasks-dijkstra = "algotasks.dijkstra:main"
algotasks-astar = "algotasks.astar:main"
algotasks-ac = "algotasks.aho_corasick:main"

[tool.hatch.build.targets.wheel]
packages = ["algotasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
