"""Classic algorithms: union-find percolation, sorting, shortest paths, A* search and Aho-Corasick matching."""

__version__ = "0.1.0"