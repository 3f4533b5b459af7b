"""Plain-Python implementations of classic tree, graph, grid, searching, sorting and queue algorithms."""

__version__ = "0.1.0"