"""Ordered containers with cursors: a tree map, a skew-heap priority queue, a vector, a big integer and a matrix."""

__version__ = "0.1.0"

__all__ = ["avl", "bigint", "exceptions", "matrix", "priority_queue", "treemap", "vector"]