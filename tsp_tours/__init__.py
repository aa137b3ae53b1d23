"""
Exact and double-tree tours for small Traveling Salesman instances given as distance matrices.
"""

__all__ = [
    "data",
    "evaluation",
    "solvers",
]
