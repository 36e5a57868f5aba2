"""Competitive programming algorithms: knapsack, geometry, graphs, linear programming and strings."""

__version__ = "0.1.0"

__all__ = [
    "bfs",
    "bigint",
    "derangement",
    "geometry",
    "hld",
    "kmp",
    "knapsack",
    "lca",
    "manacher",
    "nqueens",
    "simplex",
]