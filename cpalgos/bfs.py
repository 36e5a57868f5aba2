"""Breadth-first search with an edge-weight limit, and a bottleneck path search."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Hashable


def bfs(graph, source: Hashable, limit: int | None = None):
    """Search ``graph`` (node -> iterable of (neighbour, weight)) from ``source``.

    Edges heavier than ``limit`` are skipped.  Returns ``(levels, parents)``
    dicts covering every reached node; the source's parent is None.
    """
    levels = {source: 0}
    parents = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt, weight in graph[node]:
            if nxt not in levels and (limit is None or weight <= limit):
                levels[nxt] = levels[node] + 1
                parents[nxt] = node
                queue.append(nxt)
    return levels, parents


def min_bottleneck_path(
    n: int, edges: Iterable[tuple[int, int, int]], max_length: int
) -> list[int] | None:
    """Path from node 1 to node ``n`` of at most ``max_length`` edges whose
    heaviest edge is as light as possible, or None if there is none."""
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    heaviest = 0
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
        graph[u].append((v, w))
        heaviest = max(heaviest, w)

    def reaches(limit: int) -> bool:
        levels, _ = bfs(graph, 1, limit)
        return n in levels and levels[n] <= max_length

    best = None
    lo, hi = 0, heaviest
    while lo <= hi:
        mid = (lo + hi) // 2
        if reaches(mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    if best is None:
        return None

    _, parents = bfs(graph, 1, best)
    path = []
    node = n
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n m d`` and ``m`` directed edges; print the best path or -1."""
    argparse.ArgumentParser(description="Find a minimum-bottleneck path.").parse_args(argv)
    numbers = iter(int(tok) for tok in sys.stdin.read().split())
    n, m, d = next(numbers), next(numbers), next(numbers)
    edges = [(next(numbers), next(numbers), next(numbers)) for _ in range(m)]
    path = min_bottleneck_path(n, edges, d)
    if path is None:
        print(-1)
    else:
        print(len(path) - 1)
        print(" ".join(map(str, path)))
    return 0