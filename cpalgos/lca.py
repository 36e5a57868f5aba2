"""Lowest common ancestor through an Euler tour and a sparse table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


class SparseTable:
    """Range-minimum queries in O(1) after O(n log n) preprocessing."""

    def __init__(self, values: Iterable):
        self._levels = [list(values)]
        width = 1
        while width * 2 <= len(self._levels[0]):
            prev = self._levels[-1]
            self._levels.append([min(a, b) for a, b in zip(prev, prev[width:])])
            width *= 2

    def __len__(self) -> int:
        return len(self._levels[0])

    def query(self, start: int, stop: int):
        """Minimum of values[start:stop]; the range must not be empty."""
        if not 0 <= start < stop <= len(self):
            raise ValueError(f"invalid range [{start}, {stop})")
        depth = (stop - start).bit_length() - 1
        row = self._levels[depth]
        return min(row[start], row[stop - (1 << depth)])


class LCA:
    """Lowest common ancestors and distances in a tree given as adjacency lists."""

    def __init__(self, tree: Sequence[Iterable[int]], root: int = 0):
        n = len(tree)
        self._time = [0] * n
        self._depth = [0] * n
        self._path: list[int] = []
        tour: list[int] = []
        clock = 1
        stack = [(root, -1, iter(tree[root]))]
        while stack:
            node, parent, children = stack[-1]
            for child in children:
                if child != parent:
                    self._path.append(node)
                    tour.append(self._time[node])
                    self._time[child] = clock
                    clock += 1
                    self._depth[child] = self._depth[node] + 1
                    stack.append((child, node, iter(tree[child])))
                    break
            else:
                stack.pop()
        self._rmq = SparseTable(tour)

    def lca(self, a: int, b: int) -> int:
        if a == b:
            return a
        lo, hi = sorted((self._time[a], self._time[b]))
        return self._path[self._rmq.query(lo, hi)]

    def dist(self, a: int, b: int) -> int:
        """Number of edges between ``a`` and ``b``."""
        return self._depth[a] + self._depth[b] - 2 * self._depth[self.lca(a, b)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a tree of ``n`` nodes and ``q`` queries; print each distance."""
    argparse.ArgumentParser(description="Answer tree distance queries.").parse_args(argv)
    numbers = iter(int(tok) for tok in sys.stdin.read().split())
    n, q = next(numbers), next(numbers)
    tree: list[list[int]] = [[] for _ in range(n)]
    for _ in range(n - 1):
        u, v = next(numbers) - 1, next(numbers) - 1
        tree[u].append(v)
        tree[v].append(u)
    lca = LCA(tree)
    for _ in range(q):
        u, v = next(numbers) - 1, next(numbers) - 1
        print(lca.dist(u, v))
    return 0