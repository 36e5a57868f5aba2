"""Heavy-light decomposition over a lazy max segment tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, MutableSequence, Sequence

INF = 10**9


class LazySegmentNode:
    """Segment tree node over [lo, hi) with range assign, range add and max query.

    Children are created on demand, so a tree built without ``values`` starts
    with every position at -INF.
    """

    def __init__(self, lo: int, hi: int, values: Sequence[int] | None = None):
        self.lo = lo
        self.hi = hi
        self.left: LazySegmentNode | None = None
        self.right: LazySegmentNode | None = None
        self._set: int | None = None
        self._add = 0
        if values is None:
            self.val = -INF
        elif lo + 1 < hi:
            mid = lo + (hi - lo) // 2
            self.left = LazySegmentNode(lo, mid, values)
            self.right = LazySegmentNode(mid, hi, values)
            self.val = max(self.left.val, self.right.val)
        else:
            self.val = values[lo]

    def _push(self) -> None:
        if self.left is None:
            mid = self.lo + (self.hi - self.lo) // 2
            self.left = LazySegmentNode(self.lo, mid)
            self.right = LazySegmentNode(mid, self.hi)
        if self._set is not None:
            self.left.assign(self.lo, self.hi, self._set)
            self.right.assign(self.lo, self.hi, self._set)
            self._set = None
        elif self._add:
            self.left.add(self.lo, self.hi, self._add)
            self.right.add(self.lo, self.hi, self._add)
            self._add = 0

    def query(self, left: int, right: int) -> int:
        """Maximum over [left, right); -INF if the range misses this node."""
        if right <= self.lo or self.hi <= left:
            return -INF
        if left <= self.lo and self.hi <= right:
            return self.val
        self._push()
        return max(self.left.query(left, right), self.right.query(left, right))

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every position in [left, right) to ``value``."""
        if right <= self.lo or self.hi <= left:
            return
        if left <= self.lo and self.hi <= right:
            self._set = self.val = value
            self._add = 0
            return
        self._push()
        self.left.assign(left, right, value)
        self.right.assign(left, right, value)
        self.val = max(self.left.val, self.right.val)

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position in [left, right)."""
        if right <= self.lo or self.hi <= left:
            return
        if left <= self.lo and self.hi <= right:
            if self._set is not None:
                self._set += value
            else:
                self._add += value
            self.val += value
            return
        self._push()
        self.left.add(left, right, value)
        self.right.add(left, right, value)
        self.val = max(self.left.val, self.right.val)

    def values(self, out: MutableSequence[int], lo: int, hi: int) -> None:
        """Write the value of every position in [lo, hi) into ``out``."""
        if hi <= self.lo or self.hi <= lo:
            return
        if self.lo + 1 >= self.hi:
            out[self.lo] = self.val
            return
        self._push()
        self.left.values(out, lo, hi)
        self.right.values(out, lo, hi)


class HLD:
    """Path and subtree max queries with updates on a tree rooted at node 0.

    With ``vals_edges`` each value belongs to the edge from a node to its
    parent instead of to the node itself.
    """

    def __init__(self, adj: Sequence[Sequence[int]], vals_edges: bool = False):
        n = len(adj)
        if n == 0:
            raise ValueError("tree must have at least one node")
        self._n = n
        self._edges = int(bool(vals_edges))
        children = [list(neighbours) for neighbours in adj]
        self._par = [-1] * n
        self._siz = [1] * n
        self._rt = [0] * n
        self._pos = [0] * n

        order: list[int] = []
        stack = [0]
        while stack:
            v = stack.pop()
            order.append(v)
            if self._par[v] != -1:
                children[v].remove(self._par[v])
            for u in children[v]:
                self._par[u] = v
                stack.append(u)
        for v in reversed(order):
            kids = children[v]
            for u in kids:
                self._siz[v] += self._siz[u]
            for i, u in enumerate(kids):
                if self._siz[u] > self._siz[kids[0]]:
                    kids[0], kids[i] = kids[i], kids[0]

        clock = 0
        stack = [0]
        while stack:
            v = stack.pop()
            self._pos[v] = clock
            clock += 1
            for u in reversed(children[v]):
                self._rt[u] = self._rt[v] if u == children[v][0] else u
                stack.append(u)
        self._tree = LazySegmentNode(0, n)

    def _segments(self, u: int, v: int) -> Iterator[tuple[int, int]]:
        pos, rt, par = self._pos, self._rt, self._par
        while rt[u] != rt[v]:
            if pos[rt[u]] > pos[rt[v]]:
                u, v = v, u
            yield pos[rt[v]], pos[v] + 1
            v = par[rt[v]]
        if pos[u] > pos[v]:
            u, v = v, u
        yield pos[u] + self._edges, pos[v] + 1

    def modify_path(self, u: int, v: int, value: int) -> None:
        """Add ``value`` along the path from ``u`` to ``v``."""
        for left, right in self._segments(u, v):
            self._tree.add(left, right, value)

    def modify(self, u: int, value: int) -> None:
        self.modify_path(u, u, value)

    def update_path(self, u: int, v: int, value: int) -> None:
        """Set every value on the path from ``u`` to ``v`` to ``value``."""
        for left, right in self._segments(u, v):
            self._tree.assign(left, right, value)

    def update(self, u: int, value: int) -> None:
        self.update_path(u, u, value)

    def query_path(self, u: int, v: int) -> int:
        """Maximum value on the path from ``u`` to ``v``."""
        return max([-INF, *(self._tree.query(l, r) for l, r in self._segments(u, v))])

    def query_subtree(self, v: int) -> int:
        """Maximum value in the subtree of ``v``."""
        start = self._pos[v]
        return self._tree.query(start + self._edges, start + self._siz[v])

    def values(self) -> list[int]:
        """Current value of every node (or of every node's parent edge)."""
        out = [0] * self._n
        self._tree.values(out, self._pos[0] + self._edges, self._pos[0] + self._siz[0])
        return [out[self._pos[i]] for i in range(self._n)]


def main(argv: Sequence[str] | None = None) -> int:
    """Answer CHANGE/QUERY commands on weighted trees until DONE."""
    argparse.ArgumentParser(description="Path max queries on weighted trees.").parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        edges = []
        adj: list[list[int]] = [[] for _ in range(n)]
        for _ in range(n - 1):
            u, v, w = int(next(tokens)) - 1, int(next(tokens)) - 1, int(next(tokens))
            edges.append((u, v))
            adj[u].append(v)
            adj[v].append(u)
            edges[-1] = (u, v, w)
        hld = HLD(adj, vals_edges=True)
        for u, v, w in edges:
            hld.update_path(u, v, w)
        while True:
            command = next(tokens)
            if command == "DONE":
                break
            i, j = int(next(tokens)), int(next(tokens))
            if command == "CHANGE":
                u, v, _ = edges[i - 1]
                hld.update_path(u, v, j)
            else:
                print(hld.query_path(i - 1, j - 1))
    return 0