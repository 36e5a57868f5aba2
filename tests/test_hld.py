import io
from collections import deque

import pytest

from cpalgos.hld import HLD, LazySegmentNode, main

NODE_ADJ = [[1, 2], [0, 3, 4], [0], [1], [1]]
EDGES = [(0, 1, 4), (1, 2, 9), (1, 3, 2), (3, 4, 6), (0, 5, 1)]


def _adj_from_edges(n, edges):
    adj = [[] for _ in range(n)]
    for u, v, _ in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _path(adj, u, v):
    parent = {u: None}
    queue = deque([u])
    while queue:
        x = queue.popleft()
        for y in adj[x]:
            if y not in parent:
                parent[y] = x
                queue.append(y)
    nodes = []
    while v is not None:
        nodes.append(v)
        v = parent[v]
    return nodes


def test_segment_node_from_values():
    node = LazySegmentNode(0, 5, [3, 1, 4, 1, 5])
    assert node.query(0, 5) == 5
    assert node.query(1, 2) == 1
    assert node.query(3, 3) == -10**9


def test_segment_node_assign_and_add():
    node = LazySegmentNode(0, 5, [3, 1, 4, 1, 5])
    node.assign(0, 2, 7)
    assert node.query(0, 2) == 7
    node.add(2, 5, 10)
    out = [0] * 5
    node.values(out, 0, 5)
    assert out == [7, 7] + [v + 10 for v in (4, 1, 5)]


def test_segment_node_lazy_children():
    node = LazySegmentNode(0, 8)
    assert node.query(0, 8) == -10**9
    node.assign(2, 6, 3)
    node.add(4, 8, 2)
    assert node.query(0, 2) == -10**9
    assert node.query(2, 4) == 3
    assert node.query(4, 6) == 5


def test_node_values_path_and_subtree():
    vals = [5, 3, 8, 1, 7]
    hld = HLD(NODE_ADJ)
    for v, value in enumerate(vals):
        hld.update(v, value)
    assert hld.values() == vals
    for u in range(5):
        for v in range(5):
            assert hld.query_path(u, v) == max(vals[x] for x in _path(NODE_ADJ, u, v))
    assert hld.query_subtree(1) == max(vals[1], vals[3], vals[4])
    assert hld.query_subtree(0) == max(vals)


def test_modify_path_adds_along_path():
    vals = [5, 3, 8, 1, 7]
    hld = HLD(NODE_ADJ)
    for v, value in enumerate(vals):
        hld.update(v, value)
    hld.modify_path(3, 2, 10)
    hld.modify(4, -2)
    on_path = set(_path(NODE_ADJ, 3, 2))
    expected = [value + (10 if v in on_path else 0) for v, value in enumerate(vals)]
    expected[4] -= 2
    assert hld.values() == expected


def test_update_path_sets_values():
    hld = HLD(NODE_ADJ)
    for v in range(5):
        hld.update(v, v)
    hld.update_path(3, 4, 0)
    values = hld.values()
    assert values[1] == 0 and values[3] == 0 and values[4] == 0
    assert values[2] == 2


def test_edge_values_path_max():
    n = 6
    adj = _adj_from_edges(n, EDGES)
    weight = {frozenset((u, v)): w for u, v, w in EDGES}
    hld = HLD(adj, vals_edges=True)
    for u, v, w in EDGES:
        hld.update_path(u, v, w)

    def check():
        for a in range(n):
            for b in range(n):
                nodes = _path(adj, a, b)
                if a == b:
                    assert hld.query_path(a, b) == -10**9
                else:
                    expected = max(weight[frozenset(p)] for p in zip(nodes, nodes[1:]))
                    assert hld.query_path(a, b) == expected

    check()
    hld.update_path(1, 2, 0)
    weight[frozenset((1, 2))] = 0
    check()


def test_edge_values_listing():
    adj = _adj_from_edges(6, EDGES)
    hld = HLD(adj, vals_edges=True)
    for u, v, w in EDGES:
        hld.update_path(u, v, w)
    values = hld.values()
    assert values[0] == 0
    for u, v, w in EDGES:
        assert values[v] == w


def test_empty_tree_rejected():
    with pytest.raises(ValueError):
        HLD([])


def test_main_answers_queries(monkeypatch, capsys):
    data = "1\n\n3\n1 2 1\n2 3 2\nQUERY 1 2\nCHANGE 1 3\nQUERY 1 2\nDONE\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    assert capsys.readouterr().out == "1\n3\n"