from typing import List

import networkx as nx
import numpy as np

from ..data import DistanceMatrix
from .base import Solver, Tour


Walk = List[int]


def build_spanning_tree(matrix: DistanceMatrix) -> np.ndarray:
    """Grow a minimum spanning tree from city 0, Prim style.

    Zero weights are treated as absent edges, so every real distance must be
    positive. Among equal candidate edges the first one scanned wins: tree
    vertices in the order they joined, then candidates by increasing index.
    If the positive-weight graph is disconnected the growth stops early and the
    returned adjacency only spans the component of city 0.
    """
    n = matrix.n
    if n < 1:
        raise ValueError("At least one city is required.")
    rows = matrix.rows()
    tree = np.zeros((n, n), dtype=bool)
    in_tree = [False] * n
    in_tree[0] = True
    added = [0]
    for _ in range(1, n):
        best = None
        for u in added:
            for v in range(n):
                w = rows[u][v]
                if w == 0 or in_tree[v]:
                    continue
                if best is None or w < best[2]:
                    best = (u, v, w)
        if best is None:
            break
        u, v, _ = best
        in_tree[v] = True
        added.append(v)
        tree[u, v] = True
        tree[v, u] = True
    return tree


def tree_weight(tree: np.ndarray, matrix: DistanceMatrix) -> int:
    return int(matrix.data[np.triu(tree)].sum())


def spanning_tree_graph(tree: np.ndarray, matrix: DistanceMatrix) -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(range(tree.shape[0]))
    rows, cols = np.nonzero(np.triu(tree))
    for u, v in zip(rows.tolist(), cols.tolist()):
        graph.add_edge(u, v, weight=matrix.weight(u, v))
    return graph


def walk_tree(tree: np.ndarray, root: int = 0) -> Walk:
    """Depth-first walk recording every entry into a vertex, returns to the parent included.

    Children are taken in increasing index order. Frames on the stack are
    ``(vertex, next child position)`` pairs.
    """
    n = tree.shape[0]
    neighbours = [np.flatnonzero(tree[v]).tolist() for v in range(n)]
    visited = [False] * n
    visited[root] = True
    walk = [root]
    stack = [(root, 0)]
    while stack:
        vertex, pos = stack[-1]
        children = neighbours[vertex]
        while pos < len(children) and visited[children[pos]]:
            pos += 1
        if pos == len(children):
            stack.pop()
            if stack:
                walk.append(stack[-1][0])
            continue
        child = children[pos]
        stack[-1] = (vertex, pos + 1)
        visited[child] = True
        walk.append(child)
        stack.append((child, 0))
    return walk


def shortcut_walk(walk: Walk, matrix: DistanceMatrix) -> Tour:
    """Keep the first visit of each city, plus the final entry of the walk."""
    rows = matrix.rows()
    seen = set()
    kept: List[int] = []
    cost = 0
    last = len(walk) - 1
    for idx, city in enumerate(walk):
        if city in seen and idx != last:
            continue
        seen.add(city)
        if kept:
            cost += rows[kept[-1]][city]
        kept.append(city)
    return Tour(cities=kept, cost=cost)


def double_tree_tour(matrix: DistanceMatrix) -> Tour:
    n = matrix.n
    if n < 1:
        raise ValueError("At least one city is required.")
    if n == 1:
        return Tour(cities=[0, 0], cost=0)
    tree = build_spanning_tree(matrix)
    walk = walk_tree(tree, root=0)
    return shortcut_walk(walk, matrix)


class DoubleTreeSolver(Solver):
    name = "double_tree"

    def solve(self, matrix: DistanceMatrix) -> Tour:
        return double_tree_tour(matrix)
