"""Minimum spanning trees of networks held as adjacency matrices."""

from __future__ import annotations

from dataclasses import dataclass

from algokit.mgraph import INFINITY, GraphError, MGraph

__all__ = ["Edge", "prim_order", "prim", "kruskal"]


@dataclass(frozen=True)
class Edge:
    """A tree edge between two vertices and its weight."""

    tail: str
    head: str
    weight: float


def _weights(graph: MGraph) -> tuple[tuple[str, ...], list[list[float]]]:
    if not graph.kind.is_network:
        raise GraphError("a minimum spanning tree needs a weighted network")
    vertices = graph.vertices
    return vertices, [[graph.weight(a, b) for b in vertices] for a in vertices]


def prim_order(graph: MGraph, start: str) -> list[Edge]:
    """Prim's algorithm from ``start``, recording each vertex as it joins.

    Each edge's head is the vertex added and its tail the tree vertex it
    joins through. Ties go to the later vertex. Weights must be positive.
    """
    vertices, weights = _weights(graph)
    k = graph.locate(start) - 1
    lowcost = list(weights[k])
    nearest = [start] * len(vertices)
    lowcost[k] = 0
    edges: list[Edge] = []
    for _ in range(len(vertices) - 1):
        best, best_cost = None, INFINITY
        for i, cost in enumerate(lowcost):
            if cost and cost <= best_cost:
                best, best_cost = i, cost
        if best is None or best_cost == INFINITY:
            raise GraphError("the network is not connected")
        k = best
        edges.append(Edge(nearest[k], vertices[k], lowcost[k]))
        lowcost[k] = 0
        for j, cost in enumerate(weights[k]):
            if cost < lowcost[j]:
                nearest[j] = vertices[k]
                lowcost[j] = cost
    return edges


def prim(graph: MGraph, start: str) -> list[Edge]:
    """Prim's algorithm from ``start``; ties go to the earlier vertex."""
    vertices, weights = _weights(graph)
    k = graph.locate(start) - 1
    n = len(vertices)
    if n == 1:
        return []
    origin = [k] * n
    in_tree = [j == k for j in range(n)]
    edges: list[Edge] = []
    for _ in range(n - 1):
        best, best_cost = None, INFINITY
        for i in range(n):
            if not in_tree[i] and weights[origin[i]][i] < best_cost:
                best, best_cost = i, weights[origin[i]][i]
        if best is None:
            raise GraphError("the network is not connected")
        k = best
        edges.append(Edge(vertices[origin[k]], vertices[k], weights[origin[k]][k]))
        in_tree[k] = True
        for j in range(n):
            if not in_tree[j] and weights[k][j] < weights[origin[j]][j]:
                origin[j] = k
    return edges


def _sort_by_weight(edges: list[tuple[int, int, float]], left: int, right: int) -> None:
    """Quicksort on weight, with the first element of each range as pivot."""
    if left >= right:
        return
    pivot = edges[left]
    i, j = left, right
    while i != j:
        while i < j and edges[j][2] > pivot[2]:
            j -= 1
        if i < j:
            edges[i] = edges[j]
            i += 1
        while i < j and edges[i][2] < pivot[2]:
            i += 1
        if i < j:
            edges[j] = edges[i]
            j -= 1
    edges[i] = pivot
    _sort_by_weight(edges, left, i - 1)
    _sort_by_weight(edges, j + 1, right)


def kruskal(graph: MGraph) -> list[Edge]:
    """Kruskal's algorithm; a disconnected network yields a spanning forest."""
    vertices, weights = _weights(graph)
    n = len(vertices)
    if n <= 1:
        return []
    candidates = [
        (i, j, weights[i][j])
        for i in range(n)
        for j in range(i, n)
        if weights[i][j] != INFINITY
    ]
    _sort_by_weight(candidates, 0, len(candidates) - 1)

    parent = list(range(n))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    edges: list[Edge] = []
    for a, b, weight in candidates:
        x, y = find(a), find(b)
        if x != y:
            parent[x] = y
            edges.append(Edge(vertices[a], vertices[b], weight))
            if len(edges) == n - 1:
                break
    return edges