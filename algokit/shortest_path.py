"""Shortest paths in weighted networks held as adjacency matrices."""

from __future__ import annotations

from dataclasses import dataclass

from algokit.mgraph import INFINITY, GraphError, MGraph

__all__ = [
    "SingleSourcePaths",
    "AllPairsPaths",
    "dijkstra",
    "dijkstra_sets",
    "floyd",
    "floyd_sets",
    "format_dijkstra",
    "format_floyd",
]


def _weights(graph: MGraph) -> list[list[float]]:
    if not graph.kind.is_network:
        raise GraphError("shortest paths need a weighted network")
    vertices = graph.vertices
    return [[graph.weight(a, b) for b in vertices] for a in vertices]


def _format_weight(distance: float) -> str:
    return "∞" if distance == INFINITY else f"{distance:>2}"


@dataclass(frozen=True)
class SingleSourcePaths:
    """Distances and predecessors from one source; positions are 1-based."""

    source: int
    distances: tuple[float, ...]
    predecessors: tuple[int | None, ...]

    def distance(self, target: int) -> float:
        return self.distances[target - 1]

    def path_to(self, target: int) -> list[int] | None:
        """Positions from the source to ``target``, or None if unreachable."""
        if not 1 <= target <= len(self.distances):
            raise IndexError(f"no vertex at position {target}")
        if target == self.source:
            return [target]
        if self.predecessors[target - 1] is None:
            return None
        route = [target]
        k = target
        while (k := self.predecessors[k - 1]) is not None:
            route.append(k)
        route.reverse()
        return route


@dataclass(frozen=True)
class AllPairsPaths:
    """Distances between every pair and the intermediate used; 1-based."""

    distances: tuple[tuple[float, ...], ...]
    via: tuple[tuple[int | None, ...], ...]

    def distance(self, source: int, target: int) -> float:
        return self.distances[source - 1][target - 1]

    def path(self, source: int, target: int) -> list[int] | None:
        """Positions from ``source`` to ``target``, or None if unreachable."""
        n = len(self.distances)
        if not (1 <= source <= n and 1 <= target <= n):
            raise IndexError("no vertex at that position")
        if self.distances[source - 1][target - 1] == INFINITY:
            return None

        def walk(i: int, j: int) -> list[int]:
            k = self.via[i - 1][j - 1]
            if k is None:
                return [i, j]
            return walk(i, k) + walk(k, j)[1:]

        return walk(source, target)


def dijkstra(graph: MGraph, source: str) -> SingleSourcePaths:
    """Dijkstra's algorithm from ``source`` recording each vertex's predecessor."""
    weights = _weights(graph)
    n = len(weights)
    s = graph.locate(source) - 1
    dist = list(weights[s])
    pred: list[int | None] = [s if d < INFINITY else None for d in dist]
    done = [False] * n
    done[s] = True
    pred[s] = None
    dist[s] = 0
    for _ in range(n - 1):
        v, best = None, INFINITY
        for j in range(n):
            if not done[j] and dist[j] < best:
                v, best = j, dist[j]
        if v is None:
            break
        done[v] = True
        for j in range(n):
            w = weights[v][j]
            if not done[j] and w < INFINITY and best + w < dist[j]:
                dist[j] = best + w
                pred[j] = v
    return SingleSourcePaths(
        source=s + 1,
        distances=tuple(dist),
        predecessors=tuple(None if p is None else p + 1 for p in pred),
    )


def dijkstra_sets(
    graph: MGraph, source: str
) -> tuple[tuple[float, ...], tuple[frozenset[int], ...]]:
    """Dijkstra's algorithm recording, for each vertex, the set of positions on its path."""
    weights = _weights(graph)
    n = len(weights)
    s = graph.locate(source) - 1
    dist = list(weights[s])
    sets = [{s, v} if d < INFINITY else set() for v, d in enumerate(dist)]
    done = [False] * n
    dist[s] = 0
    done[s] = True
    for _ in range(n - 1):
        v, best = None, INFINITY
        for w in range(n):
            if not done[w] and dist[w] < best:
                v, best = w, dist[w]
        if v is None:
            break
        done[v] = True
        for w in range(n):
            arc = weights[v][w]
            if not done[w] and arc < INFINITY and best + arc < dist[w]:
                dist[w] = best + arc
                sets[w] = sets[v] | {w}
    return tuple(dist), tuple(frozenset(p + 1 for p in path) for path in sets)


def floyd(graph: MGraph) -> AllPairsPaths:
    """Floyd's algorithm recording the last intermediate vertex of each pair."""
    dist = _weights(graph)
    n = len(dist)
    via: list[list[int | None]] = [[None] * n for _ in range(n)]
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if (
                    i != j
                    and dist[i][k] < INFINITY
                    and dist[k][j] < INFINITY
                    and dist[i][k] + dist[k][j] < dist[i][j]
                ):
                    dist[i][j] = dist[i][k] + dist[k][j]
                    via[i][j] = k
    return AllPairsPaths(
        distances=tuple(tuple(row) for row in dist),
        via=tuple(tuple(None if k is None else k + 1 for k in row) for row in via),
    )


def floyd_sets(
    graph: MGraph,
) -> tuple[tuple[tuple[float, ...], ...], tuple[tuple[frozenset[int], ...], ...]]:
    """Floyd's algorithm recording, for each pair, the set of positions on its path."""
    dist = _weights(graph)
    n = len(dist)
    sets = [
        [{v, w} if dist[v][w] < INFINITY else set() for w in range(n)]
        for v in range(n)
    ]
    for u in range(n):
        for v in range(n):
            for w in range(n):
                if (
                    v != w
                    and dist[v][u] < INFINITY
                    and dist[u][w] < INFINITY
                    and dist[v][u] + dist[u][w] < dist[v][w]
                ):
                    dist[v][w] = dist[v][u] + dist[u][w]
                    sets[v][w] = sets[v][u] | sets[u][w]
    return (
        tuple(tuple(row) for row in dist),
        tuple(tuple(frozenset(p + 1 for p in s) for s in row) for row in sets),
    )


def format_dijkstra(graph: MGraph, paths: SingleSourcePaths) -> str:
    """One line per target: its path from the source and the path weight."""
    source = graph.get_vertex(paths.source)
    lines = []
    for target in range(1, len(graph) + 1):
        if target == paths.source:
            continue
        route = paths.path_to(target)
        route_text = " ".join(graph.get_vertex(p) for p in route) if route else "×"
        lines.append(
            f"{source} to {graph.get_vertex(target)}: {route_text}, "
            f"weight: {_format_weight(paths.distance(target))}\n"
        )
    return "".join(lines)


def format_floyd(graph: MGraph, paths: AllPairsPaths) -> str:
    """One line per ordered pair of distinct vertices."""
    lines = []
    n = len(graph)
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if i == j:
                continue
            route = paths.path(i, j)
            route_text = " ".join(graph.get_vertex(p) for p in route) if route else "×"
            lines.append(
                f"{graph.get_vertex(i)} to {graph.get_vertex(j)}: {route_text}, "
                f"weight: {_format_weight(paths.distance(i, j))}\n"
            )
    return "".join(lines)