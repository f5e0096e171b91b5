"""Graphs and networks stored as an adjacency matrix."""

from __future__ import annotations

import math
import re
from collections import deque
from enum import IntEnum
from typing import Iterable, Iterator

INFINITY = math.inf
MAX_VERTEX_NUM = 20

_INTEGER = re.compile(r"[-+]?\d+")


class GraphKind(IntEnum):
    """Kind of graph: directed/undirected, weighted (network) or not."""

    DG = 0
    DN = 1
    UDG = 2
    UDN = 3

    @property
    def is_network(self) -> bool:
        return bool(self.value % 2)

    @property
    def is_directed(self) -> bool:
        return self in (GraphKind.DG, GraphKind.DN)


class GraphError(Exception):
    """Base error for graph operations."""


class VertexNotFoundError(GraphError, LookupError):
    """A vertex named in an operation is not in the graph."""


class GraphFullError(GraphError):
    """The graph already holds the maximum number of vertices."""


class _Reader:
    """Reads single characters and integers from a text, skipping whitespace."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def char(self) -> str:
        self._skip()
        if self._pos >= len(self._text):
            raise GraphError("unexpected end of graph description")
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def integer(self) -> int:
        self._skip()
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            raise GraphError(f"expected an integer at offset {self._pos}")
        self._pos = match.end()
        return int(match.group())


class MGraph:
    """A graph or network whose arcs are kept in a square matrix.

    Vertex positions ("orders") are 1-based.
    """

    def __init__(self, kind: GraphKind | int, vertices: Iterable[str]) -> None:
        self.kind = GraphKind(kind)
        self._vertices = list(vertices)
        if len(self._vertices) > MAX_VERTEX_NUM:
            raise GraphFullError(f"at most {MAX_VERTEX_NUM} vertices are allowed")
        n = len(self._vertices)
        self._matrix = [[self.no_arc] * n for _ in range(n)]
        self.arc_count = 0

    @property
    def no_arc(self) -> float:
        """Matrix value that marks the absence of an arc."""
        return INFINITY if self.kind.is_network else 0

    @property
    def vertices(self) -> tuple[str, ...]:
        return tuple(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def _index(self, vertex: str) -> int:
        try:
            return self._vertices.index(vertex)
        except ValueError:
            raise VertexNotFoundError(vertex) from None

    def _neighbours(self, index: int) -> Iterator[int]:
        no_arc = self.no_arc
        return (j for j, cell in enumerate(self._matrix[index]) if cell != no_arc)

    def clear(self) -> None:
        """Remove every vertex and arc."""
        self._vertices = []
        self._matrix = []
        self.arc_count = 0

    def locate(self, vertex: str) -> int:
        """Return the 1-based position of a vertex."""
        return self._index(vertex) + 1

    def get_vertex(self, order: int) -> str:
        if not 1 <= order <= len(self._vertices):
            raise IndexError(f"no vertex at position {order}")
        return self._vertices[order - 1]

    def put_vertex(self, vertex: str, value: str) -> None:
        self._vertices[self._index(vertex)] = value

    def first_adjacent(self, vertex: str) -> int | None:
        """Position of the first vertex adjacent to ``vertex``, or None."""
        i = self._index(vertex)
        return next((j + 1 for j in self._neighbours(i)), None)

    def next_adjacent(self, vertex: str, after: str) -> int | None:
        """Position of the next vertex adjacent to ``vertex`` beyond ``after``."""
        i = self._index(vertex)
        k = self._index(after)
        return next((j + 1 for j in self._neighbours(i) if j > k), None)

    def insert_vertex(self, vertex: str) -> None:
        if len(self._vertices) >= MAX_VERTEX_NUM:
            raise GraphFullError(f"at most {MAX_VERTEX_NUM} vertices are allowed")
        no_arc = self.no_arc
        self._vertices.append(vertex)
        for row in self._matrix:
            row.append(no_arc)
        self._matrix.append([no_arc] * len(self._vertices))

    def delete_vertex(self, vertex: str) -> None:
        """Remove a vertex together with every arc touching it."""
        k = self._index(vertex)
        no_arc = self.no_arc
        outgoing = sum(1 for cell in self._matrix[k] if cell != no_arc)
        if self.kind.is_directed:
            incoming = sum(1 for row in self._matrix if row[k] != no_arc)
            loop = 1 if self._matrix[k][k] != no_arc else 0
            self.arc_count -= outgoing + incoming - loop
        else:
            self.arc_count -= outgoing
        del self._matrix[k]
        for row in self._matrix:
            del row[k]
        del self._vertices[k]

    def insert_arc(self, tail: str, head: str, weight: float) -> None:
        """Add the arc <tail, head> with the given weight (1 for plain graphs)."""
        i = self._index(tail)
        j = self._index(head)
        self._matrix[i][j] = weight
        if not self.kind.is_directed:
            self._matrix[j][i] = weight
        self.arc_count += 1

    def delete_arc(self, tail: str, head: str) -> None:
        i = self._index(tail)
        j = self._index(head)
        self._matrix[i][j] = self.no_arc
        if not self.kind.is_directed:
            self._matrix[j][i] = self.no_arc
        self.arc_count -= 1

    def weight(self, tail: str, head: str) -> float:
        """Matrix value of the arc <tail, head>; ``no_arc`` when absent."""
        return self._matrix[self._index(tail)][self._index(head)]

    def dfs(self) -> Iterator[str]:
        """Yield vertices in depth-first order."""
        visited = [False] * len(self._vertices)

        def visit(v: int) -> Iterator[str]:
            visited[v] = True
            yield self._vertices[v]
            for w in self._neighbours(v):
                if not visited[w]:
                    yield from visit(w)

        for v in range(len(self._vertices)):
            if not visited[v]:
                yield from visit(v)

    def bfs(self) -> Iterator[str]:
        """Yield vertices in breadth-first order."""
        visited = [False] * len(self._vertices)
        for start in range(len(self._vertices)):
            if visited[start]:
                continue
            visited[start] = True
            yield self._vertices[start]
            queue = deque([start])
            while queue:
                e = queue.popleft()
                for w in self._neighbours(e):
                    if not visited[w]:
                        visited[w] = True
                        yield self._vertices[w]
                        queue.append(w)

    def render(self) -> str:
        """Return the adjacency matrix as text."""
        if not self._vertices and not self.arc_count:
            return "empty graph\n"
        lines = ["  " + "".join(f"{v:>2} " for v in self._vertices)]
        for vertex, row in zip(self._vertices, self._matrix):
            cells = "".join("∞ " if cell == INFINITY else f"{cell:2d} " for cell in row)
            lines.append(f"{vertex} {cells}")
        return "\n".join(lines) + "\n"


def read_mgraph(text: str) -> MGraph:
    """Build a graph from its text description.

    The text holds the kind, the vertex count, arc count and info flag,
    the vertex characters, then each arc as two vertex characters followed
    by a weight when the kind is a network.
    """
    reader = _Reader(text)
    try:
        kind = GraphKind(reader.integer())
    except ValueError:
        raise GraphError("unknown graph kind") from None
    vertex_count = reader.integer()
    arc_count = reader.integer()
    reader.integer()  # arc info flag; arcs carry no extra information
    graph = MGraph(kind, [reader.char() for _ in range(vertex_count)])
    for _ in range(arc_count):
        tail = reader.char()
        head = reader.char()
        weight = reader.integer() if kind.is_network else 1
        graph.insert_arc(tail, head, weight)
    return graph