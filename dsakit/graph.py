"""Adjacency-list graphs with breadth- and depth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Traversal:
    """The visit order and discovery tree produced by a graph search."""

    start: Hashable
    order: list = field(default_factory=list)
    parent: dict = field(default_factory=dict)

    def path_to(self, end: Hashable) -> list:
        """Return the tree path from ``start`` to ``end``."""
        if end not in self.parent:
            raise ValueError(f"vertex {end!r} was not reached from {self.start!r}")
        path = []
        vertex: Optional[Hashable] = end
        while vertex is not None:
            path.append(vertex)
            vertex = self.parent[vertex]
        path.reverse()
        return path


class Graph:
    """A graph stored as ordered adjacency lists."""

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self.edge_count = 0
        self._adjacency: dict[Hashable, list] = {}

    def add_edge(self, x: Hashable, y: Hashable) -> None:
        """Add the edge (x, y), and (y, x) too when the graph is undirected."""
        self._adjacency.setdefault(x, []).append(y)
        self._adjacency.setdefault(y, [])
        if not self.directed:
            self._adjacency[y].append(x)
        self.edge_count += 1

    def neighbours(self, vertex: Hashable) -> list:
        """Return the neighbours of ``vertex`` in insertion order."""
        return list(self._adjacency.get(vertex, ()))

    def degree(self, vertex: Hashable) -> int:
        """Return the out-degree of ``vertex``."""
        return len(self._adjacency.get(vertex, ()))

    def vertices(self) -> list:
        """Return all vertices in sorted order."""
        return sorted(self._adjacency)

    def _require(self, vertex: Hashable) -> None:
        if vertex not in self._adjacency:
            raise KeyError(vertex)

    def bfs(self, start: Hashable) -> Traversal:
        """Breadth-first search from ``start``."""
        self._require(start)
        result = Traversal(start, parent={start: None})
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            result.order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in result.parent:
                    result.parent[neighbour] = vertex
                    queue.append(neighbour)
        return result

    def dfs(self, start: Hashable) -> Traversal:
        """Depth-first search from ``start``, visiting neighbours in order."""
        self._require(start)
        result = Traversal(start, order=[start], parent={start: None})
        stack: list[tuple[Hashable, Iterator]] = [
            (start, iter(self._adjacency[start]))
        ]
        while stack:
            vertex, pending = stack[-1]
            for neighbour in pending:
                if neighbour not in result.parent:
                    result.parent[neighbour] = vertex
                    result.order.append(neighbour)
                    stack.append((neighbour, iter(self._adjacency[neighbour])))
                    break
            else:
                stack.pop()
        return result

    def format(self) -> str:
        """Return one ``vertex: neighbours`` line per vertex."""
        return "\n".join(
            f"{vertex}: " + " ".join(str(n) for n in self._adjacency[vertex])
            for vertex in self.vertices()
        )

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency


def _token(text: str):
    try:
        return int(text)
    except ValueError:
        return text


def parse_edges(text: str, directed: bool = False) -> Graph:
    """Build a graph from whitespace-separated vertex pairs.

    Tokens that read as integers become ints; others stay strings.
    """
    tokens = [_token(t) for t in text.split()]
    if len(tokens) % 2:
        raise ValueError("edge list has an odd number of vertices")
    graph = Graph(directed)
    for x, y in zip(tokens[::2], tokens[1::2]):
        graph.add_edge(x, y)
    return graph