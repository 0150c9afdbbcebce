"""Graph algorithms: connected components and minimum spanning trees."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence


def connected_components(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Return the connected components of an undirected graph.

    ``edges`` holds ``(u, v)`` or ``(u, v, weight)`` tuples; weights are
    ignored. Components appear in order of their smallest vertex and list
    their vertices in depth-first visiting order.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        u, v, *_ = edge
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * vertex_count
    components: list[list[int]] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        stack: list[Iterator[int]] = [iter(adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    component.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


class DisjointSet:
    """Union-find over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._parent: list[int | None] = [None] * size
        self._rank = [1] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        if not 0 <= item < self.size:
            raise IndexError(f"item {item} out of range")
        root = item
        while (parent := self._parent[root]) is not None:
            root = parent
        while item != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following  # type: ignore[assignment]
        return root

    def union(self, first: int, second: int) -> bool:
        """Join the sets of ``first`` and ``second``; return False if already joined."""
        root1 = self.find(first)
        root2 = self.find(second)
        if root1 == root2:
            return False
        if self._rank[root1] < self._rank[root2]:
            self._parent[root1] = root2
            self._rank[root2] += self._rank[root2]
        else:
            self._parent[root2] = root1
            self._rank[root1] += self._rank[root1]
        return True


class Graph:
    """An undirected weighted graph kept as an edge list."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.edges: list[tuple[int, int, int]] = []

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an edge between ``u`` and ``v`` of the given weight."""
        for vertex in (u, v):
            if not 0 <= vertex < self.vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
        self.edges.append((weight, u, v))

    def kruskal_mst(self) -> int:
        """Return the total weight of a minimum spanning forest (Kruskal)."""
        components = DisjointSet(self.vertex_count)
        total = 0
        for weight, u, v in sorted(self.edges):
            if components.find(u) != components.find(v):
                components.union(u, v)
                total += weight
        return total


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return a minimum spanning tree of an adjacency matrix as (parent, vertex, weight).

    A zero entry means no edge. The tree is grown from vertex 0; one entry
    is returned for every other vertex, in vertex order.
    """
    count = len(matrix)
    if any(len(row) != count for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if count == 0:
        return []
    value = [math.inf] * count
    parent = [-1] * count
    in_tree = [False] * count
    value[0] = 0
    for _ in range(count - 1):
        candidates = [v for v in range(count) if not in_tree[v] and value[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        chosen = min(candidates, key=value.__getitem__)
        in_tree[chosen] = True
        for vertex, weight in enumerate(matrix[chosen]):
            if weight and not in_tree[vertex] and weight < value[vertex]:
                value[vertex] = weight
                parent[vertex] = chosen
    if any(p == -1 for p in parent[1:]):
        raise ValueError("graph is not connected")
    return [(parent[v], v, matrix[parent[v]][v]) for v in range(1, count)]