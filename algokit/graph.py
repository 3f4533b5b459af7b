"""Adjacency-list graph with breadth-first and depth-first traversal."""

from __future__ import annotations

from collections import deque


class Graph:
    """A graph over vertices 0..v-1 stored as adjacency lists."""

    def __init__(self, v: int) -> None:
        if v < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertex_count = v
        self.adjacency: list[list[int]] = [[] for _ in range(v)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, i: int, j: int, undirected: bool = True) -> None:
        """Add an edge from i to j, and from j to i when undirected."""
        self._check(i)
        self._check(j)
        self.adjacency[i].append(j)
        if undirected:
            self.adjacency[j].append(i)

    def bfs(self, source: int) -> list[int]:
        """Return vertices reachable from source in breadth-first order."""
        self._check(source)
        visited = [False] * self.vertex_count
        visited[source] = True
        queue = deque([source])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self.adjacency[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def dfs(self, source: int) -> list[int]:
        """Return vertices reachable from source in depth-first order."""
        self._check(source)
        visited = [False] * self.vertex_count
        visited[source] = True
        order = [source]
        stack = [iter(self.adjacency[source])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append(iter(self.adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order