"""Grid problems: largest island and minimum-cost path."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

_STEPS = [(1, 0), (-1, 0), (0, 1), (0, -1)]


def largest_island(matrix: Sequence[Sequence[int]]) -> int:
    """Size of the largest 4-connected region of cells equal to 1."""
    rows = len(matrix)
    if rows == 0:
        return 0
    cols = len(matrix[0])
    visited = [[False] * cols for _ in range(rows)]
    largest = 0
    for i in range(rows):
        for j in range(cols):
            if visited[i][j] or matrix[i][j] != 1:
                continue
            visited[i][j] = True
            stack = [(i, j)]
            size = 0
            while stack:
                x, y = stack.pop()
                size += 1
                for dx, dy in _STEPS:
                    nx, ny = x + dx, y + dy
                    if (
                        0 <= nx < rows
                        and 0 <= ny < cols
                        and matrix[nx][ny] == 1
                        and not visited[nx][ny]
                    ):
                        visited[nx][ny] = True
                        stack.append((nx, ny))
            largest = max(largest, size)
    return largest


def shortest_path(grid: Sequence[Sequence[int]]) -> int:
    """Minimum sum of cell costs on a 4-way path from top-left to bottom-right.

    The cost of the starting cell is included.
    """
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    infinity = float("inf")
    dist: list[list[float]] = [[infinity] * cols for _ in range(rows)]
    dist[0][0] = grid[0][0]
    heap = [(grid[0][0], 0, 0)]
    while heap:
        cost, x, y = heapq.heappop(heap)
        if cost > dist[x][y]:
            continue
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols:
                candidate = cost + grid[nx][ny]
                if candidate < dist[nx][ny]:
                    dist[nx][ny] = candidate
                    heapq.heappush(heap, (candidate, nx, ny))
    return int(dist[rows - 1][cols - 1])