"""Undirected graphs as an adjacency matrix or as adjacency lists."""

from __future__ import annotations

from collections import deque


def _check_size(num_vertices: int) -> None:
    if num_vertices < 0:
        raise ValueError("number of vertices must not be negative")


class MatrixGraph:
    """Undirected graph stored as an adjacency matrix.

    Cells hold 1 for an edge, 0 for none and -1 on the diagonal.
    """

    def __init__(self, num_vertices: int) -> None:
        _check_size(num_vertices)
        self.num_vertices = num_vertices
        self._matrix = [
            [-1 if row == col else 0 for col in range(num_vertices)]
            for row in range(num_vertices)
        ]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} out of range")

    @property
    def matrix(self) -> tuple[tuple[int, ...], ...]:
        """A read-only snapshot of the adjacency matrix."""
        return tuple(tuple(row) for row in self._matrix)

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._matrix[src][dest] = 1
        self._matrix[dest][src] = 1

    def format(self) -> str:
        """Render one line per vertex: ``i: c0 c1 ...``."""
        return "".join(
            f"{index}: " + "".join(f"{cell} " for cell in row) + "\n"
            for index, row in enumerate(self._matrix)
        )

    def __str__(self) -> str:
        return self.format()


class ListGraph:
    """Undirected graph stored as adjacency lists, newest neighbour first."""

    def __init__(self, num_vertices: int) -> None:
        _check_size(num_vertices)
        self.num_vertices = num_vertices
        self._adjacency: list[deque[int]] = [deque() for _ in range(num_vertices)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._adjacency[src].appendleft(dest)
        self._adjacency[dest].appendleft(src)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, most recently added first."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def format(self) -> str:
        """Render each vertex's adjacency list as a ``head -> ...`` chain."""
        return "".join(
            f"\nAdjacency list of vertex {index}\n head "
            + "".join(f"-> {neighbour}" for neighbour in neighbours)
            + "\n"
            for index, neighbours in enumerate(self._adjacency)
        )

    def __str__(self) -> str:
        return self.format()

    def dfs(self, start: int) -> list[int]:
        """Return vertices in iterative depth-first visiting order."""
        self._check_vertex(start)
        visited = [False] * self.num_vertices
        order: list[int] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if not visited[vertex]:
                visited[vertex] = True
                order.append(vertex)
            stack.extend(n for n in self._adjacency[vertex] if not visited[n])
        return order

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first visiting order."""
        self._check_vertex(start)
        visited = [False] * self.num_vertices
        visited[start] = True
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    pending.append(neighbour)
        return order