"""Undirected weighted graph stored as an adjacency matrix."""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO


class Graph:
    """A weighted graph of positive integer vertices kept in an adjacency matrix.

    Vertices are kept in insertion order; row and column ``i`` of the matrix
    belong to the ``i``-th vertex.  A weight of zero means "no edge".
    """

    def __init__(self) -> None:
        self._ids: list[int] = []
        self._matrix: list[list[int]] = []
        self._edge_count = 0

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._ids

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self._ids)

    @property
    def edge_count(self) -> int:
        """Number of edges as tracked by the graph's operations."""
        return self._edge_count

    @property
    def vertices(self) -> list[int]:
        """Vertex ids in insertion order."""
        return list(self._ids)

    def is_empty(self) -> bool:
        return not self._ids

    def _index(self, vertex: int) -> int | None:
        try:
            return self._ids.index(vertex)
        except ValueError:
            return None

    def _require_index(self, vertex: int) -> int:
        index = self._index(vertex)
        if index is None:
            raise KeyError(vertex)
        return index

    def _grow(self, vertex: int) -> None:
        self._ids.append(vertex)
        for row in self._matrix:
            row.append(0)
        self._matrix.append([0] * len(self._ids))

    def add_vertex(self, new_vertex: int, old_vertex: int, weight: int) -> bool:
        """Add ``new_vertex`` joined to ``old_vertex`` by an edge of ``weight``.

        The first vertex of an empty graph is added without an edge.  Fails
        when ``new_vertex`` is already present or not positive, or when
        ``old_vertex`` is missing from a non-empty graph.  The vertex is kept
        even if the edge itself is rejected.
        """
        if new_vertex in self._ids or new_vertex <= 0:
            return False
        was_empty = self.is_empty()
        if not was_empty and old_vertex not in self._ids:
            return False
        self._grow(new_vertex)
        if not was_empty:
            self.add_edge(new_vertex, old_vertex, weight)
        return True

    def add_edge(self, vertex_one: int, vertex_two: int, weight: int) -> bool:
        """Join two distinct, unconnected vertices with a positive weight."""
        row = self._index(vertex_one)
        column = self._index(vertex_two)
        if row is None or column is None or row == column:
            return False
        if self._matrix[row][column] != 0 or weight <= 0:
            return False
        self._matrix[row][column] = weight
        self._matrix[column][row] = weight
        self._edge_count += 1
        return True

    def delete_edge(self, vertex_one: int, vertex_two: int) -> bool:
        """Clear the matrix entry from ``vertex_one`` to ``vertex_two``.

        Only allowed when the row of ``vertex_one`` and the column of
        ``vertex_two`` each hold more than one edge, so neither vertex is
        left cut off.  Only that one entry is cleared.
        """
        row = self._index(vertex_one)
        column = self._index(vertex_two)
        if row is None or column is None:
            return False
        row_edges = sum(1 for weight in self._matrix[row] if weight > 0)
        column_edges = sum(1 for line in self._matrix if line[column] > 0)
        if row_edges > 1 and column_edges > 1:
            self._matrix[row][column] = 0
            self._edge_count -= 1
            return True
        return False

    def remove_vertex(self, value: int) -> bool:
        """Remove a vertex and its edges.

        A vertex with two or more edges first has each neighbour joined to the
        first vertex of the graph with weight 1, to keep the graph connected.
        """
        index = self._index(value)
        if index is None:
            return False
        neighbours = [
            self._ids[i] for i, weight in enumerate(self._matrix[index]) if weight > 0
        ]
        if len(neighbours) >= 2:
            anchor = self._ids[0]
            for neighbour in neighbours:
                self.add_edge(neighbour, anchor, 1)
        for row in self._matrix:
            del row[index]
        del self._matrix[index]
        del self._ids[index]
        self._edge_count -= len(neighbours)
        return True

    def is_connected(self, vertex_one: int, vertex_two: int) -> bool:
        """Whether the matrix holds an edge from ``vertex_one`` to ``vertex_two``."""
        row = self._index(vertex_one)
        column = self._index(vertex_two)
        if row is None or column is None:
            return False
        return self._matrix[row][column] > 0

    def clear(self) -> None:
        self._ids.clear()
        self._matrix.clear()
        self._edge_count = 0

    def format_matrix(self) -> str:
        """The adjacency matrix as text, one row per line."""
        return "".join(
            "".join(f"{weight:<5}  " for weight in row) + "\n" for row in self._matrix
        )

    def print_matrix(self, file: TextIO | None = None) -> None:
        (file if file is not None else sys.stdout).write(self.format_matrix())

    def breadth_first_search(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._require_index(start)
        order: list[int] = []
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            row = self._matrix[self._ids.index(current)]
            for vertex, weight in zip(self._ids, row):
                if weight > 0 and vertex not in seen:
                    seen.add(vertex)
                    queue.append(vertex)
        return order

    def depth_first_search(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first preorder."""
        first = self._require_index(start)
        visited = [False] * len(self._ids)
        visited[first] = True
        order = [start]
        stack = [(first, iter(range(len(self._ids))))]
        while stack:
            index, candidates = stack[-1]
            for i in candidates:
                if self._matrix[index][i] > 0 and not visited[i]:
                    visited[i] = True
                    order.append(self._ids[i])
                    stack.append((i, iter(range(len(self._ids)))))
                    break
            else:
                stack.pop()
        return order