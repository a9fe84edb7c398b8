"""A* planning over the vertices and edges of a sparse skeleton graph."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .graph import Point, SparseSkeletonGraph


def _distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(sum((p - q) ** 2 for p, q in zip(a, b)))


def _squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((p - q) ** 2 for p, q in zip(a, b))


class SparseGraphPlanner:
    """Plans paths through a sparse skeleton graph.

    Call :meth:`setup` after the graph is set or changed; it takes a
    snapshot of the vertex positions used for nearest-vertex lookups.
    """

    def __init__(self, graph: SparseSkeletonGraph | None = None) -> None:
        self.graph = graph
        self._points: list[tuple[int, Point]] | None = None

    def _require_graph(self) -> SparseSkeletonGraph:
        if self.graph is None:
            raise ValueError("no graph set")
        return self.graph

    def setup(self) -> None:
        """Index the current vertex positions for nearest-vertex lookups."""
        graph = self._require_graph()
        self._points = [
            (vertex_id, graph.vertex(vertex_id).point)
            for vertex_id in graph.vertex_ids()
        ]

    def closest_vertices(self, point: Sequence[float], num_vertices: int) -> list[int]:
        """Return the ids of up to ``num_vertices`` vertices nearest to ``point``.

        The ids are ordered by increasing distance, ties by increasing id.
        """
        if self._points is None:
            raise RuntimeError("setup() must be called before searching")
        if num_vertices <= 0:
            return []
        ranked = sorted(
            self._points,
            key=lambda item: (_squared_distance(item[1], point), item[0]),
        )
        return [vertex_id for vertex_id, _ in ranked[:num_vertices]]

    def path_between_vertices(
        self, start_vertex_id: int, end_vertex_id: int
    ) -> list[int] | None:
        """Return the vertex ids of a path from start to end, or None if unreachable."""
        graph = self._require_graph()
        end_point = graph.vertex(end_vertex_id).point
        start_point = graph.vertex(start_vertex_id).point

        f_score = {start_vertex_id: _distance(end_point, start_point)}
        g_score = {start_vertex_id: 0.0}
        parents: dict[int, int] = {}
        open_set = {start_vertex_id}
        closed_set: set[int] = set()

        while open_set:
            current_id = min(sorted(open_set), key=f_score.__getitem__)
            open_set.discard(current_id)
            if current_id == end_vertex_id:
                return _solution_path(end_vertex_id, parents)
            closed_set.add(current_id)

            vertex = graph.vertex(current_id)
            for edge_id in vertex.edge_list:
                edge = graph.edge(edge_id)
                neighbor_id = (
                    edge.end_vertex if edge.start_vertex == current_id else edge.start_vertex
                )
                if neighbor_id in closed_set:
                    continue
                open_set.add(neighbor_id)
                neighbor = graph.vertex(neighbor_id)
                tentative = g_score[current_id] + _distance(neighbor.point, vertex.point)
                if neighbor_id not in g_score or g_score[neighbor_id] < tentative:
                    g_score[neighbor_id] = tentative
                    f_score[neighbor_id] = tentative + _distance(end_point, neighbor.point)
                    parents[neighbor_id] = current_id
        return None

    def path(
        self, start_position: Sequence[float], end_position: Sequence[float]
    ) -> list[Point] | None:
        """Plan between the vertices nearest to two positions.

        Returns the vertex coordinates along the path, or None when the two
        vertices are not connected.
        """
        graph = self._require_graph()
        start_ids = self.closest_vertices(start_position, 1)
        end_ids = self.closest_vertices(end_position, 1)
        if not start_ids or not end_ids:
            raise ValueError("graph has no vertices")
        vertex_path = self.path_between_vertices(start_ids[0], end_ids[0])
        if vertex_path is None:
            return None
        return [graph.vertex(vertex_id).point for vertex_id in vertex_path]


def _solution_path(end_id: int, parents: dict[int, int]) -> list[int]:
    path = [end_id]
    current = end_id
    while current in parents:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path