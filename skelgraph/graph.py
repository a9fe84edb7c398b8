"""Skeleton point sets and the sparse skeleton graph."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

Point = tuple[float, float, float]
ORIGIN: Point = (0.0, 0.0, 0.0)


@dataclass
class SkeletonPoint:
    """A point on the skeleton diagram with its obstacle distance."""

    point: Point = ORIGIN
    distance: float = 0.0
    num_basis_points: int = 0
    basis_directions: list[Point] = field(default_factory=list)


def _split(points: list[SkeletonPoint]) -> tuple[list[Point], list[float]]:
    return [p.point for p in points], [p.distance for p in points]


@dataclass
class Skeleton:
    """All skeleton points, with the subsets that are edges and vertices."""

    skeleton_points: list[SkeletonPoint] = field(default_factory=list)
    edge_points: list[SkeletonPoint] = field(default_factory=list)
    vertex_points: list[SkeletonPoint] = field(default_factory=list)

    def pointcloud(self) -> list[Point]:
        """Coordinates of the edge points."""
        return [p.point for p in self.edge_points]

    def pointcloud_with_distances(self) -> tuple[list[Point], list[float]]:
        return _split(self.skeleton_points)

    def edge_pointcloud_with_distances(self) -> tuple[list[Point], list[float]]:
        return _split(self.edge_points)

    def vertex_pointcloud_with_distances(self) -> tuple[list[Point], list[float]]:
        return _split(self.vertex_points)


@dataclass
class SkeletonVertex:
    vertex_id: int = -1
    point: Point = ORIGIN
    distance: float = 0.0
    edge_list: list[int] = field(default_factory=list)
    subgraph_id: int = 0


@dataclass
class SkeletonEdge:
    edge_id: int = -1
    start_vertex: int = -1
    end_vertex: int = -1
    start_point: Point = ORIGIN
    end_point: Point = ORIGIN
    start_distance: float = 0.0
    end_distance: float = 0.0


class SparseSkeletonGraph:
    """Vertices and edges keyed by id; edges keep their end vertices linked."""

    def __init__(self) -> None:
        self.vertex_map: dict[int, SkeletonVertex] = {}
        self.edge_map: dict[int, SkeletonEdge] = {}
        self._next_vertex_id = 0
        self._next_edge_id = 0

    def add_vertex(self, vertex: SkeletonVertex) -> int:
        """Store a copy of the vertex under a fresh id and return the id."""
        vertex_id = self._next_vertex_id
        self._next_vertex_id += 1
        self.vertex_map[vertex_id] = replace(
            vertex, vertex_id=vertex_id, edge_list=list(vertex.edge_list)
        )
        return vertex_id

    def add_edge(self, edge: SkeletonEdge) -> int:
        """Store a copy of the edge, hook it to its vertices and return its id."""
        start = self.vertex(edge.start_vertex)
        end = self.vertex(edge.end_vertex)
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        self.edge_map[edge_id] = replace(
            edge, edge_id=edge_id, start_point=start.point, end_point=end.point
        )
        start.edge_list.append(edge_id)
        end.edge_list.append(edge_id)
        return edge_id

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self.vertex_map

    def has_edge(self, edge_id: int) -> bool:
        return edge_id in self.edge_map

    def vertex(self, vertex_id: int) -> SkeletonVertex:
        try:
            return self.vertex_map[vertex_id]
        except KeyError:
            raise KeyError(f"no vertex with id {vertex_id}") from None

    def edge(self, edge_id: int) -> SkeletonEdge:
        try:
            return self.edge_map[edge_id]
        except KeyError:
            raise KeyError(f"no edge with id {edge_id}") from None

    def clear(self) -> None:
        self._next_vertex_id = 0
        self._next_edge_id = 0
        self.vertex_map.clear()
        self.edge_map.clear()

    def vertex_ids(self) -> list[int]:
        return sorted(self.vertex_map)

    def edge_ids(self) -> list[int]:
        return sorted(self.edge_map)

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and every edge attached to it; unknown ids are ignored."""
        vertex = self.vertex_map.get(vertex_id)
        if vertex is None:
            return
        for edge_id in list(vertex.edge_list):
            self.remove_edge(edge_id)
        del self.vertex_map[vertex_id]

    def remove_edge(self, edge_id: int) -> None:
        """Remove an edge and unlink it from its vertices; unknown ids are ignored."""
        edge = self.edge_map.get(edge_id)
        if edge is None:
            return
        for end_id in (edge.start_vertex, edge.end_vertex):
            edge_list = self.vertex(end_id).edge_list
            if edge_id in edge_list:
                edge_list.remove(edge_id)
        del self.edge_map[edge_id]

    def are_vertices_directly_connected(self, vertex_id_1: int, vertex_id_2: int) -> bool:
        return any(
            vertex_id_2 in (self.edge(e).start_vertex, self.edge(e).end_vertex)
            for e in self.vertex(vertex_id_1).edge_list
        )

    def add_serialized_vertex(self, vertex: SkeletonVertex) -> None:
        """Store a vertex under its own id, as read from a file."""
        self.vertex_map[vertex.vertex_id] = vertex

    def add_serialized_edge(self, edge: SkeletonEdge) -> None:
        """Store an edge under its own id, as read from a file."""
        self.edge_map[edge.edge_id] = edge