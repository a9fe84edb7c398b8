"""Saving and loading sparse skeleton graphs as JSON documents."""

from __future__ import annotations

import json
import os
from typing import Any

from .graph import SkeletonEdge, SkeletonVertex, SparseSkeletonGraph


class GraphFormatError(ValueError):
    """Raised when a graph file cannot be understood."""


def vertex_to_record(vertex: SkeletonVertex) -> dict[str, Any]:
    x, y, z = vertex.point
    return {
        "vertex_id": vertex.vertex_id,
        "point_x": x,
        "point_y": y,
        "point_z": z,
        "subgraph_id": vertex.subgraph_id,
        "edge_list": list(vertex.edge_list),
    }


def edge_to_record(edge: SkeletonEdge) -> dict[str, Any]:
    sx, sy, sz = edge.start_point
    ex, ey, ez = edge.end_point
    return {
        "edge_id": edge.edge_id,
        "start_vertex": edge.start_vertex,
        "end_vertex": edge.end_vertex,
        "start_point_x": sx,
        "start_point_y": sy,
        "start_point_z": sz,
        "end_point_x": ex,
        "end_point_y": ey,
        "end_point_z": ez,
        "start_distance": edge.start_distance,
        "end_distance": edge.end_distance,
    }


def record_to_vertex(record: dict[str, Any]) -> SkeletonVertex:
    """Build a vertex from a record; absent fields take their zero value."""
    return SkeletonVertex(
        vertex_id=int(record.get("vertex_id", 0)),
        point=(
            float(record.get("point_x", 0.0)),
            float(record.get("point_y", 0.0)),
            float(record.get("point_z", 0.0)),
        ),
        subgraph_id=int(record.get("subgraph_id", 0)),
        edge_list=[int(e) for e in record.get("edge_list", [])],
    )


def record_to_edge(record: dict[str, Any]) -> SkeletonEdge:
    """Build an edge from a record; absent fields take their zero value."""

    def coords(prefix: str) -> tuple[float, float, float]:
        return (
            float(record.get(f"{prefix}_x", 0.0)),
            float(record.get(f"{prefix}_y", 0.0)),
            float(record.get(f"{prefix}_z", 0.0)),
        )

    return SkeletonEdge(
        edge_id=int(record.get("edge_id", 0)),
        start_vertex=int(record.get("start_vertex", 0)),
        end_vertex=int(record.get("end_vertex", 0)),
        start_point=coords("start_point"),
        end_point=coords("end_point"),
        start_distance=float(record.get("start_distance", 0.0)),
        end_distance=float(record.get("end_distance", 0.0)),
    )


def save_graph(filename: str | os.PathLike[str], graph: SparseSkeletonGraph) -> None:
    """Write the graph to a file, replacing any previous contents."""
    if not os.fspath(filename):
        raise ValueError("filename must not be empty")
    document = {
        "vertices": [vertex_to_record(graph.vertex(i)) for i in graph.vertex_ids()],
        "edges": [edge_to_record(graph.edge(i)) for i in graph.edge_ids()],
    }
    with open(filename, "w", encoding="utf-8") as outfile:
        json.dump(document, outfile)


def load_graph(filename: str | os.PathLike[str]) -> SparseSkeletonGraph:
    """Read a graph written by :func:`save_graph`."""
    if not os.fspath(filename):
        raise ValueError("filename must not be empty")
    with open(filename, encoding="utf-8") as infile:
        try:
            document = json.load(infile)
        except json.JSONDecodeError as exc:
            raise GraphFormatError(f"not a skeleton graph file: {exc}") from exc
    if not isinstance(document, dict):
        raise GraphFormatError("skeleton graph file must hold an object")

    graph = SparseSkeletonGraph()
    try:
        for record in document.get("vertices", []):
            graph.add_serialized_vertex(record_to_vertex(record))
        for record in document.get("edges", []):
            graph.add_serialized_edge(record_to_edge(record))
    except (AttributeError, TypeError, ValueError) as exc:
        raise GraphFormatError(f"malformed skeleton graph record: {exc}") from exc
    return graph