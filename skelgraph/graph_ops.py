"""Operations on the sparse skeleton graph: path deviation and subgraph labels."""

from __future__ import annotations

import math
from collections.abc import MutableMapping, Sequence

from .graph import Point, SparseSkeletonGraph


def _sub(a: Sequence[float], b: Sequence[float]) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Point, b: Point) -> Point:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _norm(v: Point) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def max_distance_from_line(
    start: Sequence[float],
    end: Sequence[float],
    path: Sequence[Sequence[float]],
) -> tuple[float, int]:
    """Return the largest distance of a path point from the line start-end.

    The result is ``(distance, index)`` where ``index`` is the position in
    ``path`` of the furthest point.  An empty path, or one lying on the line,
    gives ``(0.0, 0)``; so does a degenerate line whose ends coincide.
    """
    direction = _sub(end, start)
    length = _norm(direction)
    max_d = 0.0
    max_index = 0
    if length == 0.0:
        return max_d, max_index
    for index, point in enumerate(path):
        d = _norm(_cross(direction, _sub(start, point))) / length
        if d > max_d:
            max_d = d
            max_index = index
    return max_d, max_index


def label_subgraph(graph: SparseSkeletonGraph, vertex_id: int, subgraph_id: int) -> int:
    """Give every vertex reachable from ``vertex_id`` the label ``subgraph_id``.

    Returns how many vertices were newly labelled; vertices already carrying
    the label are not counted and not explored further.
    """
    labelled = 0
    pending = [vertex_id]
    while pending:
        current_id = pending.pop()
        vertex = graph.vertex(current_id)
        if vertex.subgraph_id == subgraph_id:
            continue
        vertex.subgraph_id = subgraph_id
        labelled += 1
        for edge_id in vertex.edge_list:
            edge = graph.edge(edge_id)
            neighbor = edge.end_vertex if edge.start_vertex == current_id else edge.start_vertex
            pending.append(neighbor)
    return labelled


def label_all_subgraphs(graph: SparseSkeletonGraph) -> dict[int, int]:
    """Label the connected components of the graph, numbering them from 1.

    Vertices already carrying a positive label are left alone.  A component
    of a single vertex is removed from the graph.  Returns a mapping from
    each remaining subgraph id to one of its vertices.
    """
    examples: dict[int, int] = {}
    last_subgraph = 0
    for vertex_id in graph.vertex_ids():
        if not graph.has_vertex(vertex_id):
            continue
        if graph.vertex(vertex_id).subgraph_id > 0:
            continue
        last_subgraph += 1
        if label_subgraph(graph, vertex_id, last_subgraph) == 1:
            graph.remove_vertex(vertex_id)
        else:
            examples[last_subgraph] = vertex_id
    return examples


def merge_subgraphs(
    subgraph_1: int, subgraph_2: int, subgraph_map: MutableMapping[int, int]
) -> int:
    """Merge two subgraphs in ``subgraph_map``, always keeping the lower id.

    Every entry that maps to the higher of the two targets is pointed at the
    lower one.  Unknown subgraphs are entered as mapping to 0.  Returns the
    id both subgraphs now map to.
    """
    target_1 = subgraph_map.setdefault(subgraph_1, 0)
    target_2 = subgraph_map.setdefault(subgraph_2, 0)
    new_subgraph = min(target_1, target_2)
    old_subgraph = max(target_1, target_2)
    for key, value in subgraph_map.items():
        if value == old_subgraph:
            subgraph_map[key] = new_subgraph
    return new_subgraph