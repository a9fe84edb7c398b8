"""Decisions used to build the skeleton diagram from a distance field.

These are the per-voxel rules: which neighbouring wavefronts count as
basis directions, how basis counts or neighbour counts classify a voxel,
and which crowded vertices are pruned away.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from .graph import Point, SkeletonPoint

DEFAULT_MIN_SEPARATION_ANGLE = 0.785
DEFAULT_NUM_NEIGHBORS_FOR_EDGE = 18
DEFAULT_VERTEX_PRUNING_RADIUS = 0.35
DEFAULT_MIN_GVD_DISTANCE = 0.4

_EPSILON = 1e-6


class VoxelClass(NamedTuple):
    """Which parts of the diagram a voxel belongs to."""

    is_face: bool
    is_edge: bool
    is_vertex: bool


def _norm(vector: Sequence[float]) -> float:
    return math.sqrt(sum(c * c for c in vector))


def _normalized(vector: Sequence[float]) -> Point | None:
    length = _norm(vector)
    if length < _EPSILON:
        return None
    x, y, z = vector
    return (x / length, y / length, z / length)


def basis_directions(
    parent: Sequence[float],
    relative_directions: Iterable[Sequence[float]],
    min_separation_angle: float = DEFAULT_MIN_SEPARATION_ANGLE,
) -> list[Point]:
    """Return the unit directions that diverge from ``parent`` enough.

    ``parent`` is the voxel's direction to its nearest obstacle, and each
    relative direction is a neighbour's parent direction plus its offset
    from the voxel.  Directions of (nearly) zero length are skipped, and a
    parent-less voxel has no basis directions at all.  A direction is kept
    when its angle to the parent is at least ``min_separation_angle``.
    """
    parent_dir = _normalized(parent)
    if parent_dir is None:
        return []
    kept: list[Point] = []
    for direction in relative_directions:
        unit = _normalized(direction)
        if unit is None:
            # The neighbour points back at this voxel: it is its parent.
            continue
        dot = sum(a * b for a, b in zip(unit, parent_dir))
        angle = math.acos(max(-1.0, min(1.0, dot)))
        if angle >= min_separation_angle:
            kept.append(unit)
    return kept


def classify_basis_points(num_basis_points: int) -> VoxelClass:
    """Classify a diagram voxel by the number of its basis points."""
    return VoxelClass(
        is_face=num_basis_points == 9,
        is_edge=num_basis_points >= 12,
        is_vertex=num_basis_points == 16,
    )


def is_edge_by_neighbor_count(
    num_neighbors_on_face: int,
    num_neighbors_for_edge: int = DEFAULT_NUM_NEIGHBORS_FOR_EDGE,
) -> bool:
    """True if enough neighbours lie on the diagram for the voxel to be an edge."""
    return num_neighbors_on_face >= num_neighbors_for_edge


def is_vertex_by_neighbor_count(num_neighbors_on_edges: int) -> bool:
    """True if an edge voxel is a junction (3 or more edge neighbours) or a tip (1)."""
    return num_neighbors_on_edges >= 3 or num_neighbors_on_edges == 1


def _squared_distance(a: Point, b: Point) -> float:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def vertices_to_prune(
    points: Sequence[SkeletonPoint],
    radius: float = DEFAULT_VERTEX_PRUNING_RADIUS,
) -> list[int]:
    """Return, in ascending order, the indices of vertices to drop.

    Among vertices closer together than ``radius``, only the one furthest
    from obstacles survives; on a tie the vertex met first is kept.
    """
    squared_radius = radius * radius
    deleted: set[int] = set()
    for i, vertex in enumerate(points):
        if i in deleted:
            continue
        matches = sorted(
            (d, j)
            for j, other in enumerate(points)
            if (d := _squared_distance(vertex.point, other.point)) < squared_radius
        )
        favorite = i
        largest = vertex.distance
        for _, j in matches:
            if j == i or j in deleted:
                continue
            if points[j].distance > largest:
                deleted.add(favorite)
                favorite = j
                largest = points[j].distance
            else:
                deleted.add(j)
    return sorted(deleted)