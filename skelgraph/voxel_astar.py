"""A* search over voxel offsets in a 26-connected grid."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from .graph import Point

Offset = tuple[int, int, int]

ORIGIN_OFFSET: Offset = (0, 0, 0)


def _neighborhood() -> tuple[tuple[Offset, float], ...]:
    offsets = [
        (x, y, z)
        for x in (-1, 0, 1)
        for y in (-1, 0, 1)
        for z in (-1, 0, 1)
        if (x, y, z) != (0, 0, 0)
    ]
    # Face neighbours first, then edge neighbours, then corners.
    offsets.sort(key=lambda o: sum(abs(c) for c in o))
    return tuple((o, math.sqrt(sum(abs(c) for c in o))) for o in offsets)


NEIGHBORHOOD: tuple[tuple[Offset, float], ...] = _neighborhood()


def voxel_path_to_coordinates(
    start_location: Sequence[float], voxel_size: float, voxel_path: Sequence[Offset]
) -> list[Point]:
    """Turn voxel offsets from a start voxel centre into coordinates."""
    sx, sy, sz = start_location
    return [
        (sx + ox * voxel_size, sy + oy * voxel_size, sz + oz * voxel_size)
        for ox, oy, oz in voxel_path
    ]


class VoxelAStar:
    """A* over voxel offsets relative to a start voxel at the origin.

    A positive ``max_iterations`` bounds the number of expansions.
    """

    def __init__(self, max_iterations: int = 0) -> None:
        self.max_iterations = max_iterations

    def estimate_cost_to_goal(self, offset: Sequence[int], goal_offset: Sequence[int]) -> float:
        """Straight-line distance between two offsets, in voxels."""
        return math.sqrt(sum((g - o) ** 2 for o, g in zip(offset, goal_offset)))

    def find_path(
        self,
        goal_offset: Sequence[int],
        is_valid: Callable[[Offset], bool],
        is_target: Callable[[Offset], bool] | None = None,
    ) -> list[Offset] | None:
        """Search from the origin to ``goal_offset``.

        ``is_valid`` tells whether a neighbouring offset may be entered.
        When ``is_target`` is given, the search also ends at the first
        expanded offset it accepts.  Returns the offsets from the origin to
        the end of the path, or None when none is found.
        """
        goal: Offset = (int(goal_offset[0]), int(goal_offset[1]), int(goal_offset[2]))
        f_score = {ORIGIN_OFFSET: self.estimate_cost_to_goal(ORIGIN_OFFSET, goal)}
        g_score = {ORIGIN_OFFSET: 0.0}
        parents: dict[Offset, Offset] = {}
        # A dict keeps insertion order, which settles ties between equal scores.
        open_set: dict[Offset, None] = {ORIGIN_OFFSET: None}
        closed_set: set[Offset] = set()
        iterations = 0

        while open_set:
            iterations += 1
            if self.max_iterations > 0 and iterations > self.max_iterations:
                break
            current = min(open_set, key=f_score.__getitem__)
            del open_set[current]
            if current == goal:
                return _solution_path(goal, parents)
            closed_set.add(current)
            if is_target is not None and is_target(current):
                return _solution_path(current, parents)

            cx, cy, cz = current
            for (dx, dy, dz), step in NEIGHBORHOOD:
                neighbor = (cx + dx, cy + dy, cz + dz)
                if not is_valid(neighbor):
                    continue
                if neighbor in closed_set:
                    continue
                open_set.setdefault(neighbor, None)
                tentative = g_score[current] + step
                if neighbor not in g_score or g_score[neighbor] < tentative:
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + self.estimate_cost_to_goal(neighbor, goal)
                    parents[neighbor] = current
        return None


def _solution_path(end: Offset, parents: dict[Offset, Offset]) -> list[Offset]:
    path = [end]
    current = end
    while current in parents:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path