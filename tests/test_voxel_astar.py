import math

from hypothesis import given, settings
from hypothesis import strategies as st

from skelgraph.voxel_astar import NEIGHBORHOOD, VoxelAStar, voxel_path_to_coordinates


def _in_box(limit):
    def valid(offset):
        return all(-limit <= c <= limit for c in offset)

    return valid


def _is_connected(path):
    offsets = {o for o, _ in NEIGHBORHOOD}
    return all(
        tuple(b - a for a, b in zip(p, q)) in offsets for p, q in zip(path, path[1:])
    )


def test_each_neighbor_is_reached_in_one_step():
    offsets = [o for o, _ in NEIGHBORHOOD]
    assert len(set(offsets)) == 26
    assert (0, 0, 0) not in offsets
    for offset in offsets:
        path = VoxelAStar().find_path(offset, _in_box(1))
        assert path == [(0, 0, 0), offset]


def test_estimate_cost_is_euclidean():
    astar = VoxelAStar()
    assert astar.estimate_cost_to_goal((0, 0, 0), (3, 4, 0)) == 5.0


def test_goal_at_origin():
    assert VoxelAStar().find_path((0, 0, 0), lambda o: False) == [(0, 0, 0)]


@settings(max_examples=30, deadline=None)
@given(st.tuples(*(st.integers(-3, 3) for _ in range(3))))
def test_path_reaches_goal_in_open_box(goal):
    valid = _in_box(3)
    path = VoxelAStar().find_path(goal, valid)
    assert path[0] == (0, 0, 0)
    assert path[-1] == goal
    assert _is_connected(path)
    assert all(valid(o) for o in path[1:])


def test_blocked_search_gives_none():
    assert VoxelAStar().find_path((2, 0, 0), lambda o: False) is None


def test_wall_is_avoided():
    def valid(offset):
        inside = _in_box(4)(offset)
        wall = offset[0] == 1 and offset[1] < 3
        return inside and not wall

    path = VoxelAStar().find_path((2, 0, 0), valid)
    assert path[-1] == (2, 0, 0)
    assert _is_connected(path)
    assert all(not (o[0] == 1 and o[1] < 3) for o in path)


def test_iteration_limit_stops_search():
    assert VoxelAStar(max_iterations=1).find_path((3, 0, 0), _in_box(5)) is None


def test_target_ends_search_early():
    path = VoxelAStar().find_path((4, 0, 0), _in_box(4), lambda o: o[0] == 2)
    assert path[-1][0] == 2
    assert all(o[0] < 2 for o in path[:-1])
    assert _is_connected(path)


def test_voxel_path_to_coordinates():
    coords = voxel_path_to_coordinates((1.0, 2.0, 3.0), 0.5, [(0, 0, 0), (1, -1, 2)])
    assert coords == [(1.0, 2.0, 3.0), (1.5, 1.5, 4.0)]


def test_coordinate_path_step_lengths_match_voxel_size():
    path = VoxelAStar().find_path((3, 2, 1), _in_box(3))
    coords = voxel_path_to_coordinates((0.0, 0.0, 0.0), 0.2, path)
    assert len(coords) == len(path)
    for a, b in zip(coords, coords[1:]):
        assert 0.2 - 1e-9 <= math.dist(a, b) <= 0.2 * math.sqrt(3) + 1e-9