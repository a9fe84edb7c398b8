import pytest
from hypothesis import given
from hypothesis import strategies as st

from skelgraph.templates import VoxelTemplateMatcher
from skelgraph.topology import (
    is_end_point,
    is_removable_edge_point,
    is_simple_point,
    neighbor_index_to_bit,
)

ALL_BITS = (1 << 27) - 1
CENTER = 1 << 13
NON_CENTER_BITS = [b for b in range(27) if b != 13]


def _bit(x, y, z):
    return 1 << (x + 3 * y + 9 * z)


def _mirror_x(neighbors):
    out = 0
    for z in range(3):
        for y in range(3):
            for x in range(3):
                if neighbors & _bit(x, y, z):
                    out |= _bit(2 - x, y, z)
    return out


def _always_matcher():
    matcher = VoxelTemplateMatcher()
    matcher.add_integer_template(0, 0)
    return matcher


neighborhoods = st.integers(min_value=0, max_value=ALL_BITS)


@pytest.mark.parametrize(
    "index, bit", [(24, 0), (12, 1), (4, 4), (1, 12), (0, 14), (13, 19), (19, 26)]
)
def test_neighbor_index_to_bit_table(index, bit):
    assert neighbor_index_to_bit(index) == bit


def test_neighbor_index_to_bit_is_bijection_onto_non_center():
    bits = sorted(neighbor_index_to_bit(i) for i in range(26))
    assert bits == NON_CENTER_BITS


@pytest.mark.parametrize("index", [26, 100, -1])
def test_neighbor_index_out_of_range_maps_to_center(index):
    assert neighbor_index_to_bit(index) == 13


def test_empty_neighborhood_is_simple():
    assert is_simple_point(0) is True


@pytest.mark.parametrize("bit", NON_CENTER_BITS)
def test_single_neighbor_is_simple(bit):
    assert is_simple_point(1 << bit) is True


def test_full_neighborhood_is_simple():
    assert is_simple_point(ALL_BITS) is True


def test_opposite_faces_are_not_simple():
    assert is_simple_point(_bit(1, 1, 0) | _bit(1, 1, 2)) is False


def test_opposite_corners_are_not_simple():
    assert is_simple_point(_bit(0, 0, 0) | _bit(2, 2, 2)) is False


def test_adjacent_pair_is_simple():
    assert is_simple_point(_bit(0, 0, 0) | _bit(1, 0, 0)) is True


@given(neighborhoods)
def test_center_bit_is_ignored(neighbors):
    assert is_simple_point(neighbors | CENTER) == is_simple_point(neighbors & ~CENTER)


@given(neighborhoods)
def test_simplicity_is_mirror_symmetric(neighbors):
    assert is_simple_point(neighbors) == is_simple_point(_mirror_x(neighbors))


@pytest.mark.parametrize("bit", NON_CENTER_BITS)
def test_single_neighbor_is_end_point(bit):
    matcher = VoxelTemplateMatcher()
    matcher.set_corner_templates()
    assert is_end_point(1 << bit, matcher) is True


def test_two_six_connected_neighbors_are_not_end_point():
    matcher = _always_matcher()
    assert is_end_point(_bit(1, 1, 0) | _bit(1, 1, 2), matcher) is False


def test_end_point_follows_corner_templates():
    neighbors = _bit(0, 0, 0) | _bit(1, 0, 0)
    assert is_end_point(neighbors, _always_matcher()) is True
    assert is_end_point(neighbors, VoxelTemplateMatcher()) is False


def test_not_removable_without_deletion_match():
    neighbors = _bit(0, 0, 0) | _bit(1, 0, 0)
    assert is_removable_edge_point(neighbors, VoxelTemplateMatcher(), VoxelTemplateMatcher()) is False


def test_removable_when_simple_and_not_end():
    neighbors = _bit(0, 0, 0) | _bit(1, 0, 0)
    assert is_removable_edge_point(neighbors, _always_matcher(), VoxelTemplateMatcher()) is True


def test_end_point_is_not_removable():
    assert is_removable_edge_point(_bit(0, 0, 0), _always_matcher(), VoxelTemplateMatcher()) is False


def test_non_simple_is_not_removable():
    neighbors = _bit(1, 1, 0) | _bit(1, 1, 2)
    assert is_removable_edge_point(neighbors, _always_matcher(), VoxelTemplateMatcher()) is False


@given(neighborhoods)
def test_removable_implies_conditions(neighbors):
    deletion = VoxelTemplateMatcher()
    deletion.set_deletion_templates()
    corner = VoxelTemplateMatcher()
    corner.set_corner_templates()
    if is_removable_edge_point(neighbors, deletion, corner):
        assert deletion.fits_templates(neighbors)
        assert is_simple_point(neighbors)
        assert not is_end_point(neighbors, corner)
    else:
        assert (
            not deletion.fits_templates(neighbors)
            or not is_simple_point(neighbors)
            or is_end_point(neighbors, corner)
        )