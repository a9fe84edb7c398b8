"""Topological tests on 3x3x3 voxel neighbourhoods used to thin the diagram.

Neighbourhoods are integers whose low 27 bits give the occupancy of the
cube, numbered ``x + 3 * y + 9 * z``; bit 13 is the centre voxel and is
ignored by the connectivity tests.
"""

from __future__ import annotations

from .templates import NEIGHBORHOOD_BITS, VoxelTemplateMatcher

CENTER_BIT = 13
_BIT_MASK = (1 << NEIGHBORHOOD_BITS) - 1

# Neighbour order (6-connected first, then 18-, then 26-connected) to the
# position in the 3x3x3 cube.
_NEIGHBOR_TO_BIT: dict[int, int] = {
    24: 0,
    12: 1,
    20: 2,
    15: 3,
    4: 4,
    14: 5,
    22: 6,
    10: 7,
    18: 8,
    9: 9,
    3: 10,
    7: 11,
    1: 12,
    0: 14,
    8: 15,
    2: 16,
    6: 17,
    25: 18,
    13: 19,
    21: 20,
    17: 21,
    5: 22,
    16: 23,
    23: 24,
    11: 25,
    19: 26,
}

# For each octant of the cube without its centre (26 positions, indexed
# 0..25), the positions it holds and the octants each position also
# belongs to.  Two positions are 26-adjacent exactly when they share an
# octant, so flooding through this table labels connected components.
_OCTANTS: dict[int, tuple[tuple[int, tuple[int, ...]], ...]] = {
    1: ((0, ()), (1, (2,)), (3, (3,)), (4, (2, 3, 4)), (9, (5,)),
        (10, (2, 5, 6)), (12, (3, 5, 7))),
    2: ((1, (1,)), (4, (1, 3, 4)), (10, (1, 5, 6)), (2, ()), (5, (4,)),
        (11, (6,)), (13, (4, 6, 8))),
    3: ((3, (1,)), (4, (1, 2, 4)), (12, (1, 5, 7)), (6, ()), (7, (4,)),
        (14, (7,)), (15, (4, 7, 8))),
    4: ((4, (1, 2, 3)), (5, (2,)), (13, (2, 6, 8)), (7, (3,)),
        (15, (3, 7, 8)), (8, ()), (16, (8,))),
    5: ((9, (1,)), (10, (1, 2, 6)), (12, (1, 3, 7)), (17, ()), (18, (6,)),
        (20, (7,)), (21, (6, 7, 8))),
    6: ((10, (1, 2, 5)), (11, (2,)), (13, (2, 4, 8)), (18, (5,)),
        (21, (5, 7, 8)), (19, ()), (22, (8,))),
    7: ((12, (1, 3, 5)), (14, (3,)), (15, (3, 4, 8)), (20, (5,)),
        (21, (5, 6, 8)), (23, ()), (24, (8,))),
    8: ((13, (2, 4, 6)), (15, (3, 4, 7)), (16, (4,)), (21, (5, 6, 7)),
        (22, (6,)), (24, (7,)), (25, ())),
}

# The octant from which to start labelling a given cube position.
_START_OCTANT: dict[int, int] = {}
for _octant, _members in sorted(_OCTANTS.items(), reverse=True):
    for _position, _ in _members:
        _START_OCTANT[_position] = _octant


def neighbor_index_to_bit(neighbor_index: int) -> int:
    """Map a neighbour's index in neighbourhood order to its cube bit.

    Indices outside the 26 neighbours map to the centre bit.
    """
    return _NEIGHBOR_TO_BIT.get(neighbor_index, CENTER_BIT)


def _cube_without_center(neighbors: int) -> list[int]:
    neighbors &= _BIT_MASK
    return [(neighbors >> bit) & 1 for bit in range(NEIGHBORHOOD_BITS) if bit != CENTER_BIT]


def _label_octant(octant: int, label: int, cube: list[int]) -> None:
    pending = [octant]
    while pending:
        current = pending.pop()
        for position, linked_octants in _OCTANTS[current]:
            if cube[position] == 1:
                cube[position] = label
                pending.extend(linked_octants)


def is_simple_point(neighbors: int) -> bool:
    """True if removing the centre leaves the neighbours at most one 26-connected piece."""
    cube = _cube_without_center(neighbors)
    components = 0
    for position, value in enumerate(cube):
        if value != 1:
            continue
        components += 1
        if components >= 2:
            return False
        _label_octant(_START_OCTANT[position], components + 1, cube)
    return True


def is_end_point(neighbors: int, corner_matcher: VoxelTemplateMatcher) -> bool:
    """True if the centre ends a line of the diagram.

    That is the case with exactly one neighbour, or with at most one
    6-connected neighbour and a neighbourhood that fits a corner template.
    """
    neighbors &= _BIT_MASK
    if neighbors.bit_count() == 1:
        return True
    six_connected = neighbors & corner_matcher.six_conn_neighbor_mask()
    if six_connected.bit_count() > 1:
        return False
    return corner_matcher.fits_templates(neighbors)


def is_removable_edge_point(
    neighbors: int,
    deletion_matcher: VoxelTemplateMatcher,
    corner_matcher: VoxelTemplateMatcher,
) -> bool:
    """True if an edge point may be thinned away.

    It must fit a deletion template, be simple, and not be an end point.
    """
    return (
        deletion_matcher.fits_templates(neighbors)
        and is_simple_point(neighbors)
        and not is_end_point(neighbors, corner_matcher)
    )